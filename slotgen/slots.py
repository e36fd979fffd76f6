"""Slot resolution: merge a custom element's light content into its template."""

from __future__ import annotations

from typing import List, Set

from bs4 import Tag
from bs4.element import PageElement

from .dom import child_elements, splice
from .expand import ExpandedTemplate

DEFAULT_WRAPPER = "span"


def find_slots(expanded: ExpandedTemplate) -> List[Tag]:
    """Every <slot> in the fragment, depth first, nested custom elements included."""

    return expanded.fragment.find_all("slot")


def find_inserts(element: Tag) -> List[Tag]:
    """Direct children of ``element`` that target a named slot."""

    return [child for child in child_elements(element) if child.has_attr("slot")]


def _fill_named(slot: Tag, inserts: List[Tag], used_inserts: Set[int]) -> bool:
    # Every matching insert replaces whatever occupies the slot position, so
    # when several inserts share a name only the last one survives.
    name = slot["name"]
    current: PageElement = slot
    for insert in inserts:
        if insert.get("slot") != name:
            continue
        current.replace_with(insert)
        current = insert
        used_inserts.add(id(insert))
    return current is not slot


def _fill_unnamed(slot: Tag, element: Tag, used_inserts: Set[int]) -> None:
    leftover = [node for node in element.contents if id(node) not in used_inserts]
    if leftover:
        splice(slot, leftover)
    else:
        slot.unwrap()


def _promote_default(slot: Tag, expanded: ExpandedTemplate) -> None:
    name = slot["name"]
    elements = child_elements(slot)
    if len(elements) == 1:
        elements[0]["slot"] = name
        splice(slot, slot.contents)
        return

    wrapper = expanded.fragment.new_tag(slot.get("as") or DEFAULT_WRAPPER)
    wrapper["slot"] = name
    for node in list(slot.contents):
        wrapper.append(node)
    splice(slot, [wrapper])


def _attached(slot: Tag, expanded: ExpandedTemplate) -> bool:
    # Slots inside a replaced slot were taken out of the fragment with it.
    return any(parent is expanded.fragment for parent in slot.parents)


def fill_slots(element: Tag, expanded: ExpandedTemplate) -> None:
    """Resolve the fragment's slots against ``element`` and adopt the result.

    The element keeps its own tag name and attributes; its children are
    replaced by the resolved fragment children.
    """

    slots = find_slots(expanded)
    inserts = find_inserts(element)
    used_slots: Set[int] = set()
    used_inserts: Set[int] = set()
    unnamed: List[Tag] = []

    for slot in slots:
        if not slot.has_attr("name"):
            unnamed.append(slot)
        elif _fill_named(slot, inserts, used_inserts):
            used_slots.add(id(slot))

    # Leftovers are recomputed per slot; splicing moves them, so a second
    # unnamed slot finds nothing left and keeps its default content.
    for slot in unnamed:
        if _attached(slot, expanded):
            _fill_unnamed(slot, element, used_inserts)

    for slot in slots:
        if id(slot) in used_slots or not slot.has_attr("name"):
            continue
        if not _attached(slot, expanded):
            continue
        _promote_default(slot, expanded)

    element.clear()
    for node in list(expanded.fragment.contents):
        element.append(node)


__all__ = ["fill_slots", "find_inserts", "find_slots"]
