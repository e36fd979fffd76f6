"""Single-pass expansion of every registered custom element in a tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from bs4 import Tag
from bs4.element import PageElement

from .expand import ExpandedTemplate, expand_template
from .registry import TemplateRegistry
from .slots import fill_slots

log = logging.getLogger(__name__)

# Counts custom elements produced by templates, so the limit bounds template
# recursion and not nesting written by hand in the page.
DEFAULT_MAX_DEPTH = 64


class ExpansionDepthError(RuntimeError):
    """Raised when custom elements nest deeper than the configured limit."""

    def __init__(self, tag: str, limit: int) -> None:
        super().__init__(
            f"<{tag}> would exceed the custom element nesting limit of {limit}; "
            "check for templates that (mutually) include themselves"
        )
        self.tag = tag
        self.limit = limit


@dataclass
class ResourceAccumulator:
    """Scripts, styles and links lifted from templates, in encounter order."""

    scripts: List[Tag] = field(default_factory=list)
    styles: List[Tag] = field(default_factory=list)
    links: List[Tag] = field(default_factory=list)

    def absorb(self, expanded: ExpandedTemplate) -> None:
        self.scripts.extend(expanded.scripts)
        self.styles.extend(expanded.styles)
        self.links.extend(expanded.links)


def process_custom_elements(
    body: Tag | None,
    registry: TemplateRegistry,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> ResourceAccumulator:
    """Expand custom elements under ``body`` in document order.

    The walk uses an explicit stack and reads an element's children only
    after the element has been expanded, so content spliced in by slot
    resolution (including nested custom elements) is visited by the same
    pass.

    ``max_depth`` bounds how many template expansions produced a node.
    Light content moved into a template keeps the depth of its host, so
    custom elements nested by hand in the page never reach the limit; only
    templates that keep emitting custom elements do.
    """

    resources = ResourceAccumulator()
    if body is None:
        return resources

    stack: List[Tuple[PageElement, int]] = [(body, 0)]
    # id(light child) -> (child, depth of its host); the node is held so its id stays unique
    carried: Dict[int, Tuple[PageElement, int]] = {}
    while stack:
        node, depth = stack.pop()
        if not isinstance(node, Tag):
            continue

        template = registry.lookup(node.name)
        if template is not None:
            if depth >= max_depth:
                raise ExpansionDepthError(node.name, max_depth)
            log.debug("Expanding <%s> at depth %d", node.name, depth)
            expanded = expand_template(node, template)
            resources.absorb(expanded)
            for child in node.contents:
                carried[id(child)] = (child, depth)
            fill_slots(node, expanded)
            depth += 1

        for child in reversed(node.contents):
            _, child_depth = carried.pop(id(child), (child, depth))
            stack.append((child, child_depth))

    return resources


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "ExpansionDepthError",
    "ResourceAccumulator",
    "process_custom_elements",
]
