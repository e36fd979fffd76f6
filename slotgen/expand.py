"""Render one custom element's template into a parsed fragment."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from bs4 import BeautifulSoup, Tag

from .dom import child_elements, parse_fragment
from .registry import Template

RESOURCE_TAGS = ("script", "style", "link")


@dataclass
class ExpandedTemplate:
    """A rendered template body plus the resources lifted from its top level."""

    fragment: BeautifulSoup
    scripts: List[Tag] = field(default_factory=list)
    styles: List[Tag] = field(default_factory=list)
    links: List[Tag] = field(default_factory=list)

    def resources(self, name: str) -> List[Tag]:
        return {"script": self.scripts, "style": self.styles, "link": self.links}[name]


def element_attrs(element: Tag) -> Dict[str, str]:
    return {name: value for name, value in element.attrs.items()}


def expand_template(element: Tag, template: Template) -> ExpandedTemplate:
    """Render ``template`` with the attributes of ``element``.

    Only direct children of the fragment are lifted out as scripts, styles and
    links; occurrences nested deeper in the template markup stay in place.
    The element itself is not modified.
    """

    markup = template(element_attrs(element))
    expanded = ExpandedTemplate(fragment=parse_fragment(markup))
    for child in child_elements(expanded.fragment):
        if child.name in RESOURCE_TAGS:
            expanded.resources(child.name).append(child.extract())
    return expanded


__all__ = ["ExpandedTemplate", "expand_template"]
