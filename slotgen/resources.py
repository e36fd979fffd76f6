"""Deduplicate lifted template resources and place them in the document."""

from __future__ import annotations

import logging
from typing import Dict, List

from bs4 import BeautifulSoup, Tag

from .dom import node_data
from .walker import ResourceAccumulator

log = logging.getLogger(__name__)


def script_key(script: Tag) -> str:
    """Inline content, else ``src``; empty when the script has neither."""

    return node_data(script) or script.get("src") or ""


def link_key(link: Tag) -> str:
    return ";".join(f"{name}={value}" for name, value in sorted(link.attrs.items()))


def unique_scripts(scripts: List[Tag]) -> List[Tag]:
    # First sighting fixes the position, the last element seen for a key wins.
    unique: Dict[str, Tag] = {}
    for script in scripts:
        key = script_key(script)
        if key:
            unique[key] = script
    return list(unique.values())


def merged_styles(styles: List[Tag]) -> str:
    """Distinct style bodies joined by newlines, ``@import`` rules first."""

    bodies = list(dict.fromkeys(node_data(style) for style in styles))
    bodies.sort(key=lambda text: not text.strip().startswith("@import"))
    return "\n".join(bodies)


def unique_links(links: List[Tag]) -> List[Tag]:
    unique: Dict[str, Tag] = {}
    for link in links:
        unique[link_key(link)] = link
    return list(unique.values())


def merge_resources(soup: BeautifulSoup, resources: ResourceAccumulator) -> None:
    """Append scripts to <body>, one merged <style> and the links to <head>."""

    head = soup.head
    body = soup.body

    scripts = unique_scripts(resources.scripts)
    for script in scripts:
        body.append(script)

    css = merged_styles(resources.styles)
    if css:
        style = soup.new_tag("style")
        style.string = css
        head.append(style)

    links = unique_links(resources.links)
    for link in links:
        head.append(link)

    log.debug(
        "Merged %d script(s), %d style block(s), %d link(s)",
        len(scripts),
        len(resources.styles),
        len(links),
    )


__all__ = ["link_key", "merge_resources", "merged_styles", "script_key", "unique_links", "unique_scripts"]
