"""Thin helpers around the BeautifulSoup tree used during rendering."""

from __future__ import annotations

from typing import Iterable, List

from bs4 import BeautifulSoup, Doctype, NavigableString, Tag
from bs4.element import PageElement

PARSER = "html.parser"

# Elements that belong in <head> when a document arrives without one.
HEAD_TAGS = {"title", "meta", "base"}


def _soup(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, PARSER, multi_valued_attributes=None)


def node_data(tag: Tag) -> str:
    """Return the raw text payload held directly by ``tag`` (script/style data)."""

    return "".join(str(child) for child in tag.contents if isinstance(child, NavigableString))


def child_elements(tag: Tag) -> List[Tag]:
    return [child for child in tag.contents if isinstance(child, Tag)]


def splice(target: PageElement, nodes: Iterable[PageElement]) -> None:
    """Insert ``nodes`` in order at the position of ``target`` and drop ``target``."""

    for node in list(nodes):
        target.insert_before(node)
    target.extract()


def _is_blank(node: PageElement) -> bool:
    return isinstance(node, NavigableString) and not str(node).strip()


def ensure_document(soup: BeautifulSoup) -> BeautifulSoup:
    """Guarantee an <html> root holding one <head> and one <body>."""

    html = soup.find("html")
    if html is None:
        html = soup.new_tag("html")
        for node in list(soup.contents):
            if isinstance(node, Doctype):
                continue
            html.append(node)
        soup.append(html)

    head = html.find("head", recursive=False)
    if head is None:
        head = soup.new_tag("head")
        leading: List[PageElement] = []
        for node in html.contents:
            if isinstance(node, Tag) and node.name in HEAD_TAGS:
                leading.append(node)
            elif not _is_blank(node):
                break
        html.insert(0, head)
        for node in leading:
            head.append(node)

    body = html.find("body", recursive=False)
    if body is None:
        body = soup.new_tag("body")
        for node in list(html.contents):
            if node is head:
                continue
            body.append(node)
        html.append(body)

    return soup


def parse_document(markup: str) -> BeautifulSoup:
    """Parse ``markup`` as a full document with guaranteed head and body."""

    return ensure_document(_soup(markup))


def parse_fragment(markup: str) -> BeautifulSoup:
    """Parse ``markup`` as a body fragment; the returned root holds the nodes."""

    return _soup(markup)


__all__ = [
    "child_elements",
    "ensure_document",
    "node_data",
    "parse_document",
    "parse_fragment",
    "splice",
]
