"""Custom element name checks.

See https://html.spec.whatwg.org/multipage/custom-elements.html#valid-custom-element-name
"""

from __future__ import annotations

import re
from typing import List, Tuple

# Code point ranges allowed in a potential custom element name, beyond ASCII.
PCEN_RANGES: List[Tuple[int, int]] = [
    (0xB7, 0xB7),
    (0xC0, 0xD6),
    (0xD8, 0xF6),
    (0xF8, 0x37D),
    (0x37F, 0x1FFF),
    (0x200C, 0x200D),
    (0x203F, 0x2040),
    (0x2070, 0x218F),
    (0x2C00, 0x2FEF),
    (0x3001, 0xD7FF),
    (0xF900, 0xFDCF),
    (0xFDF0, 0xFFFD),
    (0x10000, 0xEFFFF),
]


def _char_class() -> str:
    ranges = "".join(
        re.escape(chr(low)) if low == high else f"{re.escape(chr(low))}-{re.escape(chr(high))}"
        for low, high in PCEN_RANGES
    )
    return f"[\\-._0-9a-z{ranges}]"


PCEN_CHAR = _char_class()
CUSTOM_ELEMENT_RE = re.compile(f"[a-z]{PCEN_CHAR}*-{PCEN_CHAR}*")

# Kept verbatim, including "missing-glyph)" which can never equal a tag name.
RESERVED_TAGS = (
    "annotation-xml",
    "color-profile",
    "font-face",
    "font-face-src",
    "font-face-uri",
    "font-face-format",
    "font-face-name",
    "missing-glyph)",
)


def is_custom_element(tag_name: str) -> bool:
    """Return True if ``tag_name`` is a valid, non-reserved custom element name."""

    if tag_name in RESERVED_TAGS:
        return False
    return CUSTOM_ELEMENT_RE.fullmatch(tag_name) is not None


__all__ = ["is_custom_element", "RESERVED_TAGS"]
