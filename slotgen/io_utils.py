"""Utility helpers for document IO and CLI diagnostics."""

from __future__ import annotations

import sys
from pathlib import Path


def read_document(path: Path, encoding: str = "utf-8") -> str:
    """Decode a document from disk; decoding errors propagate."""

    return Path(path).read_bytes().decode(encoding)


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
