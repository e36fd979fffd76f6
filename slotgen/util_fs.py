"""Writing rendered pages to disk."""

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def write_output(path: PathLike, markup: str, encoding: str = "utf-8") -> Path:
    """Save rendered ``markup`` to ``path`` in the page's encoding.

    Missing output directories are created. Characters the encoding cannot
    represent become numeric character references, so a page read as
    latin-1 can still carry the output of a template written in utf-8.
    """

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(markup.encode(encoding, errors="xmlcharrefreplace"))
    return target


__all__ = ["write_output"]
