"""Server-side rendering of custom elements into static markup."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from bs4 import BeautifulSoup

from .config import load_manifest, registry_from_manifest
from .dom import parse_document
from .io_utils import read_document
from .registry import TemplateRegistry
from .resources import merge_resources
from .walker import DEFAULT_MAX_DEPTH, process_custom_elements


class Renderer:
    """Expand registered custom elements and hoist their resources.

    The registry is fixed at construction and only read afterwards, so one
    renderer may serve concurrent ``render`` calls as long as its templates
    are themselves free of side effects.
    """

    def __init__(
        self,
        registry: Mapping,
        *,
        body_only: bool = False,
        max_depth: int = DEFAULT_MAX_DEPTH,
        encoding: str = "utf-8",
    ) -> None:
        self.registry = registry if isinstance(registry, TemplateRegistry) else TemplateRegistry(registry)
        self.body_only = body_only
        self.max_depth = max_depth
        self.encoding = encoding

    @classmethod
    def from_manifest(cls, path: Path, *, body_only: bool | None = None) -> "Renderer":
        """Build a renderer from a components.yaml manifest."""

        path = Path(path)
        manifest = load_manifest(path)
        options = manifest.options()
        return cls(
            registry_from_manifest(manifest, path.parent),
            body_only=options.body_only if body_only is None else body_only,
            max_depth=options.max_depth,
            encoding=options.encoding,
        )

    def render(self, markup: str) -> str:
        """Render a full HTML document string."""

        return self._render(parse_document(markup))

    def render_file(self, path: Path, encoding: str | None = None) -> str:
        """Read, decode and render an HTML file.

        ``encoding`` defaults to the one the renderer was built with.
        """

        return self.render(read_document(path, encoding or self.encoding))

    def _render(self, soup: BeautifulSoup) -> str:
        resources = process_custom_elements(soup.body, self.registry, max_depth=self.max_depth)
        merge_resources(soup, resources)
        if self.body_only:
            return soup.body.decode_contents()
        return soup.decode()


def render(markup: str, registry: Mapping, *, body_only: bool = False) -> str:
    """Render ``markup`` once with a throwaway renderer."""

    return Renderer(registry, body_only=body_only).render(markup)


__all__ = ["Renderer", "render"]
