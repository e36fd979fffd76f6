"""Template capabilities and the immutable tag -> template registry."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Iterator, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from jinja2 import Template as JinjaSource

from .names import is_custom_element

Template = Callable[[Mapping], str]


def jinja_environment(templates_dir: Path | None = None) -> Environment:
    """Create a Jinja environment for component templates."""

    loader = FileSystemLoader([templates_dir]) if templates_dir is not None else None
    return Environment(
        loader=loader,
        autoescape=select_autoescape(["html", "jinja"], default_for_string=True),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


class JinjaTemplate:
    """Adapt a compiled Jinja template to the ``Template`` call signature.

    Element attributes are exposed to the template as ``attrs``.
    """

    def __init__(self, template: JinjaSource) -> None:
        self.template = template

    def __call__(self, attrs: Mapping) -> str:
        return self.template.render(attrs=dict(attrs))

    def __repr__(self) -> str:
        return f"JinjaTemplate({self.template.name or '<string>'})"


def template_from_source(source: str, env: Environment | None = None) -> JinjaTemplate:
    """Compile inline template source."""

    env = env or jinja_environment()
    return JinjaTemplate(env.from_string(source))


class TemplateRegistry(Mapping):
    """Read-only mapping from custom element tag name to template."""

    def __init__(self, templates: Optional[Mapping] = None) -> None:
        entries = dict(templates or {})
        for tag in entries:
            if not isinstance(tag, str):
                raise ValueError(f"Template registry keys must be strings, got {tag!r}")
        self._templates = MappingProxyType(entries)

    def __getitem__(self, tag: str) -> Template:
        return self._templates[tag]

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self) -> str:
        return f"TemplateRegistry({sorted(self._templates)})"

    def lookup(self, tag: str) -> Template | None:
        """Return the template to expand ``tag`` with, if it should be expanded."""

        if not is_custom_element(tag):
            return None
        return self._templates.get(tag)


__all__ = [
    "JinjaTemplate",
    "Template",
    "TemplateRegistry",
    "jinja_environment",
    "template_from_source",
]
