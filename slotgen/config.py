"""Load component manifests and build template registries from them."""

from __future__ import annotations

from pathlib import Path

import yaml

from .models import ComponentManifest
from .registry import JinjaTemplate, TemplateRegistry, jinja_environment


def load_manifest(path: Path) -> ComponentManifest:
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    return ComponentManifest.model_validate(data)


def templates_dir(manifest: ComponentManifest, base_dir: Path) -> Path:
    """Directory template files are resolved against."""

    if manifest.templates_dir is None:
        return base_dir
    return base_dir / manifest.templates_dir


def registry_from_manifest(manifest: ComponentManifest, base_dir: Path) -> TemplateRegistry:
    """Compile every component template; missing files and syntax errors propagate."""

    env = jinja_environment(templates_dir(manifest, base_dir))
    templates = {}
    for component in manifest.components:
        if component.source is not None:
            compiled = env.from_string(component.source)
        else:
            compiled = env.get_template(component.template)
        templates[component.tag] = JinjaTemplate(compiled)
    return TemplateRegistry(templates)


__all__ = ["load_manifest", "registry_from_manifest", "templates_dir"]
