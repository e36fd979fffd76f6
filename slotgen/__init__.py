"""Expand custom elements and their slots into static HTML."""

__version__ = "0.1.0"

from .names import is_custom_element
from .registry import JinjaTemplate, Template, TemplateRegistry, template_from_source
from .renderer import Renderer, render
from .walker import ExpansionDepthError

__all__ = [
    "ExpansionDepthError",
    "JinjaTemplate",
    "Renderer",
    "Template",
    "TemplateRegistry",
    "is_custom_element",
    "render",
    "template_from_source",
]
