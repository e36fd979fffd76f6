"""Pydantic models for renderer configuration."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .names import is_custom_element
from .walker import DEFAULT_MAX_DEPTH


class ComponentSpec(BaseModel):
    """One custom element entry in a component manifest."""

    tag: str = Field(..., description="Custom element tag name (must contain a hyphen).")
    template: Optional[str] = Field(
        None, description="Template file name, relative to the templates directory."
    )
    source: Optional[str] = Field(None, description="Inline template source.")

    @field_validator("tag")
    @classmethod
    def _valid_tag(cls, value: str) -> str:
        if not is_custom_element(value):
            raise ValueError(f"'{value}' is not a valid custom element name")
        return value

    @model_validator(mode="after")
    def _one_template(self) -> "ComponentSpec":
        if (self.template is None) == (self.source is None):
            raise ValueError(f"{self.tag}: set exactly one of 'template' or 'source'")
        return self


class RenderOptions(BaseModel):
    """How a document is rendered and serialized."""

    body_only: bool = Field(
        False,
        alias="bodyOnly",
        description="Return only the inner markup of <body> instead of the whole document.",
    )
    max_depth: int = Field(
        DEFAULT_MAX_DEPTH,
        ge=1,
        alias="maxDepth",
        description="Maximum nesting of expanded custom elements.",
    )
    encoding: str = Field("utf-8", description="Character encoding for file input.")

    model_config = ConfigDict(populate_by_name=True)


class ComponentManifest(BaseModel):
    """Schema for components.yaml files."""

    templates_dir: Optional[str] = Field(
        None,
        alias="templatesDir",
        description="Directory holding template files, relative to the manifest.",
    )
    body_only: bool = Field(False, alias="bodyOnly")
    max_depth: int = Field(DEFAULT_MAX_DEPTH, ge=1, alias="maxDepth")
    encoding: str = Field("utf-8", description="Character encoding of input documents.")
    components: List[ComponentSpec] = Field(
        default_factory=list, description="Registered custom elements."
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("components")
    @classmethod
    def _unique_tags(cls, value: List[ComponentSpec]) -> List[ComponentSpec]:
        seen: set[str] = set()
        for component in value:
            if component.tag in seen:
                raise ValueError(f"duplicate component tag '{component.tag}'")
            seen.add(component.tag)
        return value

    def options(self) -> RenderOptions:
        return RenderOptions(
            body_only=self.body_only, max_depth=self.max_depth, encoding=self.encoding
        )
