"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from mdcontainer.core.options import ContainerOptions


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MDCONTAINER_"


class Settings(BaseModel):
    parser_config:        str  = Field(default="gfm-like", description="MarkdownIt parser preset name")
    max_passes:           int  = Field(default=10, ge=1,   description="Max rewrite passes before giving up")
    container_tag_name:   str  = Field(default="div")
    container_class_name: str  = Field(default="remark-container")
    title_tag_name:       str  = Field(default="div")
    title_class_name:     str  = Field(default="remark-container-title")
    allow_html:           bool = Field(default=False,  description="Pass raw html through when rendering")
    output_dir:           str  = Field(default="dist", description="Directory for rendered .html files")

    def to_options(self) -> ContainerOptions:
        """Container options built from the static names in these settings."""
        return ContainerOptions(
            container_tag_name=self.container_tag_name,
            container_class_name=self.container_class_name,
            title_tag_name=self.title_tag_name,
            title_class_name=self.title_class_name,
        )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDCONTAINER_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
