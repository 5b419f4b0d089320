"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "DOC2QUARTO_"

ParserPreset = Literal["commonmark", "default", "zero", "js-default", "gfm-like"]


class Settings(BaseModel):
    app_name:            str  = "doc2quarto"
    output_suffix:       str  = Field(default=".qmd", pattern=r"^\.\w+$", description="Extension for converted markdown")
    dry_run:             bool = Field(default=False, description="Convert and report without writing anything")
    verbose:             bool = Field(default=False, description="Log every visited entry")
    protect_code_fences: bool = Field(default=True,  description="Leave ::: lines inside fenced code untouched")
    parser_config:       ParserPreset = Field(default="commonmark", description="MarkdownIt preset used to locate code fences")
    log_format:          str  = Field(default="%(levelname)s %(name)s: %(message)s", description="logging format string")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then DOC2QUARTO_<FIELD> env vars, then non-None CLI overrides."""
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
