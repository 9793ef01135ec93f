"""
Runtime configuration for the Slate command line.

Configuration is loaded from the ``[slate]`` table of ``slate.toml``:

    [slate]
    log_level = "DEBUG"
    show_ast = true
    prompt = ">> "

The SLATE_LOG_LEVEL environment variable overrides ``log_level``.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

# Environment variable overriding the configured log level
SLATE_LOG_LEVEL_VAR = "SLATE_LOG_LEVEL"

DEFAULT_CONFIG_FILE = "slate.toml"


class SlateConfig(BaseModel):
    """Settings for running Slate programs."""

    log_level: str = Field(default="WARNING", description="Root logging level")
    show_ast: bool = Field(default=False, description="Print the AST before evaluating")
    prompt: str = Field(default="slate> ", description="REPL prompt")

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        level = value.upper().strip()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level {value!r}")
        return level


def load_config(toml_path: Path | None = None) -> SlateConfig:
    """
    Load configuration from slate.toml.

    Args:
        toml_path: Path to the config file; defaults to ./slate.toml

    Returns:
        SlateConfig with values from file, environment, or defaults
    """
    path = toml_path or Path(DEFAULT_CONFIG_FILE)
    data: dict[str, Any] = {}

    if path.exists():
        with open(path, "rb") as f:
            data = dict(tomllib.load(f).get("slate", {}))
        logger.debug("Loaded config from %s", path)

    env_level = os.environ.get(SLATE_LOG_LEVEL_VAR, "").strip()
    if env_level:
        data["log_level"] = env_level

    return SlateConfig.model_validate(data)
