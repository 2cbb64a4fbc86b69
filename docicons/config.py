"""Environment driven settings for the icon resolver."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

ROOT_ENV_VAR = "DOCICONS_ROOT"
LOG_LEVEL_ENV_VAR = "DOCICONS_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class IconSettings(BaseModel):
    """Where icon set files live and how chatty the package is.

    - icons_root: directory holding the installed icon set packages, laid out
      the way a ``node_modules`` tree is (``@iconify-json/lucide/icons.json``).
    - log_level: level applied to the package logger by the CLI.
    """

    model_config = ConfigDict(frozen=True, validate_default=True)

    icons_root: Path = Path("node_modules")
    log_level: str = "INFO"

    @field_validator("icons_root")
    @classmethod
    def _absolute_root(cls, value: Path) -> Path:
        return value.expanduser().resolve()

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = value.strip().upper() or "INFO"
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}, expected one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "IconSettings":
        env = os.environ if environ is None else environ
        values = {}
        if env.get(ROOT_ENV_VAR):
            values["icons_root"] = Path(env[ROOT_ENV_VAR])
        if env.get(LOG_LEVEL_ENV_VAR):
            values["log_level"] = env[LOG_LEVEL_ENV_VAR]
        return cls(**values)
