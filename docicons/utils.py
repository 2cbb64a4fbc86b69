"""Logging and file helpers shared by the icon resolver."""
from __future__ import annotations

import json
import logging
import os
import pathlib
from typing import Any, Optional

LOGGER_NAME = "docicons"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the package logger, configuring the latter once.

    Module loggers carry no handler or level of their own so that a single
    ``setLevel`` on the package logger (the CLI's ``--verbose``) applies to all.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "[%(levelname)s] %(name)s: %(message)s"
        )
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        package_logger.setLevel(logging.INFO)
    if not name or name == LOGGER_NAME:
        return package_logger
    return logging.getLogger(name)


def read_json_file(path: str | os.PathLike[str]) -> Any:
    """Load JSON data from *path*, letting I/O and decode errors propagate."""
    file_path = pathlib.Path(path)
    with file_path.open("r", encoding="utf8") as handle:
        return json.load(handle)


def format_dimension(value: float) -> str:
    """Render ``24.0`` as ``24`` and keep real fractions such as ``16.5``."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
