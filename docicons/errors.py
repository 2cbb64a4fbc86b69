"""Errors raised while resolving icon identifiers."""
from __future__ import annotations

import pathlib
from typing import Sequence


class IconResolutionError(RuntimeError):
    """Base class for every error raised by the resolver and loader."""


class MalformedIdentifierError(IconResolutionError):
    """Raised when an identifier lacks the ``prefix:name`` separator."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f'Invalid icon name "{identifier}". Expected "prefix:name" format.')
        self.identifier = identifier


class UnknownPrefixError(IconResolutionError):
    """Raised when a prefix is not one of the supported icon sets."""

    def __init__(self, prefix: str, available: Sequence[str]) -> None:
        super().__init__(
            f'Unknown icon prefix "{prefix}". Available: {", ".join(available)}'
        )
        self.prefix = prefix
        self.available = tuple(available)


class IconNotFoundError(IconResolutionError):
    """Raised when a known icon set has no icon with the requested name."""

    def __init__(self, name: str, prefix: str) -> None:
        super().__init__(f'Icon "{name}" not found in "{prefix}" icon set.')
        self.name = name
        self.prefix = prefix


class IconSetLoadError(IconResolutionError):
    """Raised when an icon set file is missing or not valid Iconify JSON."""

    def __init__(self, prefix: str, path: pathlib.Path, reason: str) -> None:
        super().__init__(f'Could not load "{prefix}" icon set from {path}: {reason}')
        self.prefix = prefix
        self.path = path
