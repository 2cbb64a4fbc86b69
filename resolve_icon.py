#!/usr/bin/env python3
"""Entry point wrapper for the documentation icon resolver."""

from docicons import (
    IconNotFoundError,
    IconResolutionError,
    MalformedIdentifierError,
    UnknownPrefixError,
    main,
    resolve_icon,
)

__all__ = [
    "IconNotFoundError",
    "IconResolutionError",
    "MalformedIdentifierError",
    "UnknownPrefixError",
    "main",
    "resolve_icon",
]


if __name__ == "__main__":
    main()
