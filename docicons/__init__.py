"""Build-time resolution of Iconify icons into inline SVG for documentation sites."""

from .config import IconSettings
from .errors import (
    IconNotFoundError,
    IconResolutionError,
    IconSetLoadError,
    MalformedIdentifierError,
    UnknownPrefixError,
)
from .models import IconRecord, IconSet, MegaMenuItem, MenuCategory, MenuContent, MenuFooter, MenuLink
from .sources import DEFAULT_SOURCES, IconSetLoader, IconSetSource, load_icon_set
from .resolver import IconResolver, has_explicit_colors, render_svg, resolve_icon, split_identifier
from .menu import dump_menu, load_menu, resolve_menu_icons
from .cli import main

__all__ = [
    "IconSettings",
    "IconResolutionError",
    "MalformedIdentifierError",
    "UnknownPrefixError",
    "IconNotFoundError",
    "IconSetLoadError",
    "IconRecord",
    "IconSet",
    "MegaMenuItem",
    "MenuCategory",
    "MenuContent",
    "MenuFooter",
    "MenuLink",
    "DEFAULT_SOURCES",
    "IconSetLoader",
    "IconSetSource",
    "load_icon_set",
    "IconResolver",
    "has_explicit_colors",
    "render_svg",
    "resolve_icon",
    "split_identifier",
    "dump_menu",
    "load_menu",
    "resolve_menu_icons",
    "main",
]
