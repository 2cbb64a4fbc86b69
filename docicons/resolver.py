"""Turn ``prefix:name`` identifiers into inline SVG markup."""
from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .errors import IconNotFoundError, MalformedIdentifierError
from .models import IconRecord, IconSet
from .sources import IconSetLoader
from .utils import format_dimension, get_logger

LOGGER = get_logger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
DEFAULT_DIMENSION = 24
DISPLAY_SIZE = 24

FILL_RE = re.compile(r'fill="([^"]*)"')
INHERITABLE_FILLS = {"none", "currentColor"}


def has_explicit_colors(body: str) -> bool:
    """Return True if *body* carries a fill other than ``none`` or ``currentColor``.

    This is a textual scan, not a color parser: hex codes, CSS variables,
    gradient references and named colors all count as explicit colors.
    """
    fills: List[str] = FILL_RE.findall(body)
    return any(value not in INHERITABLE_FILLS for value in fills)


def split_identifier(identifier: str) -> Tuple[str, str]:
    """Split on the first colon. A leading colon yields an empty prefix."""
    prefix, sep, name = identifier.partition(":")
    if not sep:
        raise MalformedIdentifierError(identifier)
    return prefix, name


def icon_dimensions(icon: IconRecord, icon_set: IconSet) -> Tuple[float, float]:
    width = icon.width if icon.width is not None else icon_set.width
    height = icon.height if icon.height is not None else icon_set.height
    return (
        width if width is not None else DEFAULT_DIMENSION,
        height if height is not None else DEFAULT_DIMENSION,
    )


def is_palette_icon(icon: IconRecord, icon_set: IconSet) -> bool:
    return icon_set.palette or has_explicit_colors(icon.body)


def render_svg(icon: IconRecord, icon_set: IconSet) -> str:
    """Build the complete ``<svg>`` element for *icon*."""
    width, height = icon_dimensions(icon, icon_set)
    fill_attr = "" if is_palette_icon(icon, icon_set) else ' fill="currentColor"'
    return (
        f'<svg xmlns="{SVG_NAMESPACE}" width="{DISPLAY_SIZE}" height="{DISPLAY_SIZE}" '
        f'viewBox="0 0 {format_dimension(width)} {format_dimension(height)}"{fill_attr}>'
        f"{icon.body}</svg>"
    )


class IconResolver:
    """Resolve icon identifiers against the icon sets an :class:`IconSetLoader` knows."""

    def __init__(self, loader: Optional[IconSetLoader] = None) -> None:
        self.loader = loader or IconSetLoader.from_settings()

    def lookup(self, identifier: str) -> Tuple[IconRecord, IconSet]:
        prefix, name = split_identifier(identifier)
        icon_set = self.loader.load(prefix)
        icon = icon_set.icons.get(name)
        if icon is None:
            raise IconNotFoundError(name, prefix)
        return icon, icon_set

    def resolve(self, identifier: str) -> str:
        icon, icon_set = self.lookup(identifier)
        LOGGER.debug(
            "Resolved %s (%s)",
            identifier,
            "palette" if is_palette_icon(icon, icon_set) else "monochrome",
        )
        return render_svg(icon, icon_set)


def resolve_icon(identifier: str) -> str:
    """Resolve *identifier* using icon sets found under ``DOCICONS_ROOT``.

    Designed for synchronous use while building site configuration, e.g.::

        {"label": "Docs", "icon": resolve_icon("lucide:book-open")}
    """
    return IconResolver().resolve(identifier)
