"""Resolve the icons referenced by a mega menu definition."""
from __future__ import annotations

import pathlib
from typing import Any, Dict, Iterable, List, Optional

from pydantic import TypeAdapter

from .models import MegaMenuItem, MenuContent, MenuLink
from .resolver import IconResolver
from .utils import get_logger, read_json_file

LOGGER = get_logger(__name__)

_MENU_ADAPTER = TypeAdapter(List[MegaMenuItem])


def load_menu(path: str | pathlib.Path) -> List[MegaMenuItem]:
    """Read a JSON array of mega menu items from *path*."""
    return _MENU_ADAPTER.validate_python(read_json_file(path))


def dump_menu(items: Iterable[MegaMenuItem]) -> List[Dict[str, Any]]:
    return [item.model_dump(exclude_none=True) for item in items]


def _resolve_link(link: MenuLink, resolver: IconResolver) -> MenuLink:
    if not link.icon:
        return link
    return link.model_copy(update={"icon": resolver.resolve(link.icon)})


def _resolve_content(content: MenuContent, resolver: IconResolver) -> MenuContent:
    categories = [
        category.model_copy(update={"items": [_resolve_link(link, resolver) for link in category.items]})
        for category in content.categories
    ]
    return content.model_copy(update={"categories": categories})


def resolve_menu_icons(
    items: Iterable[MegaMenuItem],
    resolver: Optional[IconResolver] = None,
) -> List[MegaMenuItem]:
    """Return copies of *items* with every link icon replaced by SVG markup.

    The first icon that fails to resolve aborts the whole menu.
    """
    resolver = resolver or IconResolver()
    resolved: List[MegaMenuItem] = []
    for item in items:
        if item.content is None:
            resolved.append(item)
            continue
        resolved.append(item.model_copy(update={"content": _resolve_content(item.content, resolver)}))
    LOGGER.debug("Resolved icons for %s menu items", len(resolved))
    return resolved
