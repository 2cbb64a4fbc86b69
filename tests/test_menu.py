import json

import pytest

from docicons.errors import IconNotFoundError
from docicons.menu import dump_menu, load_menu, resolve_menu_icons
from docicons.models import MegaMenuItem

MENU = [
    {
        "label": "Security",
        "content": {
            "layout": "grid",
            "columns": 2,
            "categories": [
                {
                    "title": "App & API Security",
                    "items": [
                        {
                            "label": "Docs Builder",
                            "description": "Build documentation sites",
                            "href": "https://example.com/builder/",
                            "icon": "f5xc:doc",
                        },
                        {"label": "Changelog", "href": "https://example.com/changes/"},
                    ],
                }
            ],
            "footer": {"label": "Console", "href": "https://example.com/console/"},
        },
    },
    {"label": "Blog", "href": "https://example.com/blog/"},
]


def _items():
    return [MegaMenuItem.model_validate(item) for item in MENU]


def test_resolve_menu_icons_replaces_identifiers_with_svg(resolver):
    resolved = resolve_menu_icons(_items(), resolver)

    links = resolved[0].content.categories[0].items
    assert links[0].icon == resolver.resolve("f5xc:doc")
    assert links[0].icon.startswith("<svg ")
    assert links[1].icon is None
    assert resolved[1].href == "https://example.com/blog/"


def test_resolve_menu_icons_leaves_input_untouched(resolver):
    items = _items()

    resolve_menu_icons(items, resolver)

    assert items[0].content.categories[0].items[0].icon == "f5xc:doc"


def test_resolve_menu_icons_aborts_on_first_bad_icon(resolver):
    items = _items()
    items[0].content.categories[0].items[1].icon = "f5xc:missing"

    with pytest.raises(IconNotFoundError):
        resolve_menu_icons(items, resolver)


def test_load_and_dump_menu_round_trip_shape(tmp_path, resolver):
    menu_path = tmp_path / "menu.json"
    menu_path.write_text(json.dumps(MENU), encoding="utf8")

    dumped = dump_menu(resolve_menu_icons(load_menu(menu_path), resolver))

    assert dumped[1] == {"label": "Blog", "href": "https://example.com/blog/"}
    assert "description" not in dumped[0]["content"]["footer"]
    assert dumped[0]["content"]["categories"][0]["items"][0]["icon"].endswith("</svg>")
