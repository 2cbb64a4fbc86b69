import json
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from docicons.resolver import IconResolver
from docicons.sources import IconSetLoader

LUCIDE = {
    "prefix": "lucide",
    "width": 24,
    "height": 24,
    "icons": {
        "book-open": {
            "body": '<path fill="none" stroke="currentColor" stroke-width="2" d="M12 7v14"/>',
        },
        "wide": {"body": '<path d="M0 0h48v24H0z"/>', "width": 48},
    },
    "aliases": {"book": {"parent": "book-open"}},
}

CARBON = {
    "prefix": "carbon",
    "width": 32,
    "height": 32,
    "icons": {
        "cloud": {"body": '<path fill="currentColor" d="M16 7a7 7 0 0 0-6.8 5.3"/>'},
        "logo-ibm": {"body": '<path fill="#0f62fe" d="M0 0h32v32H0z"/>'},
        "tall": {"body": '<path d="M0 0h32v40H0z"/>', "height": 40},
    },
}

F5XC = {
    "prefix": "f5xc",
    "info": {"name": "F5 Distributed Cloud", "palette": True},
    "icons": {
        "doc": {"body": '<path fill="none" d="M4 4h16v16H4z"/>'},
    },
}

MDI = {
    "prefix": "mdi",
    "icons": {
        "home": {"body": '<path fill="currentColor" d="M10 20v-6h4v6"/>'},
        "gradient": {"body": '<path fill="url(#g1)" d="M0 0h24v24H0z"/>'},
        "themed": {"body": '<path fill="var(--accent)" d="M0 0h24v24H0z"/>'},
    },
}


def write_icon_set(root: Path, package: str, data: Dict[str, Any]) -> Path:
    target = root.joinpath(*package.split("/"), "icons.json")
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(data), encoding="utf8")
    return target


@pytest.fixture
def icons_root(tmp_path: Path) -> Path:
    root = tmp_path / "node_modules"
    write_icon_set(root, "@iconify-json/lucide", LUCIDE)
    write_icon_set(root, "@iconify-json/carbon", CARBON)
    write_icon_set(root, "@iconify-json/mdi", MDI)
    write_icon_set(root, "@robinmordasiewicz/icons-f5xc", F5XC)
    return root


@pytest.fixture
def loader(icons_root: Path) -> IconSetLoader:
    return IconSetLoader(icons_root)


@pytest.fixture
def resolver(loader: IconSetLoader) -> IconResolver:
    return IconResolver(loader)


@pytest.fixture(name="write_icon_set")
def write_icon_set_fixture():
    return write_icon_set
