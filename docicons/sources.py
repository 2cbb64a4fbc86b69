"""Map icon prefixes to the Iconify JSON files that hold their icons.

The set of supported prefixes is closed: an icon set that has not been wired
into :data:`DEFAULT_SOURCES` is reported as unknown instead of being skipped.
Each call reads the bundle file again; resolution happens a handful of times
per site build so no cache is kept.
"""
from __future__ import annotations

import pathlib
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional

from pydantic import ValidationError

from .config import IconSettings
from .errors import IconSetLoadError, UnknownPrefixError
from .models import IconSet
from .utils import get_logger, read_json_file

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class IconSetSource:
    """Location of one icon set package relative to the icons root."""

    package: str
    filename: str = "icons.json"

    def path(self, root: pathlib.Path) -> pathlib.Path:
        return root.joinpath(*self.package.split("/"), self.filename)


DEFAULT_SOURCES: Mapping[str, IconSetSource] = MappingProxyType(
    {
        "lucide": IconSetSource("@iconify-json/lucide"),
        "carbon": IconSetSource("@iconify-json/carbon"),
        "mdi": IconSetSource("@iconify-json/mdi"),
        "phosphor": IconSetSource("@iconify-json/ph"),
        "tabler": IconSetSource("@iconify-json/tabler"),
        "f5-brand": IconSetSource("@robinmordasiewicz/icons-f5-brand"),
        "f5xc": IconSetSource("@robinmordasiewicz/icons-f5xc"),
        "hashicorp-flight": IconSetSource("@robinmordasiewicz/icons-hashicorp-flight"),
    }
)


class IconSetLoader:
    """Load :class:`IconSet` bundles by prefix."""

    def __init__(
        self,
        root: str | pathlib.Path,
        sources: Optional[Mapping[str, IconSetSource]] = None,
    ) -> None:
        self.root = pathlib.Path(root)
        self.sources: Mapping[str, IconSetSource] = MappingProxyType(
            dict(DEFAULT_SOURCES if sources is None else sources)
        )

    @classmethod
    def from_settings(cls, settings: Optional[IconSettings] = None) -> "IconSetLoader":
        settings = settings or IconSettings.from_env()
        return cls(settings.icons_root)

    @property
    def prefixes(self) -> List[str]:
        return list(self.sources)

    def load(self, prefix: str) -> IconSet:
        source = self.sources.get(prefix)
        if source is None:
            raise UnknownPrefixError(prefix, self.prefixes)

        path = source.path(self.root)
        try:
            data = read_json_file(path)
        except FileNotFoundError as exc:
            raise IconSetLoadError(prefix, path, "file not found") from exc
        except (OSError, ValueError) as exc:
            raise IconSetLoadError(prefix, path, str(exc)) from exc

        try:
            icon_set = IconSet.model_validate(data)
        except ValidationError as exc:
            raise IconSetLoadError(prefix, path, f"not an Iconify icon set ({exc.error_count()} errors)") from exc

        LOGGER.debug("Loaded %s icons for %s from %s", len(icon_set.icons), prefix, path)
        return icon_set


def load_icon_set(prefix: str) -> IconSet:
    """Load the bundle for *prefix* using settings from the environment."""
    return IconSetLoader.from_settings().load(prefix)
