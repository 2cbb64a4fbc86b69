from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Dimension = Union[int, float]


class IconRecord(BaseModel):
    """One glyph from an Iconify icon set.

    - body: raw SVG content placed inside the ``<svg>`` element.
    - width / height: per-icon overrides of the icon set defaults.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    body: str
    width: Optional[Dimension] = None
    height: Optional[Dimension] = None


class IconSet(BaseModel):
    """A vendor icon collection in Iconify JSON format.

    Only the keys the resolver reads are modelled; ``prefix``, ``aliases``,
    ``lastModified`` and friends are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    icons: Dict[str, IconRecord] = Field(default_factory=dict)
    width: Optional[Dimension] = None
    height: Optional[Dimension] = None
    info: Optional[Dict[str, Any]] = None

    @property
    def palette(self) -> bool:
        # Iconify marks multi-color sets with info.palette; anything but a real true is ignored.
        return bool(self.info) and self.info.get("palette") is True


class MenuLink(BaseModel):
    """A single entry inside a mega menu category."""

    label: str
    href: str
    description: Optional[str] = None
    icon: Optional[str] = None  # "prefix:name" before resolution, SVG markup after


class MenuCategory(BaseModel):
    title: str
    items: List[MenuLink] = Field(default_factory=list)


class MenuFooter(BaseModel):
    label: str
    href: str
    description: Optional[str] = None


class MenuContent(BaseModel):
    layout: Optional[str] = None
    columns: Optional[int] = Field(default=None, ge=1)
    categories: List[MenuCategory] = Field(default_factory=list)
    footer: Optional[MenuFooter] = None


class MegaMenuItem(BaseModel):
    """Top level navigation entry, either a plain link or a dropdown panel."""

    label: str
    href: Optional[str] = None
    content: Optional[MenuContent] = None
