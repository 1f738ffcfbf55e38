"""Synthesize table-of-contents overview pages for menu sections.

A section (a top-level entry with children) has no document of its own, so
the navigator shows a generated listing instead: the section label, a short
description, and one numbered tile per child. Descriptions come from the
static table in the docs configuration and fall back to a templated
sentence when an id or label slug is missing from it.

Example
-------
>>> from water_docs.navigation.models import MenuEntry
>>> from water_docs.navigation.overview import OverviewBuilder
>>> section = MenuEntry("modules", "Modules")
>>> child = MenuEntry("water-core", "Water Core", parent_id="modules")
>>> overview = OverviewBuilder({}).build(section, [child])
>>> [tile.index for tile in overview.tiles]
['01']
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from water_docs.slugs import label_slug

from .url import page_href

if typ.TYPE_CHECKING:
    from .models import MenuEntry

SECTION_FALLBACK = "Explore the {label} documentation."
TILE_FALLBACK = "Learn more about {label}."


@dc.dataclass(slots=True)
class OverviewTile:
    """One numbered child tile in an overview grid."""

    index: str
    entry_id: str
    label: str
    description: str
    href: str


@dc.dataclass(slots=True)
class Overview:
    """Rendered overview page for a section."""

    entry_id: str
    title: str
    description: str
    tiles: list[OverviewTile]
    html: str


class OverviewBuilder:
    """Build overview pages from menu entries and the description table."""

    def __init__(
        self,
        descriptions: cabc.Mapping[str, str],
        *,
        templates_dir: Path | None = None,
        href_for: cabc.Callable[[str], str] = page_href,
    ) -> None:
        self.descriptions = dict(descriptions)
        self.href_for = href_for
        self.templates_dir = templates_dir or Path(__file__).resolve().parents[1] / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("overview.jinja")

    def describe_section(self, entry: MenuEntry) -> str:
        """Return the table description for ``entry.id`` or the fallback sentence."""
        return self.descriptions.get(entry.id) or SECTION_FALLBACK.format(
            label=entry.label
        )

    def describe_child(self, child: MenuEntry) -> str:
        """Return the table description keyed by the child's label slug."""
        return self.descriptions.get(label_slug(child.label)) or TILE_FALLBACK.format(
            label=child.label
        )

    def build(self, entry: MenuEntry, children: cabc.Sequence[MenuEntry]) -> Overview:
        """Return the overview for ``entry`` listing ``children`` in order."""
        tiles = [
            OverviewTile(
                index=f"{idx:02d}",
                entry_id=child.id,
                label=child.label,
                description=self.describe_child(child),
                href=self.href_for(child.id),
            )
            for idx, child in enumerate(children, start=1)
        ]
        description = self.describe_section(entry)
        html = self.template.render(
            entry_id=entry.id,
            title=entry.label,
            description=description,
            tiles=tiles,
        )
        return Overview(
            entry_id=entry.id,
            title=entry.label,
            description=description,
            tiles=tiles,
            html=html,
        )


__all__ = ["Overview", "OverviewBuilder", "OverviewTile"]
