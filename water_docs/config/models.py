"""Typed dataclasses describing the docs navigator configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from water_docs._constants import CONTENT_DIR, DEFAULT_INTRO_ENTRY


class DocsConfigError(ValueError):
    """Raised when the docs configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class ThemeConfig:
    """Visual theming applied to the generated docs page."""

    site_name: str = "Water Framework"
    doc_label: str = "Documentation"
    page_title_suffix: str = "Docs"


@dc.dataclass(slots=True)
class MenuEntryConfig:
    """One menu item as declared in the YAML file.

    Attributes
    ----------
    label : str
        Display text of the sidebar link.
    href : str
        Target anchor (``#core-concepts``); the entry id is derived from it.
    md : str | None
        Filename under the content directory holding the entry's Markdown.
    remote_md : str | None
        Absolute URL of a remote Markdown document.
    children : list[MenuEntryConfig]
        Nested sub-menu entries, in declared order.
    """

    label: str
    href: str
    md: str | None = None
    remote_md: str | None = None
    children: list[MenuEntryConfig] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class SiteSettings:
    """Where content lives and how it is fetched and written."""

    root: str = "."
    content_dir: str = CONTENT_DIR
    intro_entry: str | None = DEFAULT_INTRO_ENTRY
    pygments_style: str = "monokai"
    timeout: float = 30.0
    output_dir: Path = Path("public/documentation")
    base_url: str = "documentation.html"


@dc.dataclass(slots=True)
class DocsConfig:
    """Fully resolved navigator configuration."""

    site: SiteSettings
    theme: ThemeConfig
    menu: list[MenuEntryConfig]
    descriptions: dict[str, str] = dc.field(default_factory=dict)


__all__ = [
    "DocsConfig",
    "DocsConfigError",
    "MenuEntryConfig",
    "SiteSettings",
    "ThemeConfig",
]
