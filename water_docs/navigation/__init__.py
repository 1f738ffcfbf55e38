"""Menu tree, selection state, and section overviews for the docs sidebar."""

from .menu import MenuManager
from .models import (
    ContentSource,
    MenuEntry,
    MenuTree,
    NavigationState,
    SourceKind,
    UnknownEntryError,
)
from .overview import Overview, OverviewBuilder, OverviewTile
from .responsive import SidebarToggle
from .url import page_href, read_page_param, with_page_param

__all__ = [
    "ContentSource",
    "MenuEntry",
    "MenuManager",
    "MenuTree",
    "NavigationState",
    "Overview",
    "OverviewBuilder",
    "OverviewTile",
    "SidebarToggle",
    "SourceKind",
    "UnknownEntryError",
    "page_href",
    "read_page_param",
    "with_page_param",
]
