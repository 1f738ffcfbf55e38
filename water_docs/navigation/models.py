"""Menu tree and navigation state dataclasses."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

from water_docs.config import DocsConfigError
from water_docs.slugs import anchor_id, label_slug

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from water_docs.config import MenuEntryConfig


class UnknownEntryError(KeyError):
    """Raised when a menu entry id is looked up directly and does not exist."""


class SourceKind(enum.StrEnum):
    """Where an entry's Markdown comes from."""

    LOCAL = "local"
    REMOTE = "remote"


@dc.dataclass(frozen=True, slots=True)
class ContentSource:
    """Location of the Markdown document backing a menu entry."""

    kind: SourceKind
    location: str


@dc.dataclass(slots=True)
class MenuEntry:
    """A navigable unit in the documentation menu.

    Attributes
    ----------
    id : str
        Identifier derived from the entry's target anchor; unique in the tree.
    label : str
        Display text.
    content_source : ContentSource | None
        Local or remote Markdown backing the entry, if any.
    children : list[MenuEntry]
        Ordered sub-menu entries.
    parent_id : str | None
        Id of the owning section for nested entries.
    """

    id: str
    label: str
    content_source: ContentSource | None = None
    children: list[MenuEntry] = dc.field(default_factory=list)
    parent_id: str | None = None

    @property
    def is_section(self) -> bool:
        """Return True for top-level entries that own a sub-menu."""
        return self.parent_id is None and bool(self.children)

    @property
    def is_nested(self) -> bool:
        return self.parent_id is not None


@dc.dataclass(slots=True)
class NavigationState:
    """Page-lifetime selection state.

    ``selected_entry_id`` is the single active entry. ``active_section_id``
    names the parent section whose link is highlighted alongside a selected
    child, and ``expanded_section_id`` the one section showing its sub-menu.
    """

    selected_entry_id: str | None = None
    expanded_section_id: str | None = None
    active_section_id: str | None = None

    def clear_active(self) -> None:
        self.selected_entry_id = None
        self.active_section_id = None


class MenuTree:
    """Ordered menu entries with id lookup."""

    def __init__(self, entries: list[MenuEntry]) -> None:
        self.entries = entries
        self._by_id: dict[str, MenuEntry] = {}
        for entry in self.walk():
            if entry.id in self._by_id:
                msg = f"Duplicate menu entry id '{entry.id}'."
                raise DocsConfigError(msg)
            self._by_id[entry.id] = entry

    @classmethod
    def from_config(cls, items: cabc.Sequence[MenuEntryConfig]) -> MenuTree:
        """Build a tree from the YAML menu declarations."""
        return cls([_entry_from_config(item, parent_id=None) for item in items])

    def walk(self) -> cabc.Iterator[MenuEntry]:
        """Yield entries in pre-order: each section followed by its children."""
        for entry in self.entries:
            yield entry
            yield from entry.children

    def get(self, entry_id: str) -> MenuEntry:
        """Return the entry with ``entry_id`` or raise UnknownEntryError."""
        try:
            return self._by_id[entry_id]
        except KeyError as exc:
            available = ", ".join(self._by_id)
            msg = f"Unknown menu entry '{entry_id}'. Known entries: {available}"
            raise UnknownEntryError(msg) from exc

    def find(self, entry_id: str) -> MenuEntry | None:
        return self._by_id.get(entry_id)


def _entry_from_config(item: MenuEntryConfig, *, parent_id: str | None) -> MenuEntry:
    """Convert one MenuEntryConfig (recursively) into a MenuEntry."""
    entry_id = anchor_id(item.href) or label_slug(item.label)
    if not entry_id:
        msg = f"Cannot derive an id for menu entry '{item.label}'."
        raise DocsConfigError(msg)
    source: ContentSource | None = None
    if item.md:
        source = ContentSource(SourceKind.LOCAL, item.md)
    elif item.remote_md:
        source = ContentSource(SourceKind.REMOTE, item.remote_md)
    return MenuEntry(
        id=entry_id,
        label=item.label,
        content_source=source,
        children=[
            _entry_from_config(child, parent_id=entry_id) for child in item.children
        ],
        parent_id=parent_id,
    )


__all__ = [
    "ContentSource",
    "MenuEntry",
    "MenuTree",
    "NavigationState",
    "SourceKind",
    "UnknownEntryError",
]
