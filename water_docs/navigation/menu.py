r"""Selection, routing, and overview generation for the docs menu.

:class:`MenuManager` owns the :class:`~water_docs.navigation.models.NavigationState`
and funnels every change to it through :meth:`MenuManager.select_entry`, so
the "one active entry, at most one expanded section" rule is enforced in a
single place. Sidebar clicks, overview tile clicks, and deep links arriving
through the ``page`` query parameter all take that same path.

Example
-------
>>> from water_docs.navigation import MenuManager  # doctest: +SKIP
>>> manager = MenuManager(tree, loader, overviews)  # doctest: +SKIP
>>> manager.initialize_from_url("documentation.html?page=core-concepts")  # doctest: +SKIP
>>> manager.state.selected_entry_id  # doctest: +SKIP
'core-concepts'
"""

from __future__ import annotations

import logging
import typing as typ

from water_docs._constants import DEFAULT_INTRO_ENTRY

from .models import MenuEntry, MenuTree, NavigationState, SourceKind
from .url import read_page_param, with_page_param

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from water_docs.content import ContentLoader, ContentPane

    from .overview import Overview, OverviewBuilder

logger = logging.getLogger(__name__)


class MenuManager:
    """Drive the docs sidebar and content pane from menu selections."""

    def __init__(
        self,
        tree: MenuTree,
        loader: ContentLoader,
        overviews: OverviewBuilder,
        *,
        intro_entry: str | None = DEFAULT_INTRO_ENTRY,
        location: str = "documentation.html",
    ) -> None:
        """Initialize the manager.

        Parameters
        ----------
        tree : MenuTree
            The menu entries the sidebar shows.
        loader : ContentLoader
            Loader that fetches and renders entry documents into its pane.
        overviews : OverviewBuilder
            Builder for the generated section overview pages.
        intro_entry : str or None, optional
            Id of the entry shown when no ``page`` parameter is given.
        location : str, optional
            The current page URL; its ``page`` parameter follows the selection.
        """
        self.tree = tree
        self.loader = loader
        self.overviews = overviews
        self.intro_entry = intro_entry
        self.location = location
        self.state = NavigationState()
        self.overview: Overview | None = None

    @property
    def pane(self) -> ContentPane:
        return self.loader.pane

    @property
    def selected(self) -> MenuEntry | None:
        """Return the active entry, if any."""
        if self.state.selected_entry_id is None:
            return None
        return self.tree.find(self.state.selected_entry_id)

    def initialize(self, page: str | None = None) -> MenuEntry:
        """Select the entry named by ``page`` (or the default) on a fresh state.

        Parameters
        ----------
        page : str or None, optional
            Value of the ``page`` query parameter. Unknown values fall back to
            a substring match over ids and labels, then to the default entry.

        Returns
        -------
        MenuEntry
            The entry that ended up selected.
        """
        self.state = NavigationState()
        self.overview = None
        entry = self.resolve_entry(page)
        self._activate(entry)
        return entry

    def initialize_from_url(self, url: str) -> MenuEntry:
        """Adopt ``url`` as the current location and initialize from its ``page``."""
        self.location = url
        return self.initialize(read_page_param(url))

    def resolve_entry(self, key: str | None) -> MenuEntry:
        """Map a ``page`` value to an entry: exact id, then substring, then default."""
        key = key.strip() if key else None
        if key:
            exact = self.tree.find(key)
            if exact is not None:
                return exact
            fuzzy = self._fuzzy_match(key)
            if fuzzy is not None:
                logger.debug("No entry '%s'; using close match '%s'.", key, fuzzy.id)
                return fuzzy
            logger.debug("No entry matches '%s'; using the default entry.", key)
        return self.default_entry()

    def default_entry(self) -> MenuEntry:
        """Return the introduction entry, else the first entry with content."""
        if self.intro_entry:
            intro = self.tree.find(self.intro_entry)
            if intro is not None:
                return intro
        for entry in self.tree.walk():
            if entry.content_source is not None:
                return entry
        return self.tree.entries[0]

    def click(self, entry_id: str) -> MenuEntry:
        """Handle a click on the sidebar link of ``entry_id``."""
        entry = self.tree.get(entry_id)
        self._activate(entry)
        return entry

    def click_tile(self, entry_id: str) -> MenuEntry:
        """Handle a click on an overview tile; identical to the sidebar click."""
        return self.click(entry_id)

    def select_entry(self, entry: MenuEntry, *, toggle_section: bool = False) -> None:
        """Make ``entry`` the single active entry and show its content.

        Parameters
        ----------
        entry : MenuEntry
            Entry to select.
        toggle_section : bool, optional
            For a top-level section: flip its expanded state and show the
            generated overview instead of resolving content.

        Notes
        -----
        Afterwards exactly one entry is active, at most one section is
        expanded, the ``page`` parameter of :attr:`location` names ``entry``,
        and the pane is scrolled to the top.
        """
        previously_expanded = self.state.expanded_section_id
        self.state.clear_active()
        self.state.selected_entry_id = entry.id
        if entry.is_nested:
            self.state.expanded_section_id = entry.parent_id
            self.state.active_section_id = entry.parent_id
        elif toggle_section:
            self.state.expanded_section_id = (
                None if previously_expanded == entry.id else entry.id
            )
        self.location = with_page_param(self.location, entry.id)
        if toggle_section:
            self.generate_overview(entry, entry.children)
        else:
            self.resolve_content(entry)
        self.pane.scroll_to_top()

    def resolve_content(self, entry: MenuEntry) -> None:
        """Show ``entry``'s document, its overview, or the placeholder."""
        self.overview = None
        source = entry.content_source
        if source is not None and source.kind is SourceKind.LOCAL:
            self.loader.load_local(source.location)
        elif source is not None and source.kind is SourceKind.REMOTE:
            self.loader.load_remote(source.location)
        elif entry.children:
            self.generate_overview(entry, entry.children)
        else:
            self.pane.show_placeholder()

    def generate_overview(
        self, entry: MenuEntry, children: cabc.Sequence[MenuEntry]
    ) -> Overview:
        """Render the table-of-contents overview for ``entry`` into the pane."""
        overview = self.overviews.build(entry, children)
        self.overview = overview
        self.pane.show(overview.html)
        return overview

    def is_active(self, entry: MenuEntry) -> bool:
        """Return True when ``entry``'s link should carry the ``active`` class."""
        return entry.id in (self.state.selected_entry_id, self.state.active_section_id)

    def is_expanded(self, entry: MenuEntry) -> bool:
        return entry.id == self.state.expanded_section_id

    def _activate(self, entry: MenuEntry) -> None:
        """Run the click behaviour for ``entry``: sections toggle, leaves select."""
        self.select_entry(entry, toggle_section=entry.is_section)

    def _fuzzy_match(self, key: str) -> MenuEntry | None:
        """Return the first entry whose id, then label, contains ``key`` (case-folded)."""
        needle = key.casefold()
        entries = list(self.tree.walk())
        for entry in entries:
            if needle in entry.id.casefold():
                return entry
        for entry in entries:
            if needle in entry.label.casefold():
                return entry
        return None


__all__ = ["MenuManager"]
