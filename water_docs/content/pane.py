"""The content pane: current HTML plus the state of its load cycle."""

from __future__ import annotations

import dataclasses as dc
import enum

from water_docs._constants import LOADING_HTML, PLACEHOLDER_HTML


class LoadStatus(enum.StrEnum):
    """Position of the pane in a single load cycle."""

    IDLE = "idle"
    LOADING = "loading"
    RENDERED = "rendered"
    FALLBACK = "fallback"


@dc.dataclass(slots=True)
class ContentPane:
    """Holds the HTML currently displayed in the docs content area.

    Every call that starts a load or shows content directly takes a fresh
    request token. Completions carrying an older token are ignored, so a slow
    load that was superseded can never overwrite newer content.
    """

    html: str = ""
    status: LoadStatus = LoadStatus.IDLE
    scroll_top: int = 0
    token: int = 0

    def begin_load(self) -> int:
        """Clear the pane, show the loading block, and return the request token."""
        self.token += 1
        self.html = LOADING_HTML
        self.status = LoadStatus.LOADING
        return self.token

    def is_current(self, token: int) -> bool:
        return token == self.token

    def complete(self, token: int, html: str) -> bool:
        """Show rendered ``html`` if ``token`` is still current."""
        if not self.is_current(token):
            return False
        self.html = html
        self.status = LoadStatus.RENDERED
        return True

    def fail(self, token: int) -> bool:
        """Show the placeholder if ``token`` is still current."""
        if not self.is_current(token):
            return False
        self.html = PLACEHOLDER_HTML
        self.status = LoadStatus.FALLBACK
        return True

    def show(self, html: str) -> None:
        """Replace the pane with locally generated ``html`` (e.g. an overview)."""
        self.token += 1
        self.html = html
        self.status = LoadStatus.RENDERED

    def show_placeholder(self) -> None:
        self.token += 1
        self.html = PLACEHOLDER_HTML
        self.status = LoadStatus.FALLBACK

    def scroll_to_top(self) -> None:
        self.scroll_top = 0


__all__ = ["ContentPane", "LoadStatus"]
