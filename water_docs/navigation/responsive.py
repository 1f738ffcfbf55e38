"""Visibility state of the mobile navigation toggle."""

from __future__ import annotations

import dataclasses as dc

from water_docs._constants import MOBILE_BREAKPOINT

OPEN_ICON = "fa-bars"
CLOSE_ICON = "fa-times"


@dc.dataclass(slots=True)
class SidebarToggle:
    """Track whether the mobile nav button exists and whether links are shown."""

    breakpoint: int = MOBILE_BREAKPOINT
    has_toggle: bool = False
    links_shown: bool = False

    @classmethod
    def for_width(cls, width: int, *, breakpoint: int = MOBILE_BREAKPOINT) -> SidebarToggle:
        toggle = cls(breakpoint=breakpoint)
        toggle.resize(width)
        return toggle

    def resize(self, width: int) -> None:
        """Create the toggle on narrow viewports and drop it on wide ones."""
        if width <= self.breakpoint:
            self.has_toggle = True
        elif self.has_toggle:
            self.has_toggle = False
            self.links_shown = False

    def toggle(self) -> bool:
        """Flip link visibility; a no-op without a toggle button."""
        if self.has_toggle:
            self.links_shown = not self.links_shown
        return self.links_shown

    @property
    def icon(self) -> str:
        return CLOSE_ICON if self.links_shown else OPEN_ICON

    @property
    def nav_classes(self) -> str:
        classes = ["nav-links"]
        if self.links_shown:
            classes.append("show")
        return " ".join(classes)


__all__ = ["SidebarToggle"]
