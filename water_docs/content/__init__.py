"""Fetching, rendering, and displaying documentation markdown."""

from .extensions import EscapeRawHtmlExtension, HeadingAnchorExtension
from .loader import ContentLoader, ContentUnavailableError, to_raw_url
from .pane import ContentPane, LoadStatus
from .renderer import HtmlContentRenderer

__all__ = [
    "ContentLoader",
    "ContentPane",
    "ContentUnavailableError",
    "EscapeRawHtmlExtension",
    "HeadingAnchorExtension",
    "HtmlContentRenderer",
    "LoadStatus",
    "to_raw_url",
]
