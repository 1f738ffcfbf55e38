"""Markdown extensions applied to every rendered docs document."""

from __future__ import annotations

import re
import typing as typ
from html import unescape

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor
from markdown.util import HTML_PLACEHOLDER_RE

from water_docs.slugs import heading_slug

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any

HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
URL_ATTRIBUTES = ("href", "src")
UNSAFE_URL_SCHEMES = frozenset({"javascript", "vbscript", "data"})
URL_NOISE_PATTERN = re.compile(r"[\x00-\x20\x7f]+")


class HeadingAnchorExtension(Extension):
    """Give every heading without an ``id`` one derived from its text.

    Unlike ``markdown.extensions.toc`` the ids are not de-duplicated; two
    headings with the same text share an anchor, matching how the sidebar
    deep links were authored.
    """

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the heading-anchor treeprocessor after inline parsing."""
        md.treeprocessors.register(HeadingAnchorTreeprocessor(md), "water_heading_ids", 6)


class HeadingAnchorTreeprocessor(Treeprocessor):
    """Assign slug ids to heading elements."""

    def run(self, root: Element) -> Element:
        """Set ``id`` on headings that do not carry one already."""
        for element in root.iter():
            if element.tag not in HEADING_TAGS or element.get("id"):
                continue
            slug = heading_slug(self._heading_text(element))
            if slug:
                element.set("id", slug)
        return root

    def _heading_text(self, element: Element) -> str:
        text = HTML_PLACEHOLDER_RE.sub("", "".join(element.itertext()))
        unescape = self.md.treeprocessors["unescape"]
        return unescape.unescape(text)  # type: ignore[attr-defined]


class EscapeRawHtmlExtension(Extension):
    """Escape raw HTML found in Markdown sources instead of passing it through.

    Link and image targets using a script-capable scheme are dropped as well,
    so the rendered document carries no executable markup.
    """

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Drop the raw-HTML handlers and register the URL scrubber on ``md``."""
        md.preprocessors.deregister("html_block")
        md.inlinePatterns.deregister("html")
        md.treeprocessors.register(UnsafeUrlTreeprocessor(md), "water_unsafe_urls", 5)


class UnsafeUrlTreeprocessor(Treeprocessor):
    """Remove ``href`` and ``src`` attributes whose scheme can run script."""

    def run(self, root: Element) -> Element:
        for element in root.iter():
            for attribute in URL_ATTRIBUTES:
                value = element.get(attribute)
                if value is not None and is_unsafe_url(value):
                    del element.attrib[attribute]
        return root


def is_unsafe_url(value: str) -> bool:
    """Return True when ``value`` uses a ``javascript:``, ``vbscript:`` or ``data:`` scheme.

    Entities are decoded and control characters and whitespace removed first,
    as browsers do before resolving the scheme.

    >>> is_unsafe_url(" JaVa\tScript:alert(1)")
    True
    >>> is_unsafe_url("https://example.org/javascript:")
    False
    """
    cleaned = URL_NOISE_PATTERN.sub("", unescape(value)).lower()
    scheme, separator, _rest = cleaned.partition(":")
    return bool(separator) and scheme in UNSAFE_URL_SCHEMES


__all__ = [
    "EscapeRawHtmlExtension",
    "HeadingAnchorExtension",
    "HeadingAnchorTreeprocessor",
    "UnsafeUrlTreeprocessor",
    "is_unsafe_url",
]
