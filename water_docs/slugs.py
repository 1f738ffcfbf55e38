r"""Slug helpers shared by the navigator and the Markdown renderer.

Two flavours exist because they feed different lookups: heading anchors keep
word characters (including underscores and non-ASCII letters), while label
slugs used as description-table keys reduce to ``[a-z0-9-]``.

Example
-------
>>> from water_docs.slugs import heading_slug, label_slug
>>> heading_slug("Getting Started -- Quickly!")
'getting-started---quickly'
>>> label_slug("Water Core (JDK 11+)")
'water-core-jdk-11'
"""

from __future__ import annotations

import re

_HEADING_STRIP = re.compile(r"[^\w\s-]")
_WHITESPACE = re.compile(r"\s+")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def heading_slug(text: str) -> str:
    """Return the anchor id used for a rendered heading."""
    slug = _HEADING_STRIP.sub("", text.lower())
    slug = _WHITESPACE.sub("-", slug.strip())
    return slug.strip("-")


def label_slug(label: str) -> str:
    """Normalize a menu label into a lowercase hyphen-separated key."""
    return _NON_ALNUM.sub("-", label.lower()).strip("-")


def anchor_id(href: str) -> str:
    """Return the entry id encoded by an anchor such as ``#core-concepts``."""
    return href.strip().lstrip("#").strip()


__all__ = ["anchor_id", "heading_slug", "label_slug"]
