"""Read and rewrite the ``page`` query parameter of the docs URL."""

from __future__ import annotations

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from water_docs._constants import PAGE_PARAM


def read_page_param(url: str) -> str | None:
    """Return the ``page`` query value of ``url``, or None when absent or blank.

    >>> read_page_param("documentation.html?page=core-concepts")
    'core-concepts'
    >>> read_page_param("documentation.html") is None
    True
    """
    query = urlsplit(url).query
    for key, value in parse_qsl(query, keep_blank_values=True):
        if key == PAGE_PARAM:
            return value.strip() or None
    return None


def with_page_param(url: str, entry_id: str) -> str:
    """Return ``url`` with its ``page`` parameter set to ``entry_id``.

    Other query parameters keep their order; an existing ``page`` value is
    replaced in place so repeated selections never accumulate parameters.

    >>> with_page_param("documentation.html?lang=en&page=old#top", "new")
    'documentation.html?lang=en&page=new#top'
    """
    parts = urlsplit(url)
    pairs = parse_qsl(parts.query, keep_blank_values=True)
    updated: list[tuple[str, str]] = []
    replaced = False
    for key, value in pairs:
        if key != PAGE_PARAM:
            updated.append((key, value))
        elif not replaced:
            updated.append((key, entry_id))
            replaced = True
    if not replaced:
        updated.append((PAGE_PARAM, entry_id))
    return urlunsplit(parts._replace(query=urlencode(updated)))


def page_href(entry_id: str) -> str:
    """Return the relative deep link for ``entry_id``."""
    return "?" + urlencode([(PAGE_PARAM, entry_id)])


__all__ = ["page_href", "read_page_param", "with_page_param"]
