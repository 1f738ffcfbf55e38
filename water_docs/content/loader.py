"""Fetch documentation markdown and render it into the content pane.

:class:`ContentLoader` reads a document either from the site's ``content/``
directory or from a remote URL, renders it with
:class:`~water_docs.content.renderer.HtmlContentRenderer`, and writes the
result into a :class:`~water_docs.content.pane.ContentPane`. Every failure
(HTTP error status, network or IO error, empty body, render error) ends in
the same "under construction" placeholder; the cause is only logged.

Example
-------
>>> from water_docs.content import ContentLoader, ContentPane, HtmlContentRenderer
>>> pane = ContentPane()
>>> loader = ContentLoader(pane, HtmlContentRenderer(), site_root="site")
>>> loader.load_local("intro.md")  # doctest: +SKIP
<LoadStatus.RENDERED: 'rendered'>
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path
from urllib.parse import urljoin, urlsplit, urlunsplit

import requests

from water_docs._constants import CONTENT_DIR

from .pane import ContentPane, LoadStatus

if typ.TYPE_CHECKING:
    from .renderer import HtmlContentRenderer

logger = logging.getLogger(__name__)


class ContentUnavailableError(RuntimeError):
    """Raised when a markdown document cannot be fetched or is empty."""


class ContentLoader:
    """Load markdown from local or remote sources into a content pane."""

    def __init__(
        self,
        pane: ContentPane,
        renderer: HtmlContentRenderer,
        *,
        site_root: str = ".",
        content_dir: str = CONTENT_DIR,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the loader.

        Parameters
        ----------
        pane : ContentPane
            Pane receiving rendered HTML, the loading block, or the placeholder.
        renderer : HtmlContentRenderer
            Renderer turning markdown into HTML.
        site_root : str, optional
            Directory or ``http(s)`` base URL that contains ``content_dir``.
        content_dir : str, optional
            Folder (relative to ``site_root``) holding local markdown files.
        timeout : float, optional
            Seconds to wait for HTTP responses. There is no retry.
        """
        self.pane = pane
        self.renderer = renderer
        self.site_root = site_root
        self.content_dir = content_dir.strip("/")
        self.timeout = timeout

    def load_local(self, path: str) -> LoadStatus:
        """Load ``content/<path>`` relative to the site root."""
        token = self.pane.begin_load()
        try:
            text = self._read_local(path)
        except ContentUnavailableError as exc:
            logger.warning("Showing placeholder for local document %s: %s", path, exc)
            self.pane.fail(token)
            return self.pane.status
        self.render(text, token=token)
        return self.pane.status

    def load_remote(self, url: str) -> LoadStatus:
        """Load markdown from an absolute ``url``."""
        token = self.pane.begin_load()
        target = to_raw_url(url)
        try:
            text = self._fetch(target)
        except ContentUnavailableError as exc:
            logger.warning("Showing placeholder for remote document %s: %s", target, exc)
            self.pane.fail(token)
            return self.pane.status
        self.render(text, token=token)
        return self.pane.status

    def render(self, markdown_text: str, *, token: int | None = None) -> bool:
        """Render ``markdown_text`` into the pane, replacing prior content.

        Parameters
        ----------
        markdown_text : str
            Markdown source to display.
        token : int, optional
            Request token from :meth:`ContentPane.begin_load`. When omitted a
            new load cycle is started for this render.

        Returns
        -------
        bool
            ``True`` when the pane was updated, ``False`` when a newer load has
            superseded ``token``.
        """
        if token is None:
            token = self.pane.begin_load()
        if not markdown_text.strip():
            logger.warning("Showing placeholder for empty document.")
            return self.pane.fail(token)
        try:
            html = self.renderer.markdown(markdown_text)
        except Exception:  # noqa: BLE001 - renderer failures end on the placeholder
            logger.warning("Showing placeholder for unrenderable document.", exc_info=True)
            return self.pane.fail(token)
        applied = self.pane.complete(token, html)
        if not applied:
            logger.debug("Discarded superseded render for token %s.", token)
        return applied

    def local_location(self, path: str) -> str:
        """Return the URL or filesystem path that ``load_local`` reads for ``path``."""
        relative = f"{self.content_dir}/{path.lstrip('/')}"
        if _is_http_url(self.site_root):
            return urljoin(self.site_root.rstrip("/") + "/", relative)
        return str(Path(self.site_root) / relative)

    def _read_local(self, path: str) -> str:
        location = self.local_location(path)
        if _is_http_url(location):
            return self._fetch(location)
        content_root = (Path(self.site_root) / self.content_dir).resolve()
        target = Path(location).resolve()
        if not target.is_relative_to(content_root):
            msg = f"'{path}' resolves outside the content directory."
            raise ContentUnavailableError(msg)
        try:
            text = target.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"cannot read {target}: {exc}"
            raise ContentUnavailableError(msg) from exc
        if not text:
            msg = f"{target} is empty"
            raise ContentUnavailableError(msg)
        return text

    def _fetch(self, url: str) -> str:
        """Download ``url`` and return its body text."""
        session = requests.Session()
        try:
            resp = session.get(url, timeout=self.timeout)
            resp.raise_for_status()
            text = resp.text
        except requests.RequestException as exc:
            msg = f"request for {url} failed: {exc}"
            raise ContentUnavailableError(msg) from exc
        finally:
            session.close()
        if not text:
            msg = f"{url} returned an empty body"
            raise ContentUnavailableError(msg)
        return text


def to_raw_url(url: str) -> str:
    """Rewrite a GitHub ``blob`` URL to its raw-content form.

    >>> to_raw_url("https://github.com/acme/water/blob/main/README.md")
    'https://raw.githubusercontent.com/acme/water/main/README.md'
    >>> to_raw_url("https://example.org/docs/README.md")
    'https://example.org/docs/README.md'
    """
    parts = urlsplit(url)
    if parts.netloc.lower() not in {"github.com", "www.github.com"}:
        return url
    segments = parts.path.split("/")
    # ['', owner, repo, 'blob', ref, *path]
    if len(segments) < 6 or segments[3] != "blob":
        return url
    path = "/".join(segments[:3] + segments[4:])
    return urlunsplit((parts.scheme, "raw.githubusercontent.com", path, "", ""))


def _is_http_url(value: str) -> bool:
    return urlsplit(value).scheme in {"http", "https"}


__all__ = ["ContentLoader", "ContentUnavailableError", "to_raw_url"]
