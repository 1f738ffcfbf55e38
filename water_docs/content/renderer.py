"""Utilities for rendering markdown and syntax-highlighted code snippets."""

from __future__ import annotations

import logging
import re
import typing as typ
from html import escape, unescape

from markdown import Markdown
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from .extensions import EscapeRawHtmlExtension, HeadingAnchorExtension

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

logger = logging.getLogger(__name__)

FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
PRE_CODE_PATTERN = re.compile(
    r'<pre><code(?: class="language-([A-Za-z0-9_+#.-]+)")?>(.*?)</code></pre>',
    re.DOTALL,
)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
MARKDOWN_WRAPPER = '<div class="markdown-content">{body}</div>'


class HtmlContentRenderer:
    """Render docs markdown into HTML with anchored headings and highlighted code."""

    def __init__(
        self,
        pygments_style: str = "monokai",
        *,
        allow_raw_html: bool = False,
    ) -> None:
        """Initialize a renderer.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        allow_raw_html : bool, optional
            Pass raw HTML embedded in the markdown through untouched. Disabled
            by default so sources cannot inject markup into the page.
        """
        self.pygments_style = pygments_style
        self.allow_raw_html = allow_raw_html
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render markdown into the ``markdown-content`` wrapper.

        Headings receive slug ids and every ``<pre><code>`` block is
        highlighted. Blank input renders an empty wrapper.
        """
        normalized = self._normalize_fenced_blocks(text)
        if not normalized.strip():
            return MARKDOWN_WRAPPER.format(body="")
        extensions: list[Extension | str] = [
            "fenced_code",
            "tables",
            "sane_lists",
            "nl2br",
            HeadingAnchorExtension(),
        ]
        if not self.allow_raw_html:
            extensions.append(EscapeRawHtmlExtension())
        md = Markdown(extensions=extensions, output_format="html")
        html = md.convert(normalized)
        return MARKDOWN_WRAPPER.format(body=self.highlight_blocks(html))

    def highlight_blocks(self, html: str) -> str:
        """Replace each plain ``<pre><code>`` block in ``html`` with highlighted markup.

        A block that fails to highlight is left as it was, so one bad snippet
        never takes the rest of the document with it.
        """

        def _repl(match: re.Match[str]) -> str:
            language = match.group(1)
            code = unescape(match.group(2))
            try:
                return self.code_block(code, language)
            except Exception:  # noqa: BLE001 - highlighter failures stay per block
                logger.warning(
                    "Syntax highlighting failed for %s block; leaving it plain.",
                    language or "text",
                    exc_info=True,
                )
                return match.group(0)

        return PRE_CODE_PATTERN.sub(_repl, html)

    def code_block(self, code: str, language: str | None = None) -> str:
        """Render ``code`` into highlighted HTML with an optional language tag.

        Parameters
        ----------
        code : str
            Source snippet to highlight.
        language : str, optional
            Pygments lexer name; defaults to ``"text"`` when not provided or
            when the lexer lookup fails.

        Returns
        -------
        str
            HTML containing the highlighted block with ``data-language``
            metadata applied.
        """
        lang = language or "text"
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            lexer = get_lexer_by_name("text")
        html = highlight(code, lexer, self._formatter)
        return self._attach_language_attribute(html, lang)

    @staticmethod
    def _attach_language_attribute(html: str, language: str) -> str:
        """Add a single language attribute to an already highlighted block."""
        safe_lang = escape(language or "text", quote=True)

        def _repl(match: re.Match[str]) -> str:
            return f'<div class="codehilite" data-language="{safe_lang}">'

        return CODEHILITE_OPEN_TAG.sub(_repl, html, 1)

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            label = language or ""
            return f"{fence}{label}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


__all__ = ["HtmlContentRenderer", "MARKDOWN_WRAPPER"]
