"""Render the documentation page from navigator state.

:class:`DocsPageBuilder` wires the configured menu tree, content loader, and
overview builder into a :class:`~water_docs.navigation.MenuManager`, drives it
to a deep link, and renders ``docs_page.jinja`` (sidebar plus content pane).
``render`` produces the page for one ``page`` value; ``build`` writes a static
file per menu entry so the docs can be published without a server.

Example
-------
>>> from pathlib import Path
>>> from water_docs.config import load_docs_config
>>> from water_docs.site import DocsPageBuilder
>>> config = load_docs_config(Path("config/docs.yaml"))  # doctest: +SKIP
>>> html = DocsPageBuilder(config).render("core-concepts")  # doctest: +SKIP
>>> DocsPageBuilder(config).build()  # doctest: +SKIP
[PosixPath('public/documentation/introduction.html'), ...]
"""

from __future__ import annotations

import collections.abc as cabc
import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .content import ContentLoader, ContentPane, HtmlContentRenderer
from .navigation import (
    MenuManager,
    MenuTree,
    OverviewBuilder,
    SidebarToggle,
    page_href,
)

if typ.TYPE_CHECKING:
    from .config import DocsConfig
    from .navigation import MenuEntry

DESKTOP_WIDTH = 1280
INDEX_FILENAME = "index.html"


def file_href(entry_id: str) -> str:
    """Return the static-build link for ``entry_id``."""
    return f"{entry_id}.html"


class DocsPageBuilder:
    """Render docs pages with the sidebar state of a given deep link."""

    def __init__(
        self,
        config: DocsConfig,
        *,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
        viewport_width: int = DESKTOP_WIDTH,
    ) -> None:
        """Initialize the builder with configuration and template context.

        Parameters
        ----------
        config : DocsConfig
            Loaded docs configuration (menu, site settings, theme).
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        output_dir : Path, optional
            Override for the static build folder; defaults to ``site.output_dir``.
        viewport_width : int, optional
            Width used to decide whether the mobile nav toggle is rendered.
        """
        self.config = config
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.output_dir_override = output_dir
        self.viewport_width = viewport_width
        self.tree = MenuTree.from_config(config.menu)
        self.renderer = HtmlContentRenderer(config.site.pygments_style)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("docs_page.jinja")

    def navigator(
        self, *, href_for: cabc.Callable[[str], str] = page_href
    ) -> MenuManager:
        """Return a fresh MenuManager with its own content pane."""
        site = self.config.site
        loader = ContentLoader(
            ContentPane(),
            self.renderer,
            site_root=site.root,
            content_dir=site.content_dir,
            timeout=site.timeout,
        )
        overviews = OverviewBuilder(
            self.config.descriptions,
            templates_dir=self.templates_dir,
            href_for=href_for,
        )
        return MenuManager(
            self.tree,
            loader,
            overviews,
            intro_entry=site.intro_entry,
            location=site.base_url,
        )

    def render(self, page: str | None = None) -> str:
        """Return the docs page HTML for the ``page`` query value."""
        manager = self.navigator()
        manager.initialize(page)
        return self.render_state(manager)

    def build(self) -> list[Path]:
        """Write one HTML file per menu entry plus an index for the default entry.

        Returns
        -------
        list[Path]
            Paths to the generated files, in menu order, index last.
        """
        out_dir = self.output_dir_override or self.config.site.output_dir
        out_dir.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        rendered: dict[str, str] = {}
        for entry in self.tree.walk():
            manager = self.navigator(href_for=file_href)
            manager.initialize(entry.id)
            html = self.render_state(manager, href_for=file_href)
            rendered[entry.id] = html
            output_path = out_dir / file_href(entry.id)
            output_path.write_text(html, encoding="utf-8")
            written.append(output_path)
        default_id = self.navigator().default_entry().id
        index_path = out_dir / INDEX_FILENAME
        index_path.write_text(rendered[default_id], encoding="utf-8")
        written.append(index_path)
        return written

    def render_state(
        self,
        manager: MenuManager,
        *,
        href_for: cabc.Callable[[str], str] = page_href,
    ) -> str:
        """Render the page template for the current state of ``manager``."""
        selected = manager.selected
        context = {
            "theme": self.config.theme,
            "entries": self.tree.entries,
            "manager": manager,
            "href_for": href_for,
            "content_html": manager.pane.html,
            "load_status": str(manager.pane.status),
            "pygments_css": self.renderer.stylesheet,
            "html_title": self._format_page_title(selected),
            "sidebar_toggle": SidebarToggle.for_width(self.viewport_width),
            "location": manager.location,
            "generated_at": dt.datetime.now(dt.UTC),
        }
        return self.template.render(**context)

    def _format_page_title(self, entry: MenuEntry | None) -> str:
        """Compose the HTML title from the selected label and the theme."""
        theme = self.config.theme
        if entry is None:
            return f"{theme.site_name} {theme.page_title_suffix}"
        return f"{entry.label} | {theme.site_name} {theme.page_title_suffix}"


__all__ = ["DocsPageBuilder", "file_href"]
