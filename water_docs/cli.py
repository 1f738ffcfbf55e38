"""Cyclopts CLI entrypoint for rendering the Water Framework documentation.

The ``water-docs`` console script renders the documentation page for a deep
link (``render``), writes a static page per menu entry (``build``), or prints
the menu tree with the ids accepted by the ``page`` query parameter
(``menu``). Options can also be supplied through ``INPUT_*`` environment
variables, which keeps CI invocations short.

Examples
--------
Render the page for one entry:

>>> from water_docs.cli import app
>>> app.run(["render", "--page", "core-concepts"])  # doctest: +SKIP

Build every page into a custom directory:

>>> app.run(["build", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_docs_config
from .navigation import MenuTree
from .site import DESKTOP_WIDTH, DocsPageBuilder

DEFAULT_CONFIG = Path("config/docs.yaml")

app = App(name="water-docs", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to docs config", env_var="INPUT_CONFIG")
]
LogLevelOption = typ.Annotated[
    str, Parameter(help="Logging level (DEBUG, INFO, WARNING, ...)", env_var="INPUT_LOG_LEVEL")
]


def _configure_logging(level: str) -> None:
    """Send log records to stderr at ``level``."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        msg = f"Unknown log level '{level}'."
        raise ValueError(msg)
    logging.basicConfig(level=numeric, format="%(levelname)s %(name)s: %(message)s")


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render the documentation page for one deep link.")
def render(
    *,
    page: typ.Annotated[
        str | None, Parameter(help="Value of the 'page' query parameter", env_var="INPUT_PAGE")
    ] = None,
    config: ConfigOption = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path, Parameter(help="File to write the page to", env_var="INPUT_OUTPUT")
    ] = Path("public/documentation.html"),
    viewport_width: typ.Annotated[
        int, Parameter(help="Viewport width used for the mobile nav toggle")
    ] = DESKTOP_WIDTH,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Render the docs page selected by ``page`` into ``output``.

    Parameters
    ----------
    page : str or None, optional
        Entry id as it would appear in ``?page=``. Unknown ids fall back to a
        close match or the introduction entry, exactly like a deep link.
    config : Path, optional
        Path to the ``docs.yaml`` configuration file (``INPUT_CONFIG``).
    output : Path, optional
        Destination HTML file; parent folders are created.
    viewport_width : int, optional
        Width in pixels used to decide whether the mobile toggle is shown.
    log_level : str, optional
        Logging level for diagnostics written to stderr.
    """
    _configure_logging(log_level)
    docs_config = load_docs_config(config)
    builder = DocsPageBuilder(docs_config, viewport_width=viewport_width)
    html = builder.render(page)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    print(f"wrote {_format_path(output)}")


@app.command(help="Write a static documentation page for every menu entry.")
def build(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Render every menu entry into ``<output_dir>/<id>.html`` plus ``index.html``.

    Parameters
    ----------
    config : Path, optional
        Path to the ``docs.yaml`` configuration file (``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Output folder; defaults to ``site.output_dir`` from the config.
    log_level : str, optional
        Logging level for diagnostics written to stderr.
    """
    _configure_logging(log_level)
    docs_config = load_docs_config(config)
    written = DocsPageBuilder(docs_config, output_dir=output_dir).build()
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the menu tree and the ids accepted by ?page=.")
def menu(*, config: ConfigOption = DEFAULT_CONFIG) -> None:
    """Print one line per menu entry: indentation, id, label, and source."""
    docs_config = load_docs_config(config)
    tree = MenuTree.from_config(docs_config.menu)
    for entry in tree.walk():
        indent = "  " if entry.is_nested else ""
        source = entry.content_source
        if source is not None:
            detail = f"{source.kind}: {source.location}"
        elif entry.children:
            detail = "overview"
        else:
            detail = "placeholder"
        print(f"{indent}{entry.id}  {entry.label}  ({detail})")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``water-docs`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
