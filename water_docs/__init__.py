"""Documentation navigator for the Water Framework website.

This package loads the docs menu from YAML, resolves ``?page=`` deep links to
menu entries, fetches and renders the entries' Markdown, and generates
overview pages for sections. The ``water-docs`` console script renders the
resulting documentation page or a static copy of every page.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from water_docs import main
>>> main()  # doctest: +SKIP
>>> from water_docs import app
>>> app.name  # doctest: +SKIP
('water-docs',)
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
