"""Load and validate the docs navigator configuration YAML.

This subpackage parses the project's ``docs.yaml`` file, applies defaults to
the site settings and theme, validates the menu tree, and produces typed
dataclasses (:class:`DocsConfig`, :class:`MenuEntryConfig`, etc.) that the
navigator consumes. The primary entry point is :func:`load_docs_config`.

Examples
--------
>>> from pathlib import Path
>>> from water_docs.config import load_docs_config
>>> config = load_docs_config(Path("config/docs.yaml"))  # doctest: +SKIP
>>> config.site.content_dir  # doctest: +SKIP
'content'
"""

from .loader import load_docs_config
from .models import (
    DocsConfig,
    DocsConfigError,
    MenuEntryConfig,
    SiteSettings,
    ThemeConfig,
)

__all__ = [
    "DocsConfig",
    "DocsConfigError",
    "MenuEntryConfig",
    "SiteSettings",
    "ThemeConfig",
    "load_docs_config",
]
