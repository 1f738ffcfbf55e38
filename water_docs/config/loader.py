"""Load the docs navigator YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_descriptions,
    _build_menu_entry,
    _build_site_settings,
    _build_theme_config,
)
from .models import DocsConfig, DocsConfigError


def load_docs_config(path: Path) -> DocsConfig:
    """Load the YAML configuration describing the docs menu and site settings.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/docs.yaml``).

    Returns
    -------
    DocsConfig
        Parsed configuration including site settings, theme, the menu tree,
        and the static description table used by section overviews.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    DocsConfigError
        If the menu is missing or an entry is malformed.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from water_docs.config import load_docs_config
    >>> config = load_docs_config(Path("config/docs.yaml"))  # doctest: +SKIP
    >>> config.menu[0].label  # doctest: +SKIP
    'Introduction'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    menu_raw = raw.get("menu") or []
    if not menu_raw:
        msg = "No menu entries defined in docs configuration."
        raise DocsConfigError(msg)
    if not isinstance(menu_raw, list):
        msg = "'menu' must be a list of entries."
        raise DocsConfigError(msg)

    return DocsConfig(
        site=_build_site_settings(raw.get("site", {}) or {}, base_dir=path.parent),
        theme=_build_theme_config(raw.get("theme", {}) or {}),
        menu=[_build_menu_entry(item) for item in menu_raw],
        descriptions=_build_descriptions(raw.get("descriptions")),
    )


__all__ = ["load_docs_config"]
