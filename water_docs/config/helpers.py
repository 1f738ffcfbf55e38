"""Utility helpers shared by the docs configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path
from urllib.parse import urlsplit

from .models import DocsConfigError, MenuEntryConfig, SiteSettings, ThemeConfig


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _build_theme_config(payload: typ.Mapping[str, typ.Any]) -> ThemeConfig:
    """Build a ThemeConfig instance from the provided mapping payload."""
    base = ThemeConfig()
    return ThemeConfig(
        site_name=payload.get("site_name", base.site_name),
        doc_label=payload.get("doc_label", base.doc_label),
        page_title_suffix=payload.get("page_title_suffix", base.page_title_suffix),
    )


def _build_site_settings(
    payload: typ.Mapping[str, typ.Any], *, base_dir: Path | None = None
) -> SiteSettings:
    """Build SiteSettings from the ``site`` mapping, applying defaults.

    A relative filesystem ``root`` is resolved against ``base_dir`` (the
    folder holding the config file); ``http(s)`` roots are kept as given.
    """
    base = SiteSettings()
    timeout = payload.get("timeout", base.timeout)
    try:
        timeout = float(timeout)
    except (TypeError, ValueError) as exc:
        msg = f"Invalid site timeout {timeout!r}; expected a number of seconds."
        raise DocsConfigError(msg) from exc
    if timeout <= 0:
        msg = "Site timeout must be positive."
        raise DocsConfigError(msg)
    intro_entry = (
        _optional_str(payload["intro_entry"])
        if "intro_entry" in payload
        else base.intro_entry
    )
    return SiteSettings(
        root=_resolve_root(str(payload.get("root", base.root)), base_dir),
        content_dir=str(payload.get("content_dir", base.content_dir)).strip("/"),
        intro_entry=intro_entry,
        pygments_style=payload.get("pygments_style", base.pygments_style),
        timeout=timeout,
        output_dir=Path(payload.get("output_dir", base.output_dir)),
        base_url=payload.get("base_url", base.base_url),
    )


def _resolve_root(root: str, base_dir: Path | None) -> str:
    if base_dir is None or urlsplit(root).scheme in {"http", "https"}:
        return root
    path = Path(root)
    if path.is_absolute():
        return root
    return str(base_dir / path)


def _build_menu_entry(payload: object, *, depth: int = 0) -> MenuEntryConfig:
    """Build a MenuEntryConfig (and its children) from a YAML mapping."""
    if not isinstance(payload, dict):
        msg = f"Menu entries must be mappings, got {type(payload).__name__}."
        raise DocsConfigError(msg)
    label = _optional_str(payload.get("label"))
    if not label:
        msg = "Menu entry is missing a 'label'."
        raise DocsConfigError(msg)
    href = _optional_str(payload.get("href"))
    if not href:
        msg = f"Menu entry '{label}' is missing an 'href' anchor."
        raise DocsConfigError(msg)
    md = _optional_str(payload.get("md"))
    remote_md = _optional_str(payload.get("remote_md"))
    if md and remote_md:
        msg = f"Menu entry '{label}' declares both 'md' and 'remote_md'."
        raise DocsConfigError(msg)
    children_raw = payload.get("children") or []
    if children_raw and depth >= 1:
        msg = f"Menu entry '{label}' nests deeper than one sub-menu level."
        raise DocsConfigError(msg)
    if not isinstance(children_raw, list):
        msg = f"'children' of menu entry '{label}' must be a list."
        raise DocsConfigError(msg)
    return MenuEntryConfig(
        label=label,
        href=href,
        md=md,
        remote_md=remote_md,
        children=[_build_menu_entry(child, depth=depth + 1) for child in children_raw],
    )


def _build_descriptions(payload: object) -> dict[str, str]:
    """Return the description table with string keys and stripped values."""
    if not payload:
        return {}
    if not isinstance(payload, dict):
        msg = "'descriptions' must be a mapping of ids to text."
        raise DocsConfigError(msg)
    result: dict[str, str] = {}
    for key, value in payload.items():
        text = _optional_str(value)
        if text:
            result[str(key)] = text
    return result


__all__ = [
    "_build_descriptions",
    "_build_menu_entry",
    "_build_site_settings",
    "_build_theme_config",
    "_optional_str",
]
