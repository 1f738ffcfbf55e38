"""Shared fixtures for the water_docs test suite.

The fixtures build a throwaway site root with a ``content/`` folder, a
matching ``docs.yaml`` configuration, and a stub for ``requests.Session`` so
remote documents are served from an in-memory table instead of the network.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import requests

from water_docs.config import DocsConfig, load_docs_config
from water_docs.navigation import MenuManager
from water_docs.site import DocsPageBuilder

REMOTE_CORE = "https://github.com/acme/water/blob/main/Core/README.md"
REMOTE_REST = "https://github.com/acme/water/blob/main/Rest/README.md"
RAW_CORE = "https://raw.githubusercontent.com/acme/water/main/Core/README.md"
RAW_REST = "https://raw.githubusercontent.com/acme/water/main/Rest/README.md"

CONFIG_TEMPLATE = """
site:
  root: {root}
  intro_entry: introduction
  base_url: documentation.html
  output_dir: {output_dir}
theme:
  site_name: Water Framework
descriptions:
  modules: Ready-made building blocks.
  water-core: Registry and lifecycle.
menu:
  - label: Introduction
    href: "#introduction"
    md: intro.md
  - label: Core Concepts
    href: "#core-concepts"
    md: core-concepts.md
  - label: Modules
    href: "#modules"
    children:
      - label: Water Core
        href: "#water-core"
        remote_md: {remote_core}
      - label: Water Rest
        href: "#water-rest"
        remote_md: {remote_rest}
  - label: Tutorials
    href: "#tutorials"
"""


class StubResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, url: str, status_code: int, text: str) -> None:
        self.url = url
        self.status_code = status_code
        self.text = text

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            msg = f"{self.status_code} Error for url: {self.url}"
            raise requests.HTTPError(msg)


class StubHttp:
    """In-memory URL table served through a fake ``requests.Session``."""

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, str] | Exception] = {}
        self.calls: list[str] = []

    def serve(self, url: str, body: str, status: int = 200) -> None:
        self.routes[url] = (status, body)

    def fail(self, url: str, error: Exception) -> None:
        self.routes[url] = error

    def get(self, url: str, timeout: float = 30) -> StubResponse:  # noqa: ARG002
        self.calls.append(url)
        route = self.routes.get(url)
        if route is None:
            return StubResponse(url, 404, "Not Found")
        if isinstance(route, Exception):
            raise route
        status, body = route
        return StubResponse(url, status, body)


@pytest.fixture
def http_stub(monkeypatch: pytest.MonkeyPatch) -> StubHttp:
    """Route every ``requests.Session`` created by the loader to a StubHttp."""
    stub = StubHttp()

    class _Session:
        def get(self, url: str, timeout: float = 30) -> StubResponse:
            return stub.get(url, timeout=timeout)

        def close(self) -> None:
            return None

    monkeypatch.setattr("water_docs.content.loader.requests.Session", lambda: _Session())
    return stub


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Create a site root with two local markdown documents."""
    root = tmp_path / "site"
    content = root / "content"
    content.mkdir(parents=True)
    (content / "intro.md").write_text("# Hello\n\nWelcome to Water.\n", encoding="utf-8")
    (content / "core-concepts.md").write_text(
        "# Core Concepts\n\n## Components\n\n```java\nclass A {}\n```\n",
        encoding="utf-8",
    )
    return root


@pytest.fixture
def config_path(tmp_path: Path, site_root: Path) -> Path:
    """Write the fixture ``docs.yaml`` and return its path."""
    path = tmp_path / "docs.yaml"
    path.write_text(
        CONFIG_TEMPLATE.format(
            root=site_root,
            output_dir=tmp_path / "public",
            remote_core=REMOTE_CORE,
            remote_rest=REMOTE_REST,
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def docs_config(config_path: Path) -> DocsConfig:
    return load_docs_config(config_path)


@pytest.fixture
def builder(docs_config: DocsConfig) -> DocsPageBuilder:
    return DocsPageBuilder(docs_config)


@pytest.fixture
def manager(builder: DocsPageBuilder, http_stub: StubHttp) -> MenuManager:
    """Return a navigator whose remote documents resolve through ``http_stub``."""
    http_stub.serve(RAW_CORE, "# Water Core\n\nThe registry.\n")
    http_stub.serve(RAW_REST, "# Water Rest\n\nEndpoints.\n")
    return builder.navigator()


def active_count(manager: MenuManager) -> int:
    """Return how many entries the navigator reports as selected."""
    selected = [
        entry
        for entry in manager.tree.walk()
        if entry.id == manager.state.selected_entry_id
    ]
    return len(selected)


