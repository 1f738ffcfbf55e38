"""Unit tests for :class:`water_docs.navigation.MenuManager`.

These tests pin down the navigator's selection protocol: deep-link
resolution (exact, substring, default), the single-active-entry and
single-expanded-section rules, the ``page`` URL round trip, section
overviews, and the equivalence of overview tiles with sidebar clicks.
"""

from __future__ import annotations

import itertools

import pytest
from bs4 import BeautifulSoup
from conftest import RAW_REST, REMOTE_CORE, StubHttp, active_count

from water_docs._constants import PLACEHOLDER_HTML
from water_docs.content import LoadStatus
from water_docs.navigation import (
    ContentSource,
    MenuEntry,
    MenuManager,
    MenuTree,
    SourceKind,
    UnknownEntryError,
    read_page_param,
)
from water_docs.site import DocsPageBuilder

ALL_IDS = [
    "introduction",
    "core-concepts",
    "modules",
    "water-core",
    "water-rest",
    "tutorials",
]


def _snapshot(manager: MenuManager) -> tuple[object, ...]:
    state = manager.state
    return (
        state.selected_entry_id,
        state.expanded_section_id,
        state.active_section_id,
        read_page_param(manager.location),
        manager.pane.html,
        manager.pane.status,
    )


@pytest.mark.parametrize("entry_id", ALL_IDS)
def test_initialize_exact_match(manager: MenuManager, entry_id: str) -> None:
    entry = manager.initialize(entry_id)
    assert entry.id == entry_id
    assert manager.state.selected_entry_id == entry_id
    assert read_page_param(manager.location) == entry_id


def test_initialize_without_param_selects_introduction(manager: MenuManager) -> None:
    entry = manager.initialize()
    assert entry.id == "introduction"
    assert manager.pane.status is LoadStatus.RENDERED


def test_initialize_substring_match_on_id(manager: MenuManager) -> None:
    assert manager.initialize("REST").id == "water-rest"


def test_initialize_substring_match_on_label(manager: MenuManager) -> None:
    assert manager.initialize("water core").id == "water-core"


def test_initialize_strips_surrounding_whitespace(manager: MenuManager) -> None:
    assert manager.initialize("  core-concepts ").id == "core-concepts"
    assert manager.initialize(" rest ").id == "water-rest"


@pytest.mark.parametrize("missing", ["nothing-like-this", "zzz", " ", "   ", "\t"])
def test_initialize_unknown_falls_back_to_default(
    manager: MenuManager, missing: str
) -> None:
    entry = manager.initialize(missing)
    assert entry.id == "introduction"
    assert active_count(manager) == 1


def test_default_without_intro_is_first_entry_with_content(
    manager: MenuManager,
) -> None:
    tree = MenuTree(
        [
            MenuEntry("tutorials", "Tutorials"),
            MenuEntry(
                "modules",
                "Modules",
                children=[
                    MenuEntry(
                        "water-core",
                        "Water Core",
                        ContentSource(SourceKind.REMOTE, REMOTE_CORE),
                        parent_id="modules",
                    )
                ],
            ),
            MenuEntry("guide", "Guide", ContentSource(SourceKind.LOCAL, "intro.md")),
        ]
    )
    navigator = MenuManager(tree, manager.loader, manager.overviews)
    assert navigator.default_entry().id == "water-core"
    assert navigator.initialize("unmatched-key-xyz").id == "water-core"
    assert navigator.state.expanded_section_id == "modules"


def test_initialize_from_url_adopts_location(manager: MenuManager) -> None:
    entry = manager.initialize_from_url("https://example.org/documentation.html?page=water-core")
    assert entry.id == "water-core"
    assert manager.location == "https://example.org/documentation.html?page=water-core"


def test_selecting_child_expands_parent_and_marks_it_active(
    manager: MenuManager,
) -> None:
    manager.initialize()
    manager.click("water-rest")
    tree = manager.tree
    assert manager.state.selected_entry_id == "water-rest"
    assert manager.state.expanded_section_id == "modules"
    assert manager.is_active(tree.get("modules"))
    assert manager.is_active(tree.get("water-rest"))
    assert not manager.is_active(tree.get("introduction"))
    assert "Endpoints." in manager.pane.html


def test_selection_cardinality_over_click_sequences(manager: MenuManager) -> None:
    """After any click sequence: one selected entry, at most one expanded section."""
    manager.initialize()
    for sequence in itertools.permutations(ALL_IDS, 3):
        for entry_id in sequence:
            manager.click(entry_id)
            assert active_count(manager) == 1
            expanded = [
                entry
                for entry in manager.tree.entries
                if manager.is_expanded(entry)
            ]
            assert len(expanded) <= 1
            active_sections = [
                entry
                for entry in manager.tree.entries
                if entry.children and manager.is_active(entry)
            ]
            assert len(active_sections) <= 1


def test_url_round_trip(manager: MenuManager, builder: DocsPageBuilder) -> None:
    manager.initialize()
    manager.click("water-core")
    assert manager.location == "documentation.html?page=water-core"

    reloaded = builder.navigator()
    reloaded.initialize_from_url(manager.location)
    assert _snapshot(reloaded) == _snapshot(manager)


def test_url_parameter_is_replaced_not_appended(manager: MenuManager) -> None:
    manager.initialize()
    for entry_id in ("core-concepts", "water-core", "tutorials"):
        manager.click(entry_id)
    assert manager.location == "documentation.html?page=tutorials"


def test_section_click_shows_overview_and_toggles(manager: MenuManager) -> None:
    manager.initialize()
    manager.click("modules")
    assert manager.state.selected_entry_id == "modules"
    assert manager.state.expanded_section_id == "modules"
    assert manager.overview is not None
    assert [tile.index for tile in manager.overview.tiles] == ["01", "02"]
    assert [tile.entry_id for tile in manager.overview.tiles] == [
        "water-core",
        "water-rest",
    ]

    manager.click("modules")
    assert manager.state.selected_entry_id == "modules"
    assert manager.state.expanded_section_id is None
    assert manager.overview is not None


def test_section_overview_rendered_into_pane(manager: MenuManager) -> None:
    manager.initialize("modules")
    soup = BeautifulSoup(manager.pane.html, "html.parser")
    assert soup.select_one(".docs-overview h1").get_text(strip=True) == "Modules"
    tiles = soup.select(".toc-tile")
    assert [tile.select_one(".toc-tile__index").get_text() for tile in tiles] == [
        "01",
        "02",
    ]
    assert [tile.get("data-entry") for tile in tiles] == ["water-core", "water-rest"]


def test_tile_click_matches_sidebar_click(
    builder: DocsPageBuilder, http_stub: StubHttp  # noqa: ARG001
) -> None:
    http_stub.serve(RAW_REST, "# Water Rest\n\nEndpoints.\n")
    via_tile = builder.navigator()
    via_tile.initialize("modules")
    assert via_tile.overview is not None
    tile = via_tile.overview.tiles[1]
    assert tile.index == "02"
    via_tile.click_tile(tile.entry_id)

    via_sidebar = builder.navigator()
    via_sidebar.initialize("modules")
    via_sidebar.click("water-rest")

    assert _snapshot(via_tile) == _snapshot(via_sidebar)
    assert via_tile.state.selected_entry_id == "water-rest"


def test_terminal_entry_shows_placeholder(manager: MenuManager) -> None:
    manager.initialize("tutorials")
    assert manager.pane.html == PLACEHOLDER_HTML
    assert manager.pane.status is LoadStatus.FALLBACK


def test_remote_failure_keeps_navigation_usable(
    manager: MenuManager, http_stub: StubHttp
) -> None:
    http_stub.serve(RAW_REST, "gone", status=404)
    manager.initialize()
    manager.click("water-rest")
    assert manager.pane.html == PLACEHOLDER_HTML
    manager.click("core-concepts")
    assert manager.pane.status is LoadStatus.RENDERED
    assert manager.state.selected_entry_id == "core-concepts"


def test_top_level_leaf_click_clears_section_highlight(
    manager: MenuManager,
) -> None:
    manager.initialize("water-core")
    manager.click("core-concepts")
    assert manager.state.selected_entry_id == "core-concepts"
    assert manager.state.active_section_id is None
    assert manager.state.expanded_section_id in {None, "modules"}


def test_scroll_reset_on_selection(manager: MenuManager) -> None:
    manager.initialize()
    manager.pane.scroll_top = 420
    manager.click("core-concepts")
    assert manager.pane.scroll_top == 0


def test_click_unknown_entry_raises(manager: MenuManager) -> None:
    manager.initialize()
    with pytest.raises(UnknownEntryError):
        manager.click("nope")
