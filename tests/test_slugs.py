"""Unit tests for slug helpers and the ``page`` query-parameter helpers."""

from __future__ import annotations

import pytest

from water_docs.navigation import page_href, read_page_param, with_page_param
from water_docs.slugs import anchor_id, heading_slug, label_slug


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Hello", "hello"),
        ("Getting Started", "getting-started"),
        ("What's new?", "whats-new"),
        ("  -Edge- ", "edge"),
        ("snake_case stays", "snake_case-stays"),
    ],
)
def test_heading_slug(text: str, expected: str) -> None:
    assert heading_slug(text) == expected


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("Water Core", "water-core"),
        ("REST & JPA", "rest-jpa"),
        ("--Spring Boot 3--", "spring-boot-3"),
    ],
)
def test_label_slug(label: str, expected: str) -> None:
    assert label_slug(label) == expected


def test_anchor_id_strips_hash() -> None:
    assert anchor_id("#core-concepts") == "core-concepts"
    assert anchor_id("core-concepts") == "core-concepts"


def test_read_page_param_variants() -> None:
    assert read_page_param("documentation.html?page=water-core") == "water-core"
    assert read_page_param("https://example.org/docs?lang=en&page=x#top") == "x"
    assert read_page_param("documentation.html?page=") is None
    assert read_page_param("documentation.html") is None


def test_with_page_param_replaces_existing_value() -> None:
    url = "documentation.html?page=a"
    for entry_id in ("b", "c", "d"):
        url = with_page_param(url, entry_id)
    assert url == "documentation.html?page=d"


def test_with_page_param_adds_parameter() -> None:
    assert with_page_param("documentation.html", "intro") == "documentation.html?page=intro"


def test_page_href() -> None:
    assert page_href("water-core") == "?page=water-core"
