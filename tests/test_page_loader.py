"""Unit tests for front matter parsing and the page loading pass."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import pytest

from sitebook._constants import FOOTER, HEADER
from sitebook.config import PageRecord
from sitebook.markdown_parser import FrontMatterError, parse_front_matter
from sitebook.page_loader import load_page, load_pages, wrap_content

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def test_front_matter_is_split_from_body() -> None:
    meta, body = parse_front_matter(
        "---\ntitle: Parsing\nexercises:\n  - slug: tokens\n---\n# Parsing\n"
    )
    assert meta == {"title": "Parsing", "exercises": [{"slug": "tokens"}]}
    assert body == "# Parsing\n"


def test_text_without_front_matter_is_all_body() -> None:
    text = "# Title\n\n---\n\nA thematic break above.\n"
    assert parse_front_matter(text) == ({}, text)


def test_empty_front_matter_block() -> None:
    assert parse_front_matter("---\n---\nBody\n") == ({}, "Body\n")


def test_front_matter_must_be_a_mapping() -> None:
    with pytest.raises(FrontMatterError, match="mapping"):
        parse_front_matter("---\n- a\n- b\n---\nBody\n")


def test_wrap_content_adds_header_and_footer() -> None:
    assert wrap_content("Body") == f"{HEADER}\nBody\n{FOOTER}"


def test_load_page_merges_metadata_over_config_values(
    write_page: cabc.Callable[[str, str], Path],
) -> None:
    source = write_page(
        "intro",
        """
        ---
        title: From Front Matter
        lede: A short summary
        ---
        Hello.
        """,
    )
    page = PageRecord(slug="intro", source=source, metadata={"title": "From Config"})

    assert load_page(page) is True
    assert page.title == "From Front Matter"
    assert page.lede == "A short summary"
    assert page.content == wrap_content("Hello.\n")


def test_reserved_front_matter_keys_are_ignored(
    write_page: cabc.Callable[[str, str], Path], caplog: pytest.LogCaptureFixture
) -> None:
    source = write_page("intro", "---\nslug: other\nindex: 9\n---\nBody\n")
    page = PageRecord(slug="intro", index=2, source=source)
    with caplog.at_level(logging.WARNING, logger="sitebook.page_loader"):
        load_page(page)
    assert page.slug == "intro"
    assert page.index == 2
    assert "slug" not in page.metadata
    assert "Ignoring front matter key 'slug'" in caplog.text


def test_loading_is_idempotent(write_page: cabc.Callable[[str, str], Path]) -> None:
    """A second load pass neither re-reads nor fails once sources are gone."""
    source = write_page("intro", "Body\n")
    pages = [PageRecord(slug="intro", source=source)]

    assert load_pages(pages) == 1
    source.unlink()
    assert load_pages(pages) == 0
    assert pages[0].content == wrap_content("Body\n")


def test_missing_source_aborts(tmp_path: Path) -> None:
    page = PageRecord(slug="ghost", source=tmp_path / "ghost" / "index.md")
    with pytest.raises(FileNotFoundError):
        load_pages([page])
    assert page.content is None


def test_front_matter_paths_replace_record_paths(
    write_page: cabc.Callable[[str, str], Path],
    caplog: pytest.LogCaptureFixture,
) -> None:
    source = write_page("home", "---\noutput: index.html\ntitle: Home\n---\nWelcome.\n")
    page = PageRecord(slug="home", source=source, output=Path("home/index.html"))
    with caplog.at_level(logging.WARNING, logger="sitebook.page_loader"):
        load_page(page)
    assert page.output == Path("index.html")
    assert "output" not in page.metadata
    assert caplog.text == ""
