"""Behaviour tests for a complete site build.

The scenario lays out a one-chapter, one-appendix book in ``tmp_path`` using
the shared ``book_root`` fixtures, runs :class:`~sitebook.builder.SiteBuilder`
against the loaded configuration, and inspects the written HTML, the
``numbering.js`` table, and the copied static files.
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from sitebook.builder import BuildResult, SiteBuilder
from sitebook.config import load_site_config

if typ.TYPE_CHECKING:
    import collections.abc as cabc

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "build_site.feature"
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given(parsers.parse('a book with chapter "{chapter}" and appendix "{appendix}"'))
def given_book(
    chapter: str,
    appendix: str,
    book_root: Path,
    write_page: cabc.Callable[[str, str], Path],
    scenario_state: dict[str, object],
) -> None:
    """Write one chapter and one appendix page under the book root."""
    write_page(chapter, "---\ntitle: Introduction\n---\n# Getting Started\n")
    write_page(appendix, "---\ntitle: Notes\n---\n# Further Reading\n")
    scenario_state["chapter"] = chapter
    scenario_state["appendix"] = appendix
    scenario_state["root"] = book_root


@given(parsers.parse('the book copies "{pattern}" but excludes "{excluded}"'))
def given_copy_rules(
    pattern: str,
    excluded: str,
    write_config: cabc.Callable[[str], Path],
    scenario_state: dict[str, object],
) -> None:
    """Add static files and a config whitelisting some of them."""
    root = typ.cast("Path", scenario_state["root"])
    assets = root / "assets"
    assets.mkdir()
    (assets / "style.css").write_text("body { margin: 0; }\n", encoding="utf-8")
    (assets / "scratch.tmp").write_text("draft\n", encoding="utf-8")
    scenario_state["config"] = write_config(
        f"""
        title: The Book
        extras: []
        chapters:
          - {scenario_state["chapter"]}
        appendices:
          - {scenario_state["appendix"]}
        copy:
          - "{pattern}"
        exclude:
          - "{excluded}"
        """
    )


@when("the site is built")
def when_built(scenario_state: dict[str, object]) -> None:
    """Load the config and run every build pass."""
    root = typ.cast("Path", scenario_state["root"])
    site = load_site_config(
        typ.cast("Path", scenario_state["config"]),
        root_dir=root,
        output_dir=root.parent / "site",
        links_file=root / "links.yml",
    )
    scenario_state["result"] = SiteBuilder(site).run()
    scenario_state["output"] = site.output_dir


@then(parsers.parse('"{first}" and "{second}" are written'))
def then_pages_written(first: str, second: str, scenario_state: dict[str, object]) -> None:
    output = typ.cast("Path", scenario_state["output"])
    result = typ.cast("BuildResult", scenario_state["result"])
    assert result.written == [output / first, output / second]
    for name in (first, second):
        assert (output / name).is_file()


@then("the chapter links forward to the appendix")
def then_chapter_links(scenario_state: dict[str, object]) -> None:
    result = typ.cast("BuildResult", scenario_state["result"])
    chapter, appendix = result.pages
    assert chapter.next is appendix
    assert appendix.previous is chapter

    output = typ.cast("Path", scenario_state["output"])
    html = (output / chapter.output).read_text(encoding="utf-8")
    soup = BeautifulSoup(html, "html.parser")
    link = soup.find("a", class_="next")
    assert link is not None
    assert link.get("href") == f"../{appendix.slug}/"
    heading = soup.find("h1")
    assert heading is not None
    assert heading.get("id") == "getting-started"


@then(parsers.parse('numbering.js maps "{chapter}" to "{first}" and "{appendix}" to "{second}"'))
def then_numbering(
    chapter: str,
    first: str,
    appendix: str,
    second: str,
    scenario_state: dict[str, object],
) -> None:
    output = typ.cast("Path", scenario_state["output"])
    numbering = json.loads((output / "numbering.js").read_text(encoding="utf-8"))
    assert numbering == {chapter: first, appendix: second}


@then(parsers.parse('"{copied}" is copied but "{skipped}" is not'))
def then_assets(copied: str, skipped: str, scenario_state: dict[str, object]) -> None:
    output = typ.cast("Path", scenario_state["output"])
    assert (output / copied).is_file()
    assert not (output / skipped).exists()
