"""Shared fixtures for sitebook tests.

The ``book_root`` fixture lays out a minimal book source tree in ``tmp_path``:
``inc/head.html`` and ``inc/foot.html`` wrapper templates, an empty
``links.yml``, and no pages. Tests add pages and a ``config.yml`` with the
``write_page`` and ``write_config`` helpers.
"""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

HEAD_TEMPLATE = (
    '<div class="page-head" data-root="{{ toRoot }}">'
    "{{ site.title }}: {{ page.title }}</div>\n"
)
FOOT_TEMPLATE = (
    '<div class="page-foot">'
    "{% if page.next %}<a class=\"next\" href=\"{{ toRoot }}/{{ page.next.slug }}/\">"
    "{{ page.next.title }}</a>{% endif %}"
    "</div>\n"
)


@pytest.fixture
def book_root(tmp_path: Path) -> Path:
    """Return a book root holding wrapper templates and an empty links file."""
    root = tmp_path / "book"
    (root / "inc").mkdir(parents=True)
    (root / "inc" / "head.html").write_text(HEAD_TEMPLATE, encoding="utf-8")
    (root / "inc" / "foot.html").write_text(FOOT_TEMPLATE, encoding="utf-8")
    (root / "links.yml").write_text("[]\n", encoding="utf-8")
    return root


@pytest.fixture
def write_page(book_root: Path) -> cabc.Callable[[str, str], Path]:
    """Return a helper writing ``<root>/<slug>/index.md`` from dedented text."""

    def _write(slug: str, text: str) -> Path:
        path = book_root / slug / "index.md"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(text).lstrip(), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_config(book_root: Path) -> cabc.Callable[[str], Path]:
    """Return a helper writing ``<root>/config.yml`` from dedented YAML."""

    def _write(text: str) -> Path:
        path = book_root / "config.yml"
        path.write_text(dedent(text).strip() + "\n", encoding="utf-8")
        return path

    return _write
