"""Unit tests for copying whitelisted static files."""

from __future__ import annotations

from pathlib import Path

import pytest

from sitebook.assets import collect_assets, copy_assets


@pytest.fixture
def asset_root(tmp_path: Path) -> Path:
    """Return a root containing stylesheets, scripts, and build debris."""
    root = tmp_path / "book"
    files = {
        "site.css": "body {}",
        "CNAME": "book.example.com",
        "js/app.js": "console.log(1)",
        "js/vendor/lib.min.js": "/* lib */",
        "js/__pycache__/tool.cpython-313.pyc": "",
        "intro/diagram.svg": "<svg/>",
        "intro/index.md": "# Intro",
    }
    for name, text in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


def _relative(paths: list[Path], base: Path) -> list[str]:
    return [path.relative_to(base).as_posix() for path in paths]


def test_patterns_expand_in_order(asset_root: Path) -> None:
    found = collect_assets(asset_root, ["*.css", "**/*.svg"], [])
    assert _relative(found, asset_root) == ["site.css", "intro/diagram.svg", "CNAME"]


def test_excluded_matches_are_dropped(asset_root: Path) -> None:
    found = collect_assets(asset_root, ["js/**/*"], ["**/*.pyc", "js/vendor/**"])
    assert _relative(found, asset_root) == ["js/app.js", "CNAME"]


def test_default_files_honour_exclusions(asset_root: Path) -> None:
    assert collect_assets(asset_root, [], ["CNAME"]) == []


def test_copy_mirrors_paths(asset_root: Path, tmp_path: Path) -> None:
    output_dir = tmp_path / "site"
    written = copy_assets(asset_root, output_dir, ["**/*.svg", "js/*.js"], [])
    assert _relative(written, output_dir) == ["intro/diagram.svg", "js/app.js", "CNAME"]
    assert (output_dir / "intro" / "diagram.svg").read_text(encoding="utf-8") == "<svg/>"


def test_file_matched_by_include_and_exclude_is_not_copied(
    asset_root: Path, tmp_path: Path
) -> None:
    output_dir = tmp_path / "site"
    copy_assets(asset_root, output_dir, ["site.css", "intro/*"], ["**/*.md"])
    assert (output_dir / "intro" / "diagram.svg").exists()
    assert not (output_dir / "intro" / "index.md").exists()


def test_hidden_paths_are_not_globbed(tmp_path: Path) -> None:
    root = tmp_path / "book"
    for name in (".git/config", ".venv/lib/site.py", ".env", ".nojekyll", "a.css"):
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")

    found = collect_assets(root, ["**/*"], [])

    assert _relative(found, root) == ["a.css", ".nojekyll"], (
        "only the default dotfiles are published"
    )
