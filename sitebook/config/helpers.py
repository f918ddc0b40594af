"""Utility helpers shared by the sitebook configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import PageRecord, SiteConfigError

PAGE_GROUPS = ("extras", "chapters", "appendices")


def _build_page_record(payload: object, *, group: str, position: int) -> PageRecord:
    """Build an unregistered PageRecord from one config entry.

    A bare string is accepted as shorthand for ``{slug: <string>}``. The
    ``slug`` is copied as-is; the registry rejects records without one.
    """
    match payload:
        case str() as slug:
            return PageRecord(slug=slug)
        case dict():
            entry: dict[str, typ.Any] = dict(payload)
        case _:
            msg = f"Entry {position} in '{group}' must be a mapping or a slug string."
            raise SiteConfigError(msg)

    slug = entry.pop("slug", None)
    source = entry.pop("source", None)
    output = entry.pop("output", None)
    return PageRecord(
        slug=str(slug) if slug is not None else "",
        source=Path(source) if source else None,
        output=Path(output) if output else None,
        metadata=entry,
    )


def _build_page_group(raw: typ.Mapping[str, typ.Any], group: str) -> list[PageRecord]:
    """Return the PageRecords declared under ``group``."""
    if group not in raw:
        msg = f"Configuration is missing the '{group}' page list."
        raise SiteConfigError(msg)
    entries = raw[group] or []
    if not isinstance(entries, list):
        msg = f"'{group}' must be a list of page entries."
        raise SiteConfigError(msg)
    return [
        _build_page_record(payload, group=group, position=position)
        for position, payload in enumerate(entries)
    ]


def _string_list(raw: typ.Mapping[str, typ.Any], key: str) -> list[str]:
    """Return ``raw[key]`` as a list of strings, defaulting to empty."""
    value = raw.get(key) or []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        msg = f"'{key}' must be a list of glob patterns."
        raise SiteConfigError(msg)
    return [str(item) for item in value]


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _check_output_dir(root_dir: Path, output_dir: Path) -> None:
    """Refuse output directories that would delete the sources when cleared."""
    root = root_dir.resolve()
    output = output_dir.resolve()
    if output == root or root.is_relative_to(output):
        msg = (
            f"Output directory '{output_dir}' must not contain the root "
            f"directory '{root_dir}'; it is deleted on every build."
        )
        raise SiteConfigError(msg)


__all__ = [
    "PAGE_GROUPS",
    "_build_page_group",
    "_build_page_record",
    "_check_output_dir",
    "_optional_str",
    "_string_list",
]
