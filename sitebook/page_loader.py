"""Load every page's metadata and content before any page is rendered.

Templates for one page read fields of other pages (``page.next.title``, an
exercise list declared in a chapter's front matter), so the whole set must be
loaded first. Records are updated in place; a record that already holds
content is not read again.
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ
from pathlib import Path

from ._constants import FOOTER, HEADER
from .config import PATH_PAGE_FIELDS, RESERVED_PAGE_FIELDS
from .markdown_parser import parse_front_matter

if typ.TYPE_CHECKING:
    from .config import PageRecord

logger = logging.getLogger(__name__)


def wrap_content(body: str) -> str:
    """Surround ``body`` with the header and footer include directives."""
    return f"{HEADER}\n{body}\n{FOOTER}"


def merge_metadata(page: PageRecord, metadata: cabc.Mapping[str, typ.Any]) -> None:
    """Overwrite ``page.metadata`` with front matter values.

    ``source`` and ``output`` replace the record's paths, so a page can move
    itself (``output: index.html`` publishes at the site root). Keys naming
    any other structural field of the record are skipped.
    """
    for key, value in metadata.items():
        if key in PATH_PAGE_FIELDS and value is not None:
            setattr(page, key, Path(str(value)))
            continue
        if key in RESERVED_PAGE_FIELDS:
            logger.warning(
                "Ignoring front matter key %r in %s; it names a page field",
                key,
                page.source,
            )
            continue
        page.metadata[key] = value


def load_page(page: PageRecord) -> bool:
    """Populate ``page.content`` from its source; return ``False`` if already loaded.

    Raises
    ------
    FileNotFoundError
        If the source file does not exist.
    """
    if page.is_loaded:
        return False
    if page.source is None:  # pragma: no cover - registry assigns sources
        msg = f"Page {page.slug!r} has no source path; register it first."
        raise ValueError(msg)
    text = page.source.read_text(encoding="utf-8")
    metadata, body = parse_front_matter(text)
    merge_metadata(page, metadata)
    page.content = wrap_content(body)
    logger.debug("Loaded %s (%d metadata keys)", page.source, len(metadata))
    return True


def load_pages(pages: cabc.Iterable[PageRecord]) -> int:
    """Load every page in ``pages``; return how many were read from disk."""
    loaded = sum(1 for page in pages if load_page(page))
    logger.info("Loaded %d pages", loaded)
    return loaded


__all__ = ["load_page", "load_pages", "merge_metadata", "wrap_content"]
