"""Register every page and compute its structural relationships.

The registry is the first pass of a build. It walks ``extras``, ``chapters``
and ``appendices`` in that order, gives each record its position and default
paths, and chains the numbered pages (chapters then appendices) together with
``previous``/``next`` references. It performs no file I/O, so running it
twice over the same configuration produces the same result.
"""

from __future__ import annotations

import collections
import logging
import typing as typ
from pathlib import Path

from .config import SiteConfigError
from .numbering import check_appendix_labels

if typ.TYPE_CHECKING:
    from .config import PageRecord, SiteConfig

logger = logging.getLogger(__name__)


class PageRegistryError(SiteConfigError):
    """Raised when a page record cannot be registered."""


def default_source(root_dir: Path, slug: str) -> Path:
    """Return ``<root>/<slug>/index.md``."""
    return root_dir / slug / "index.md"


def default_output(slug: str) -> Path:
    """Return ``<slug>/index.html``."""
    return Path(slug) / "index.html"


def build_page_registry(site: SiteConfig) -> list[PageRecord]:
    """Return every page in order, decorated with index, paths and neighbours.

    Parameters
    ----------
    site : SiteConfig
        Loaded configuration; its page records are updated in place.

    Returns
    -------
    list[PageRecord]
        ``extras ++ chapters ++ appendices``.

    Raises
    ------
    PageRegistryError
        If any record has no slug.
    SiteConfigError
        If there are more appendices than letters to label them.
    """
    check_appendix_labels(site)
    pages = site.pages
    for index, page in enumerate(pages):
        if not page.slug:
            msg = f"Every page must have a slug (entry {index} has {sorted(page.metadata)})"
            raise PageRegistryError(msg)
        page.index = index
        if page.source is None:
            page.source = default_source(site.root_dir, page.slug)
        if page.output is None:
            page.output = default_output(page.slug)

    numbered = site.numbered_pages
    for position, page in enumerate(numbered):
        page.numbered = True
        page.previous = numbered[position - 1] if position > 0 else None
        page.next = numbered[position + 1] if position < len(numbered) - 1 else None

    counts = collections.Counter(page.slug for page in pages)
    for slug, count in counts.items():
        if count > 1:
            logger.warning("Slug %r is used by %d pages", slug, count)

    logger.info("Registered %d pages (%d numbered)", len(pages), len(numbered))
    return pages


__all__ = [
    "PageRegistryError",
    "build_page_registry",
    "default_output",
    "default_source",
]
