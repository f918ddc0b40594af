"""Build the shared table of Markdown reference links.

Every page is rendered with the same block of ``[slug]: url`` definitions
appended, so prose can write ``[Python][python]`` without repeating URLs.

Example
-------
>>> from sitebook.config import LinkEntry
>>> from sitebook.links import build_links_table
>>> build_links_table([LinkEntry("py", "https://python.org")])
'[py]: https://python.org'
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ

from .config import LinkEntry, SiteConfigError, load_yaml_document

if typ.TYPE_CHECKING:
    from .config import SiteConfig

logger = logging.getLogger(__name__)


def build_links_table(entries: cabc.Iterable[LinkEntry]) -> str:
    """Return one reference definition per entry, in input order."""
    return "\n".join(f"[{entry.slug}]: {entry.url}" for entry in entries)


def parse_link_entries(document: object) -> list[LinkEntry]:
    """Convert a parsed links document into LinkEntry records.

    Raises
    ------
    SiteConfigError
        If the document is not a list, or an entry lacks ``slug`` or ``url``.
    """
    if document is None:
        return []
    if not isinstance(document, list):
        msg = "Links document must be a list of {slug, url} entries."
        raise SiteConfigError(msg)
    entries: list[LinkEntry] = []
    for position, item in enumerate(document):
        if not isinstance(item, dict) or "slug" not in item or "url" not in item:
            msg = f"Link entry {position} must define both 'slug' and 'url'."
            raise SiteConfigError(msg)
        entries.append(LinkEntry(slug=str(item["slug"]), url=str(item["url"])))
    return entries


def load_links(site: SiteConfig) -> str:
    """Load ``site.links_path``, attach the entries to ``site``, return the table."""
    site.links = parse_link_entries(load_yaml_document(site.links_path))
    logger.info("Loaded %d links from %s", len(site.links), site.links_path)
    return build_links_table(site.links)


__all__ = ["build_links_table", "load_links", "parse_link_entries"]
