"""Typed dataclasses describing sitebook configuration and page records."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

PATH_PAGE_FIELDS = frozenset({"source", "output"})
RESERVED_PAGE_FIELDS = frozenset(
    {
        "slug",
        "index",
        "previous",
        "next",
        "content",
        "numbered",
        "metadata",
    }
)


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class LinkEntry:
    """A shared Markdown reference definition."""

    slug: str
    url: str


@dc.dataclass(slots=True)
class PageRecord:
    """A single page moving through the registry, loading, and render phases.

    Attributes
    ----------
    slug : str
        Unique identifier, also the page's URL segment. Empty until validated
        by the registry.
    index : int
        Position in ``extras ++ chapters ++ appendices``; ``-1`` until the
        registry assigns it.
    source : Path or None
        Markdown source path; defaults to ``<root>/<slug>/index.md``.
    output : Path or None
        Output path relative to the output directory; defaults to
        ``<slug>/index.html``.
    previous, next : PageRecord or None
        Neighbours in ``chapters ++ appendices``. Always ``None`` for extras.
    numbered : bool
        ``True`` for chapters and appendices.
    content : str or None
        Wrapped Markdown body. ``None`` until the page has been loaded.
    metadata : dict[str, Any]
        Extra keys from the config entry, overwritten by front matter keys.
        Exposed as attributes so templates can write ``page.title``.
    """

    slug: str = ""
    index: int = -1
    source: Path | None = None
    output: Path | None = None
    previous: PageRecord | None = dc.field(default=None, repr=False, compare=False)
    next: PageRecord | None = dc.field(default=None, repr=False, compare=False)
    numbered: bool = False
    content: str | None = dc.field(default=None, repr=False)
    metadata: dict[str, typ.Any] = dc.field(default_factory=dict)

    def __getattr__(self, name: str) -> typ.Any:  # noqa: ANN401 - template data
        """Fall back to metadata for attributes the record does not define."""
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self.metadata[name]
        except KeyError:
            msg = f"Page {self.slug!r} has no attribute {name!r}"
            raise AttributeError(msg) from None

    @property
    def is_loaded(self) -> bool:
        """Return ``True`` once the page content has been read."""
        return self.content is not None


@dc.dataclass(slots=True)
class SiteConfig:
    """Process-wide configuration, read-only once rendering starts.

    Keys from the configuration file that sitebook does not interpret are
    kept in ``settings`` and are readable from templates as ``site.<key>``.
    """

    root_dir: Path
    output_dir: Path
    links_path: Path
    extras: list[PageRecord] = dc.field(default_factory=list)
    chapters: list[PageRecord] = dc.field(default_factory=list)
    appendices: list[PageRecord] = dc.field(default_factory=list)
    copy: list[str] = dc.field(default_factory=list)
    exclude: list[str] = dc.field(default_factory=list)
    links: list[LinkEntry] = dc.field(default_factory=list)
    pygments_style: str | None = None
    settings: dict[str, typ.Any] = dc.field(default_factory=dict)

    def __getattr__(self, name: str) -> typ.Any:  # noqa: ANN401 - template data
        """Fall back to free-form settings for unknown attributes."""
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self.settings[name]
        except KeyError:
            msg = f"Site configuration has no setting {name!r}"
            raise AttributeError(msg) from None

    @property
    def pages(self) -> list[PageRecord]:
        """Return every page in ``extras ++ chapters ++ appendices`` order."""
        return [*self.extras, *self.chapters, *self.appendices]

    @property
    def numbered_pages(self) -> list[PageRecord]:
        """Return the numbered subsequence ``chapters ++ appendices``."""
        return [*self.chapters, *self.appendices]


__all__ = [
    "PATH_PAGE_FIELDS",
    "RESERVED_PAGE_FIELDS",
    "LinkEntry",
    "PageRecord",
    "SiteConfig",
    "SiteConfigError",
]
