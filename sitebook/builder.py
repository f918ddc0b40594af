"""Run a complete sitebook build.

:class:`SiteBuilder` sequences the passes of one build: read the shared link
table, register every page, load every page, clear the output directory,
render each page, then copy static assets and write the numbering table.
Loading finishes for all pages before the first page is rendered.

Example
-------
>>> from pathlib import Path
>>> from sitebook.builder import SiteBuilder
>>> from sitebook.config import load_site_config
>>> site = load_site_config(Path("config.yml"))  # doctest: +SKIP
>>> result = SiteBuilder(site).run()  # doctest: +SKIP
>>> result.numbering  # doctest: +SKIP
{'intro': '1', 'notes': 'A'}
"""

from __future__ import annotations

import dataclasses as dc
import logging
import shutil
import typing as typ

from .assets import copy_assets
from .generator import PageGenerator
from .links import load_links
from .numbering import build_numbering, write_numbering
from .page_loader import load_pages
from .registry import build_page_registry

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import PageRecord, SiteConfig

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class BuildResult:
    """Artefacts produced by one build."""

    pages: list[PageRecord]
    written: list[Path]
    assets: list[Path]
    numbering: dict[str, str]
    numbering_path: Path


class SiteBuilder:
    """Compile every page of a site configuration into the output directory."""

    def __init__(self, site: SiteConfig) -> None:
        self.site = site

    def clean_output(self) -> None:
        """Delete and recreate the output directory."""
        output_dir = self.site.output_dir
        if output_dir.exists():
            shutil.rmtree(output_dir)
        output_dir.mkdir(parents=True)
        logger.info("Cleared output directory %s", output_dir)

    def run(self) -> BuildResult:
        """Build the site and return what was written.

        Notes
        -----
        Any exception aborts the build. The output directory is cleared only
        after every page has loaded, so a missing source leaves a previous
        build in place; a failure while rendering leaves it partly written.
        """
        links_text = load_links(self.site)
        pages = build_page_registry(self.site)
        load_pages(pages)
        self.clean_output()

        generator = PageGenerator(self.site, links_text)
        written = [generator.run(page) for page in pages]

        assets = copy_assets(
            self.site.root_dir, self.site.output_dir, self.site.copy, self.site.exclude
        )
        numbering = build_numbering(self.site)
        numbering_path = write_numbering(self.site, numbering)
        return BuildResult(
            pages=pages,
            written=written,
            assets=assets,
            numbering=numbering,
            numbering_path=numbering_path,
        )


__all__ = ["BuildResult", "SiteBuilder"]
