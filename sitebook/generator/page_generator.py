"""Render loaded pages to HTML files.

This module is the render pass of a build. :class:`PageGenerator` builds a
fresh template context for each page, expands the page's wrapped Markdown
(plus the shared link table) through Jinja, converts the result with
:class:`~sitebook.generator.renderer.HtmlContentRenderer`, and writes it under
the output directory. Every page must already be loaded, since templates read
fields of neighbouring pages.

Example
-------
>>> from sitebook.generator import PageGenerator
>>> generator = PageGenerator(site, links_text)  # doctest: +SKIP
>>> generator.run(site.chapters[0])  # doctest: +SKIP
PosixPath('docs/intro/index.html')
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from sitebook.registry import default_output

from .expander import MAX_EXPANSION_DEPTH, TemplateExpander
from .helpers import code_class, exercise, read_file, read_page, to_root
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from sitebook.config import PageRecord, SiteConfig

logger = logging.getLogger(__name__)


class PageGenerator:
    """Expand, convert and write pages for one site configuration."""

    def __init__(
        self,
        site: SiteConfig,
        links_text: str = "",
        *,
        renderer: HtmlContentRenderer | None = None,
        max_depth: int = MAX_EXPANSION_DEPTH,
    ) -> None:
        """Initialize the generator.

        Parameters
        ----------
        site : SiteConfig
            Configuration whose ``root_dir`` anchors template includes and
            whose ``output_dir`` receives the HTML.
        links_text : str, optional
            Markdown reference definitions appended to every page.
        renderer : HtmlContentRenderer, optional
            Markdown converter; defaults to one using ``site.pygments_style``.
        max_depth : int, optional
            Nesting limit for recursive expansion.
        """
        self.site = site
        self.links_text = links_text
        self.renderer = renderer or HtmlContentRenderer(site.pygments_style)
        self.max_depth = max_depth
        # Page bodies are Markdown, so expression output is spliced raw.
        self.env = Environment(  # noqa: S701
            loader=FileSystemLoader(str(site.root_dir)),
            autoescape=False,
            keep_trailing_newline=True,
        )

    def build_expander(self, page: PageRecord) -> TemplateExpander:
        """Return the expander holding ``page``'s template context."""
        expander = TemplateExpander(self.env, max_depth=self.max_depth)
        expander.context.update(
            {
                "root": str(self.site.root_dir),
                "filename": str(page.source),
                "site": self.site,
                "page": page,
                "toRoot": to_root(_page_output(page)),
                "pygments_css": self.renderer.stylesheet,
                "_codeClass": code_class,
                "_exercise": exercise,
                "_readFile": read_file,
                "_readPage": read_page,
                "_render": expander,
            }
        )
        return expander

    def expand(self, page: PageRecord) -> str:
        """Return ``page``'s content with every directive expanded.

        Raises
        ------
        ValueError
            If the page has not been loaded.
        """
        if page.content is None:
            msg = f"Page {page.slug!r} must be loaded before it is rendered."
            raise ValueError(msg)
        expander = self.build_expander(page)
        return expander(f"{page.content}\n\n{self.links_text}")

    def render(self, page: PageRecord) -> str:
        """Return the final HTML for ``page``."""
        html = self.renderer.markdown(self.expand(page))
        if not html.endswith("\n"):
            html += "\n"
        return html

    def output_path(self, page: PageRecord) -> Path:
        """Return where ``page`` is written."""
        return self.site.output_dir / _page_output(page)

    def run(self, page: PageRecord) -> Path:
        """Render ``page`` and write it, returning the written path."""
        html = self.render(page)
        output_path = self.output_path(page)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        logger.info("Wrote %s", output_path)
        return output_path


def _page_output(page: PageRecord) -> Path:
    return page.output or default_output(page.slug)


__all__ = ["PageGenerator"]
