"""Utilities for expanding, converting, and writing sitebook pages."""

from .expander import (
    MAX_EXPANSION_DEPTH,
    ExpansionDepthError,
    InclusionCycleError,
    RenderError,
    TemplateExpander,
)
from .page_generator import PageGenerator
from .renderer import HtmlContentRenderer, slugify

__all__ = [
    "MAX_EXPANSION_DEPTH",
    "ExpansionDepthError",
    "HtmlContentRenderer",
    "InclusionCycleError",
    "PageGenerator",
    "RenderError",
    "TemplateExpander",
    "slugify",
]
