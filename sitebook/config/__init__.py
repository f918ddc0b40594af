"""Load and validate the book configuration for sitebook builds.

This subpackage parses the project's ``config.yml`` file into a
:class:`SiteConfig` holding unregistered :class:`PageRecord` entries for the
``extras``, ``chapters`` and ``appendices`` groups, the asset copy/exclude
globs, and any free-form settings that templates read as ``site.<key>``. The
primary entry point is :func:`load_site_config`, which validates the page
groups before any page file is touched.

Examples
--------
>>> from pathlib import Path
>>> from sitebook.config import load_site_config
>>> site = load_site_config(Path("config.yml"))  # doctest: +SKIP
>>> site.output_dir  # doctest: +SKIP
PosixPath('docs')
"""

from .loader import (
    DEFAULT_LINKS_FILE,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_ROOT_DIR,
    load_site_config,
    load_yaml_document,
)
from .models import (
    PATH_PAGE_FIELDS,
    RESERVED_PAGE_FIELDS,
    LinkEntry,
    PageRecord,
    SiteConfig,
    SiteConfigError,
)

__all__ = [
    "DEFAULT_LINKS_FILE",
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_ROOT_DIR",
    "PATH_PAGE_FIELDS",
    "RESERVED_PAGE_FIELDS",
    "LinkEntry",
    "PageRecord",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
    "load_yaml_document",
]
