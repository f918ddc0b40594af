"""Compute and persist the slug-to-label numbering table.

Extras and chapters are numbered ``1``, ``2``, ... in that order; appendices
are lettered ``A``, ``B``, .... The table is written as JSON to
``numbering.js`` at the output root for the site's own scripts; the compiler
never reads it back.
"""

from __future__ import annotations

import json
import logging
import string
import typing as typ

from ._constants import NUMBERING_FILENAME
from .config import SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import SiteConfig

logger = logging.getLogger(__name__)

APPENDIX_LABELS = string.ascii_uppercase


def check_appendix_labels(site: SiteConfig) -> None:
    """Fail if ``site`` has more appendices than letters to label them.

    Raises
    ------
    SiteConfigError
        If there are more than 26 appendices.
    """
    if len(site.appendices) > len(APPENDIX_LABELS):
        msg = (
            f"At most {len(APPENDIX_LABELS)} appendices can be lettered; "
            f"{len(site.appendices)} are configured."
        )
        raise SiteConfigError(msg)


def build_numbering(site: SiteConfig) -> dict[str, str]:
    """Return the slug-to-label lookup for every page.

    Raises
    ------
    SiteConfigError
        If there are more appendices than letters to label them.
    """
    check_appendix_labels(site)
    result: dict[str, str] = {}
    for position, page in enumerate([*site.extras, *site.chapters], start=1):
        result[page.slug] = str(position)
    for letter, page in zip(APPENDIX_LABELS, site.appendices, strict=False):
        result[page.slug] = letter
    return result


def write_numbering(site: SiteConfig, numbering: dict[str, str]) -> Path:
    """Write ``numbering`` as indented JSON under the output directory."""
    path = site.output_dir / NUMBERING_FILENAME
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(numbering, indent=2), encoding="utf-8")
    logger.info("Wrote numbering for %d pages to %s", len(numbering), path)
    return path


__all__ = ["APPENDIX_LABELS", "build_numbering", "check_appendix_labels", "write_numbering"]
