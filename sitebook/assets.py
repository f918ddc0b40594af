"""Copy whitelisted static files from the book root into the output tree."""

from __future__ import annotations

import collections.abc as cabc
import logging
import shutil
from pathlib import Path, PurePosixPath

from ._constants import DEFAULT_COPY_FILES

logger = logging.getLogger(__name__)


def is_hidden(relative: PurePosixPath) -> bool:
    """Return ``True`` if any part of ``relative`` is a dotfile or dot-directory."""
    return any(part.startswith(".") for part in relative.parts)


def is_excluded(relative: PurePosixPath, exclude: cabc.Sequence[str]) -> bool:
    """Return ``True`` if ``relative`` matches any exclusion glob."""
    return any(relative.full_match(pattern) for pattern in exclude)


def collect_assets(
    root_dir: Path, copy: cabc.Sequence[str], exclude: cabc.Sequence[str]
) -> list[Path]:
    """Expand ``copy`` globs under ``root_dir`` and drop excluded matches.

    Parameters
    ----------
    root_dir : Path
        Directory the patterns are relative to.
    copy : Sequence[str]
        Include globs; ``**`` spans directories. Matches inside hidden
        files or directories (``.git/``, ``.venv/``) are skipped.
    exclude : Sequence[str]
        Exclusion globs matched against root-relative POSIX paths.

    Returns
    -------
    list[Path]
        Matching files, grouped by pattern in configuration order. A file
        matched by two patterns appears twice. ``.nojekyll`` and ``CNAME``
        are appended when present at the root.
    """
    matches: list[Path] = []
    for pattern in copy:
        matches.extend(
            path
            for path in sorted(root_dir.glob(pattern))
            if path.is_file() and not is_hidden(_relative(path, root_dir))
        )
    for name in DEFAULT_COPY_FILES:
        candidate = root_dir / name
        if candidate.is_file() and candidate not in matches:
            matches.append(candidate)
    return [
        path
        for path in matches
        if not is_excluded(_relative(path, root_dir), exclude)
    ]


def _relative(path: Path, root_dir: Path) -> PurePosixPath:
    return PurePosixPath(path.relative_to(root_dir).as_posix())


def copy_assets(
    root_dir: Path,
    output_dir: Path,
    copy: cabc.Sequence[str],
    exclude: cabc.Sequence[str],
) -> list[Path]:
    """Copy every collected asset to its mirrored path; return the destinations."""
    written: list[Path] = []
    for source in collect_assets(root_dir, copy, exclude):
        dest = output_dir / source.relative_to(root_dir)
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, dest)
        logger.debug("Copied %s to %s", source, dest)
        written.append(dest)
    logger.info("Copied %d assets into %s", len(written), output_dir)
    return written


__all__ = ["collect_assets", "copy_assets", "is_excluded", "is_hidden"]
