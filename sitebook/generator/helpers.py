"""Helper functions exposed to page templates.

Templates call these through the names ``_codeClass``, ``_exercise``,
``_readFile`` and ``_readPage``. Each helper receives everything it needs as
arguments; nothing is read from ambient state.
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ
from pathlib import Path, PurePath, PurePosixPath

if typ.TYPE_CHECKING:
    from .expander import TemplateExpander

logger = logging.getLogger(__name__)

EXERCISE_PARTS = ("problem", "solution")


def _field(record: object, name: str) -> typ.Any:  # noqa: ANN401 - template data
    """Read ``name`` from a mapping (front matter) or an object (page record)."""
    if isinstance(record, cabc.Mapping):
        return record[name]
    return getattr(record, name)


def code_class(filename: str | PurePath) -> str:
    """Return the highlighting class for ``filename``, e.g. ``language-py``."""
    return f"language-{PurePath(filename).suffix[1:]}"


def exercise(
    render: TemplateExpander,
    root: str | Path,
    chapter: object,
    entry: object,
    which: str,
) -> str:
    """Read, expand and title an exercise problem or solution.

    Parameters
    ----------
    render : TemplateExpander
        Expander for the page doing the inclusion.
    root : str or Path
        Root directory of the book sources.
    chapter : PageRecord or Mapping
        Chapter that owns the exercise; only its ``slug`` is used.
    entry : Mapping or object
        Exercise entry with ``slug`` and ``title``.
    which : str
        ``"problem"`` or ``"solution"``.

    Returns
    -------
    str
        ``<h3 class="exercise">`` heading followed by the expanded file.

    Raises
    ------
    ValueError
        If ``which`` is not one of :data:`EXERCISE_PARTS`.
    FileNotFoundError
        If the exercise file does not exist.
    """
    if which not in EXERCISE_PARTS:
        msg = f"Exercise part must be 'problem' or 'solution', not {which!r}"
        raise ValueError(msg)
    title = f'<h3 class="exercise">{_field(entry, "title")}</h3>'
    path = Path(root) / str(_field(chapter, "slug")) / str(_field(entry, "slug"))
    path = path / f"{which}.md"
    logger.debug("Including exercise %s", path)
    with render.including(path):
        contents = render(path.read_text(encoding="utf-8"))
    return f"{title}\n\n{contents}\n"


def read_file(main_file: str | Path, sub_file: str) -> str:
    """Read a file beside ``main_file`` and escape it for literal display."""
    text = (Path(main_file).parent / sub_file).read_text(encoding="utf-8")
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def read_page(main_file: str | Path, sub_file: str) -> str:
    """Read an HTML fragment beside ``main_file`` and return it unchanged."""
    return (Path(main_file).parent / sub_file).read_text(encoding="utf-8")


def to_root(output: str | PurePath) -> str:
    """Return the relative path from ``output``'s directory back to the site root.

    Examples
    --------
    >>> to_root("index.html")
    '.'
    >>> to_root("intro/index.html")
    '..'
    """
    parent = PurePosixPath(PurePath(output).as_posix()).parent
    if parent == PurePosixPath("."):
        return "."
    return "/".join(".." for _ in parent.parts)


__all__ = [
    "EXERCISE_PARTS",
    "code_class",
    "exercise",
    "read_file",
    "read_page",
    "to_root",
]
