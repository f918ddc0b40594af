r"""Split page sources into YAML front matter and Markdown body.

Page sources may open with a block of YAML metadata fenced by ``---`` lines.
The metadata becomes template data on the page record; the remainder is the
Markdown body that gets expanded and rendered.

Example
-------
>>> from sitebook.markdown_parser import parse_front_matter
>>> meta, body = parse_front_matter("---\ntitle: Intro\n---\nHello\n")
>>> meta["title"], body
('Intro', 'Hello\n')
"""

from __future__ import annotations

import io
import re
import typing as typ

from ruamel.yaml import YAML

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?P<meta>.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


class FrontMatterError(ValueError):
    """Raised when a front matter block does not hold a mapping."""


def parse_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Return ``(metadata, body)`` for ``text``.

    Parameters
    ----------
    text : str
        Full page source.

    Returns
    -------
    tuple[dict[str, Any], str]
        Parsed metadata (empty when there is no front matter block) and the
        body that follows the closing delimiter.

    Raises
    ------
    FrontMatterError
        If the block parses to something other than a mapping.
    YAMLError
        If the block is not valid YAML.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}, text

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    loaded = loader.load(io.StringIO(match.group("meta")))
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        msg = f"Front matter must be a mapping, not {type(loaded).__name__}."
        raise FrontMatterError(msg)
    return dict(loaded), text[match.end() :]


__all__ = ["FRONT_MATTER_PATTERN", "FrontMatterError", "parse_front_matter"]
