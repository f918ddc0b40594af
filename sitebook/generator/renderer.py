"""Convert expanded page text from Markdown to HTML with heading anchors."""

from __future__ import annotations

import re
import typing as typ
from html import escape
from urllib.parse import quote

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension

FENCE_LINE_PATTERN = re.compile(
    r"[ ]{0,3}(?P<fence>`{3,}|~{3,})(?P<lang>[\w+#.-]*)(?:,.*)?[ \t]*"
)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
_SLUG_STRIP_PATTERN = re.compile(r"[^\w\s-]")
_SLUG_SPACE_PATTERN = re.compile(r"\s+")


def slugify(text: str) -> str:
    """Turn heading text into a percent-encoded anchor id.

    Examples
    --------
    >>> slugify("Hello, World!")
    'hello-world'
    >>> slugify("  Already-lower  ")
    'already-lower'
    """
    cleaned = _SLUG_STRIP_PATTERN.sub("", text.strip().lower())
    return quote(_SLUG_SPACE_PATTERN.sub("-", cleaned), safe="-_")


def _toc_slugify(value: str, separator: str) -> str:  # noqa: ARG001 - toc API
    return slugify(value)


class HtmlContentRenderer:
    """Render Markdown with anchored headings and optional Pygments highlighting."""

    def __init__(self, pygments_style: str | None = None) -> None:
        """Initialize a renderer.

        Parameters
        ----------
        pygments_style : str, optional
            Pygments style used to highlight fenced code on the server. When
            ``None`` (default) fenced blocks keep a ``language-<name>`` class
            for client-side highlighting instead.
        """
        self.pygments_style = pygments_style
        self._formatter = (
            HtmlFormatter(style=pygments_style, cssclass="codehilite")
            if pygments_style
            else None
        )

    @property
    def stylesheet(self) -> str:
        """Return the CSS for highlighted code blocks, or ``""`` when disabled."""
        if self._formatter is None:
            return ""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Convert ``text`` to HTML; headings get ids from :func:`slugify`.

        Fences are rewritten by :func:`normalize_fences` only when a Pygments
        style is configured; otherwise the text reaches Python-Markdown as is.
        """
        if not text.strip():
            return ""
        source = text
        languages: list[str] = []
        extensions: list[Extension | str] = ["fenced_code", "tables", "toc"]
        configs: dict[str, dict[str, typ.Any]] = {"toc": {"slugify": _toc_slugify}}
        if self.pygments_style:
            source, languages = normalize_fences(text)
            extensions.append("codehilite")
            configs["codehilite"] = {
                "css_class": "codehilite",
                "guess_lang": False,
                "linenums": False,
                "pygments_style": self.pygments_style,
            }
        html = Markdown(extensions=extensions, extension_configs=configs).convert(source)
        if self.pygments_style and languages:
            html = _label_highlighted_blocks(html, languages)
        return html


def normalize_fences(text: str) -> tuple[str, list[str]]:
    """Prepare fenced code blocks for Python-Markdown.

    Opening and closing fence lines lose up to three spaces of indentation,
    and comma-separated flags after the language (``rust,no_run``) are
    dropped. Returns the rewritten text and the language of each block in
    order, ``"text"`` for unlabelled blocks.
    """
    lines: list[str] = []
    languages: list[str] = []
    open_fence: str | None = None
    for line in text.splitlines(keepends=True):
        match = FENCE_LINE_PATTERN.fullmatch(line.rstrip("\r\n"))
        if match is None:
            lines.append(line)
            continue
        fence, language = match["fence"], match["lang"]
        if open_fence is None:
            open_fence = fence
            languages.append(language or "text")
            lines.append(f"{fence}{language}\n")
        elif fence[0] == open_fence[0] and len(fence) >= len(open_fence) and not language:
            open_fence = None
            lines.append(f"{fence}\n")
        else:
            lines.append(line)
    return "".join(lines), languages


def _label_highlighted_blocks(html: str, languages: list[str]) -> str:
    """Add ``data-language`` to each ``codehilite`` wrapper, in block order."""
    remaining = iter(languages)

    def _tag(_match: re.Match[str]) -> str:
        language = escape(next(remaining, "text"), quote=True)
        return f'<div class="codehilite" data-language="{language}">'

    return CODEHILITE_OPEN_TAG.sub(_tag, html, count=len(languages))


__all__ = ["HtmlContentRenderer", "normalize_fences", "slugify"]
