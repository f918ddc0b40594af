"""Recursive Jinja expansion of page text.

A :class:`TemplateExpander` is the render capability handed to every page
template as ``_render`` and passed explicitly to helpers that include other
files. Each call evaluates its text once; helper output is spliced in as-is,
so content that may hold further directives must be expanded again by the
helper that read it.
"""

from __future__ import annotations

import collections.abc as cabc
import contextlib
import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path

    from jinja2 import Environment

MAX_EXPANSION_DEPTH = 32


class RenderError(RuntimeError):
    """Base class for failures raised while expanding page templates."""


class ExpansionDepthError(RenderError):
    """Raised when nested expansion exceeds the configured depth."""


class InclusionCycleError(RenderError):
    """Raised when a file is included again while it is still being expanded."""


class TemplateExpander:
    """Evaluate template text against one page's context, tracking recursion."""

    def __init__(
        self,
        env: Environment,
        context: cabc.Mapping[str, typ.Any] | None = None,
        *,
        max_depth: int = MAX_EXPANSION_DEPTH,
    ) -> None:
        self.env = env
        self.context: dict[str, typ.Any] = dict(context or {})
        self.max_depth = max_depth
        self._depth = 0
        self._active: list[Path] = []

    @property
    def depth(self) -> int:
        """Return how many expansions are currently in progress."""
        return self._depth

    def __call__(self, text: str) -> str:
        """Expand ``text`` once and return the result.

        Raises
        ------
        ExpansionDepthError
            If more than ``max_depth`` expansions are nested, or Jinja's own
            include chain recurses without bound.
        """
        if self._depth >= self.max_depth:
            msg = f"Template expansion nested deeper than {self.max_depth} levels"
            raise ExpansionDepthError(msg)
        self._depth += 1
        try:
            return self.env.from_string(text).render(self.context)
        except RecursionError as exc:
            msg = "Template includes recurse without end"
            raise ExpansionDepthError(msg) from exc
        finally:
            self._depth -= 1

    @contextlib.contextmanager
    def including(self, path: Path) -> cabc.Iterator[None]:
        """Mark ``path`` as being expanded for the duration of the block.

        Raises
        ------
        InclusionCycleError
            If ``path`` is already being expanded further up the stack.
        """
        key = path.resolve()
        if key in self._active:
            chain = " -> ".join(str(item) for item in [*self._active, key])
            msg = f"Inclusion cycle: {chain}"
            raise InclusionCycleError(msg)
        self._active.append(key)
        try:
            yield
        finally:
            self._active.pop()


__all__ = [
    "MAX_EXPANSION_DEPTH",
    "ExpansionDepthError",
    "InclusionCycleError",
    "RenderError",
    "TemplateExpander",
]
