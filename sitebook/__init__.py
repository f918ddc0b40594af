"""Compile a book of Markdown chapters into a cross-linked static site.

This package exposes the CLI entry points used by ``sitebook build`` and the
:class:`~sitebook.builder.SiteBuilder` that runs the registry, loading,
rendering and finalizing passes.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from sitebook import main
>>> main()  # doctest: +SKIP
>>> from sitebook import app
>>> app(["build", "--verbose"])  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
