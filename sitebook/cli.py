"""Cyclopts CLI entrypoint for compiling a book into a static site.

The ``sitebook`` console script defined here loads ``config.yml`` and
``links.yml``, renders every extra, chapter and appendix page to HTML, copies
whitelisted static files, and writes ``numbering.js``. Values in the config
file override the command-line options, so a checked-in config can pin the
output directory for CI.

Examples
--------
Build with the default file names from the book's root:

>>> from sitebook.cli import main
>>> main()  # doctest: +SKIP

Build into a custom directory:

>>> from sitebook.cli import app
>>> app(["build", "--output-dir", "site"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from jinja2 import TemplateError
from ruamel.yaml import YAMLError

from .builder import SiteBuilder
from .config import (
    DEFAULT_LINKS_FILE,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_ROOT_DIR,
    load_site_config,
)
from .generator import RenderError

DEFAULT_CONFIG = Path("config.yml")

BUILD_ERRORS = (
    ValueError,
    RenderError,
    TemplateError,
    YAMLError,
    OSError,
)

app = App(name="sitebook", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(help="Compile the book's pages into a static HTML site.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to the book config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    links_file: typ.Annotated[
        Path, Parameter(help="Path to the shared links table")
    ] = DEFAULT_LINKS_FILE,
    output_dir: typ.Annotated[
        Path, Parameter(help="Directory to write the site into")
    ] = DEFAULT_OUTPUT_DIR,
    root_dir: typ.Annotated[
        Path, Parameter(help="Directory holding the page sources")
    ] = DEFAULT_ROOT_DIR,
    verbose: typ.Annotated[bool, Parameter(help="Log each build step")] = False,
) -> None:
    """Compile every configured page and print the files written.

    Parameters
    ----------
    config : Path, optional
        Path to the YAML configuration (``config.yml`` by default).
    links_file : Path, optional
        Path to the YAML list of ``{slug, url}`` link entries.
    output_dir : Path, optional
        Directory that is cleared and filled with the generated site.
    root_dir : Path, optional
        Directory containing page sources, ``inc/`` templates and assets.
    verbose : bool, optional
        Emit debug logging on stderr.

    Raises
    ------
    SystemExit
        With status 1 when the build fails; the error is printed to stderr.
    """
    _configure_logging(verbose=verbose)
    try:
        site = load_site_config(
            config, root_dir=root_dir, output_dir=output_dir, links_file=links_file
        )
        result = SiteBuilder(site).run()
    except BUILD_ERRORS as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for path in result.written:
        print(f"wrote {_format_path(path)}")
    print(f"wrote {_format_path(result.numbering_path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``sitebook`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
