"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    PAGE_GROUPS,
    _build_page_group,
    _check_output_dir,
    _optional_str,
    _string_list,
)
from .models import SiteConfig

logger = logging.getLogger(__name__)

DEFAULT_ROOT_DIR = Path(".")
DEFAULT_OUTPUT_DIR = Path("docs")
DEFAULT_LINKS_FILE = Path("links.yml")

PATH_SETTING_ALIASES = {
    "root_dir": "rootDir",
    "output_dir": "outputDir",
    "links_file": "linksFile",
}

_INTERPRETED_KEYS = frozenset(
    {
        *PAGE_GROUPS,
        *PATH_SETTING_ALIASES,
        *PATH_SETTING_ALIASES.values(),
        "copy",
        "exclude",
        "pygments_style",
    }
)


def _yaml_loader() -> YAML:
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    return loader


def load_yaml_document(path: Path) -> typ.Any:  # noqa: ANN401 - arbitrary YAML
    """Parse the YAML document at ``path`` with the safe YAML 1.2 loader."""
    with path.open("r", encoding="utf-8") as handle:
        return _yaml_loader().load(handle)


def load_site_config(
    path: Path,
    *,
    root_dir: Path | None = None,
    output_dir: Path | None = None,
    links_file: Path | None = None,
) -> SiteConfig:
    """Load the YAML configuration describing the book's pages.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config.yml``).
    root_dir, output_dir, links_file : Path, optional
        Values supplied on the command line. Matching keys in the
        configuration file (``root_dir`` or ``rootDir`` and so on) take
        precedence over them; anything left unset
        falls back to ``.``, ``docs``, and ``links.yml``.

    Returns
    -------
    SiteConfig
        Parsed configuration with unregistered page records. Links are not
        loaded here; see :func:`sitebook.links.load_links`.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a page list is missing or malformed, or the output directory would
        swallow the root directory.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from sitebook.config import load_site_config
    >>> site = load_site_config(Path("config.yml"))  # doctest: +SKIP
    >>> [page.slug for page in site.chapters]  # doctest: +SKIP
    ['intro', 'basics']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loaded = load_yaml_document(path) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    resolved_root = _resolve_setting(raw, "root_dir", root_dir, DEFAULT_ROOT_DIR)
    resolved_output = _resolve_setting(raw, "output_dir", output_dir, DEFAULT_OUTPUT_DIR)
    resolved_links = _resolve_setting(raw, "links_file", links_file, DEFAULT_LINKS_FILE)
    _check_output_dir(resolved_root, resolved_output)

    groups = {group: _build_page_group(raw, group) for group in PAGE_GROUPS}
    settings = {key: value for key, value in raw.items() if key not in _INTERPRETED_KEYS}

    site = SiteConfig(
        root_dir=resolved_root,
        output_dir=resolved_output,
        links_path=resolved_links,
        extras=groups["extras"],
        chapters=groups["chapters"],
        appendices=groups["appendices"],
        copy=_string_list(raw, "copy"),
        exclude=_string_list(raw, "exclude"),
        pygments_style=_optional_str(raw.get("pygments_style")),
        settings=settings,
    )
    logger.info(
        "Loaded config from %s (%d extras, %d chapters, %d appendices)",
        path,
        len(site.extras),
        len(site.chapters),
        len(site.appendices),
    )
    return site


def _resolve_setting(
    raw: typ.Mapping[str, typ.Any], key: str, override: Path | None, default: Path
) -> Path:
    """Return the file value for ``key``, else the CLI value, else ``default``.

    The camelCase spelling (``rootDir``) is read when the snake_case key is
    absent.
    """
    value = _optional_str(raw.get(key, raw.get(PATH_SETTING_ALIASES[key])))
    if value is not None:
        return Path(value)
    if override is not None:
        return override
    return default


__all__ = [
    "DEFAULT_LINKS_FILE",
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_ROOT_DIR",
    "PATH_SETTING_ALIASES",
    "load_site_config",
    "load_yaml_document",
]
