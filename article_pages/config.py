"""Load converter configuration YAML into typed dataclasses.

The optional ``article-pages.yaml`` file supplies default input/output paths,
page chrome used by the HTML template, and logging preferences. Every key is
optional; missing values fall back to the built-in defaults.

Examples
--------
>>> from pathlib import Path
>>> from article_pages.config import load_converter_config
>>> config = load_converter_config(Path("article-pages.yaml"))  # doctest: +SKIP
>>> config.page.title  # doctest: +SKIP
'Minimega API'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ._constants import DEFAULT_INPUT, DEFAULT_OUTPUT, NAV_TITLE
from .errors import ConfigError
from .logs import LOG_FORMATS


@dc.dataclass(slots=True)
class PageConfig:
    """Static page chrome injected around the converted article."""

    title: str = "Minimega API"
    stylesheet: str = "css/api.css"
    favicon: str = "images/favicon.png"
    logo: str | None = "images/SNL_Horizontal_Black_Blue.png"
    logo_alt: str = "Sandia Logo"
    nav_title: str = NAV_TITLE
    head: list[str] = dc.field(default_factory=list)
    header: list[str] = dc.field(default_factory=list)
    footer: list[str] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class LoggingConfig:
    """Logging level and renderer selection."""

    level: str = "INFO"
    format: str = "console"


@dc.dataclass(slots=True)
class ConverterConfig:
    """Aggregate configuration for one converter invocation."""

    input: Path = DEFAULT_INPUT
    output: Path = DEFAULT_OUTPUT
    page: PageConfig = dc.field(default_factory=PageConfig)
    logging: LoggingConfig = dc.field(default_factory=LoggingConfig)


def load_converter_config(path: Path | None, *, required: bool = True) -> ConverterConfig:
    """Load the converter YAML configuration at ``path``.

    Parameters
    ----------
    path : Path or None
        Location of the YAML file. ``None`` returns the defaults.
    required : bool, optional
        When ``False`` a missing file yields the defaults instead of an error.

    Returns
    -------
    ConverterConfig
        Parsed configuration merged over the built-in defaults.

    Raises
    ------
    ConfigError
        If a required file is missing, the YAML cannot be parsed, or a value
        has the wrong shape.
    """
    if path is None:
        return ConverterConfig()
    if not path.exists():
        if not required:
            return ConverterConfig()
        msg = f"Configuration file '{path}' not found."
        raise ConfigError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    except YAMLError as exc:
        msg = f"Configuration file '{path}' is not valid YAML: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise ConfigError(msg)

    raw: dict[str, typ.Any] = dict(loaded)
    return ConverterConfig(
        input=Path(raw.get("input") or DEFAULT_INPUT),
        output=Path(raw.get("output") or DEFAULT_OUTPUT),
        page=_build_page_config(_mapping(raw, "page")),
        logging=_build_logging_config(_mapping(raw, "logging")),
    )


def _mapping(raw: dict[str, typ.Any], key: str) -> dict[str, typ.Any]:
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        msg = f"'{key}' must be a mapping."
        raise ConfigError(msg)
    return value


def _fragments(payload: dict[str, typ.Any], key: str) -> list[str]:
    """Return a list of HTML fragments, accepting a single string too."""
    value = payload.get(key)
    match value:
        case None:
            return []
        case str():
            return [value]
        case list() if all(isinstance(item, str) for item in value):
            return list(value)
        case _:
            msg = f"'page.{key}' must be a string or a list of strings."
            raise ConfigError(msg)


def _build_page_config(payload: dict[str, typ.Any]) -> PageConfig:
    defaults = PageConfig()
    logo = payload.get("logo", defaults.logo)
    return PageConfig(
        title=str(payload.get("title", defaults.title)),
        stylesheet=str(payload.get("stylesheet", defaults.stylesheet)),
        favicon=str(payload.get("favicon", defaults.favicon)),
        logo=str(logo) if logo else None,
        logo_alt=str(payload.get("logo_alt", defaults.logo_alt)),
        nav_title=str(payload.get("nav_title", defaults.nav_title)),
        head=_fragments(payload, "head"),
        header=_fragments(payload, "header"),
        footer=_fragments(payload, "footer"),
    )


def _build_logging_config(payload: dict[str, typ.Any]) -> LoggingConfig:
    level = str(payload.get("level", "INFO")).upper()
    fmt = str(payload.get("format", "console"))
    if fmt not in LOG_FORMATS:
        msg = f"'logging.format' must be one of {', '.join(LOG_FORMATS)}."
        raise ConfigError(msg)
    return LoggingConfig(level=level, format=fmt)


__all__ = [
    "ConverterConfig",
    "LoggingConfig",
    "PageConfig",
    "load_converter_config",
]
