"""Cyclopts CLI entrypoint for converting articles into static HTML.

The ``article-pages`` console script reads a line-oriented article, converts
it with :func:`~article_pages.converter.convert_article`, and writes a single
HTML page with a generated side navigation. Every option can also be supplied
through ``INPUT_``-prefixed environment variables (for example
``INPUT_API_FILE``), which keeps CI invocations short.

Examples
--------
Convert the default article into ``index.html``:

>>> from article_pages.cli import main
>>> main()  # doctest: +SKIP

Convert a specific file into a custom destination:

>>> from article_pages.cli import app
>>> app(["--api-file", "docs/api.article", "--html-file", "dist/api.html"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
import structlog
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG
from .config import ConverterConfig, load_converter_config
from .converter import convert_article
from .errors import ConfigError, ConversionError
from .logs import configure_logging

log = structlog.get_logger()

app = App(name="article-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_config(config: Path | None) -> ConverterConfig:
    if config is None:
        return load_converter_config(DEFAULT_CONFIG, required=False)
    return load_converter_config(config)


@app.default
def convert(
    *,
    api_file: typ.Annotated[
        Path | None, Parameter(help="Path to the article to convert")
    ] = None,
    html_file: typ.Annotated[
        Path | None, Parameter(help="The output HTML file")
    ] = None,
    config: typ.Annotated[
        Path | None,
        Parameter(help=f"Path to converter config (default: {DEFAULT_CONFIG})"),
    ] = None,
    log_level: typ.Annotated[
        str | None, Parameter(help="Logging level, e.g. INFO or DEBUG")
    ] = None,
    log_format: typ.Annotated[
        str | None, Parameter(help="Log renderer: console or json")
    ] = None,
) -> None:
    """Convert an article into a single HTML page.

    Parameters
    ----------
    api_file : Path or None, optional
        Article source; overrides ``input`` from the config file.
    html_file : Path or None, optional
        Destination HTML file; overrides ``output`` from the config file.
    config : Path or None, optional
        YAML configuration. When omitted, ``article-pages.yaml`` in the
        working directory is used if present.
    log_level : str or None, optional
        Overrides ``logging.level`` from the config file.
    log_format : str or None, optional
        Overrides ``logging.format`` from the config file.

    Returns
    -------
    None
        Writes the HTML page and prints its path.

    Raises
    ------
    SystemExit
        With status 1 when the configuration is invalid or the conversion
        fails; the failure is logged first.
    """
    # stderr logging before the config is read, so stdout stays reserved
    configure_logging()
    try:
        settings = _load_config(config)
        configure_logging(
            log_level or settings.logging.level,
            log_format or settings.logging.format,
        )
    except ConfigError as exc:
        log.error("invalid_configuration", error=str(exc))
        raise SystemExit(1) from exc

    source = api_file or settings.input
    destination = html_file or settings.output
    try:
        written = convert_article(source, destination, page=settings.page)
    except ConversionError as exc:
        log.error(
            "conversion_failed",
            source=str(source),
            destination=str(destination),
            error=str(exc),
        )
        raise SystemExit(1) from exc
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application behind the ``article-pages`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
