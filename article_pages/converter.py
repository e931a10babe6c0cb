"""End-to-end article conversion: read, build, render, write.

Example
-------
>>> from pathlib import Path
>>> from article_pages.converter import convert_article
>>> convert_article(Path("api.article"), Path("index.html"))  # doctest: +SKIP
PosixPath('index.html')
"""

from __future__ import annotations

import typing as typ

import structlog

from .builder import DocumentSections, build_document
from .config import PageConfig
from .reader import read_source_lines
from .renderer import DocumentRenderer

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

log = structlog.get_logger()


def build_sections(
    lines: cabc.Sequence[str], page: PageConfig | None = None
) -> DocumentSections:
    """Build the article sections and merge in configured page fragments."""
    page = page or PageConfig()
    sections = build_document(lines, nav_title=page.nav_title)
    sections.head.extend(page.head)
    sections.header.extend(page.header)
    sections.footer.extend(page.footer)
    return sections


def convert_article(
    input_path: Path,
    output_path: Path,
    *,
    page: PageConfig | None = None,
    templates_dir: Path | None = None,
) -> Path:
    """Convert the article at ``input_path`` into an HTML page.

    Parameters
    ----------
    input_path : Path
        Article source file.
    output_path : Path
        Destination HTML file; replaced atomically.
    page : PageConfig, optional
        Page chrome for the template; defaults to :class:`PageConfig`.
    templates_dir : Path, optional
        Override for the template directory.

    Returns
    -------
    Path
        The written output path.

    Raises
    ------
    SourceReadError
        If the article cannot be read.
    TemplateRenderError
        If the template cannot be rendered.
    OutputWriteError
        If the output cannot be written.
    """
    page = page or PageConfig()
    log.info("converting_article", source=str(input_path))
    sections = build_sections(read_source_lines(input_path), page)
    log.info("writing_html", destination=str(output_path))
    renderer = DocumentRenderer(page, templates_dir=templates_dir)
    return renderer.write(sections, output_path)


__all__ = ["build_sections", "convert_article"]
