"""Inject document sections into the page template and write the result.

:class:`DocumentRenderer` wraps a Jinja2 environment rooted at the package
``templates`` directory. Section fragments are inserted verbatim while page
chrome from :class:`~article_pages.config.PageConfig` is autoescaped. Output
files are written to a temporary sibling first and moved into place, so a
failed render never leaves a truncated page behind.

Example
-------
>>> from pathlib import Path
>>> from article_pages.builder import build_document
>>> from article_pages.config import PageConfig
>>> from article_pages.renderer import DocumentRenderer
>>> renderer = DocumentRenderer(PageConfig())
>>> renderer.write(build_document(["Hello"]), Path("index.html"))  # doctest: +SKIP
PosixPath('index.html')
"""

from __future__ import annotations

import os
import tempfile
import typing as typ
from pathlib import Path

import structlog
from jinja2 import Environment, FileSystemLoader, TemplateError

from .errors import OutputWriteError, TemplateRenderError

if typ.TYPE_CHECKING:
    from .builder import DocumentSections
    from .config import PageConfig

log = structlog.get_logger()

TEMPLATE_NAME = "article.jinja"

# mkstemp creates 0600 files; published pages must stay world-readable
_OUTPUT_FILE_MODE = 0o644


class DocumentRenderer:
    """Render :class:`DocumentSections` into a complete HTML page."""

    def __init__(
        self,
        page: PageConfig,
        *,
        templates_dir: Path | None = None,
        template_name: str = TEMPLATE_NAME,
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        page : PageConfig
            Title, stylesheet, favicon, and logo used by the template.
        templates_dir : Path, optional
            Directory containing the template; defaults to the package
            ``templates`` directory.
        template_name : str, optional
            Template file to load from ``templates_dir``.
        """
        self.page = page
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.template_name = template_name
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render(self, sections: DocumentSections) -> str:
        """Return the full HTML page for ``sections``.

        Raises
        ------
        TemplateRenderError
            If the template is missing, fails to parse, or fails to render.
        """
        try:
            template = self.env.get_template(self.template_name)
            html = template.render(page=self.page, sections=sections.as_mapping())
        except TemplateError as exc:
            msg = f"Unable to render template '{self.template_name}': {exc}"
            raise TemplateRenderError(msg) from exc
        if not html.endswith("\n"):
            html += "\n"
        return html

    def write(self, sections: DocumentSections, output_path: Path) -> Path:
        """Render ``sections`` and atomically replace ``output_path``.

        Returns
        -------
        Path
            The path that was written.

        Raises
        ------
        TemplateRenderError
            If rendering fails; nothing is written in that case.
        OutputWriteError
            If the destination directory or file cannot be written.
        """
        html = self.render(sections)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            _atomic_write(output_path, html)
        except OSError as exc:
            msg = f"Unable to write '{output_path}': {exc}"
            raise OutputWriteError(msg) from exc
        log.info("html_written", path=str(output_path), bytes=len(html.encode()))
        return output_path


def _atomic_write(path: Path, text: str) -> None:
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}-", suffix=".tmp", dir=path.parent
    )
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        os.chmod(tmp, _OUTPUT_FILE_MODE)
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


__all__ = ["TEMPLATE_NAME", "DocumentRenderer"]
