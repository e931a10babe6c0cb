"""Convert line-oriented articles into a single static HTML page.

The package classifies article lines into headings, lists, code blocks, and
paragraphs, numbers headings for in-page anchors, and renders a floating side
navigation alongside the converted body.

Exports
-------
- ``app``: Cyclopts application behind the ``article-pages`` command.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``build_document``: Convert a sequence of lines into named sections.
- ``convert_article``: Read, convert, and write an article in one call.

Examples
--------
>>> from article_pages import build_document
>>> sections = build_document(["* Overview"])
>>> sections.nav[0].startswith('<div class="sidenav">')
True
"""

from __future__ import annotations

from .builder import DocumentSections, build_document
from .cli import app, main
from .converter import convert_article

__all__ = ["DocumentSections", "app", "build_document", "convert_article", "main"]
