"""Common literal values used across article_pages.

These constants keep section names, default paths, and anchor formats
centralized so the builder, renderer, CLI, and tests agree on them.

Examples
--------
>>> from article_pages import _constants
>>> _constants.ANCHOR_TEMPLATE.format(top=2, sub=1)
'header_2.1'
>>> _constants.SECTION_NAMES[-1]
'footer'
"""

from pathlib import Path

SECTION_NAMES = ("head", "header", "nav", "body", "footer")
ANCHOR_TEMPLATE = "header_{top}.{sub}"
MAX_HEADING_LEVEL = 5
HEADING_SLOTS = 6
NAV_TITLE = "Navigation"

DEFAULT_INPUT = Path("minimega/doc/content/articles/api.article")
DEFAULT_OUTPUT = Path("index.html")
DEFAULT_CONFIG = Path("article-pages.yaml")
