r"""Walk article lines once and assemble the named HTML sections.

The :class:`DocumentBuilder` dispatches each line to the classifier and block
scanners, appends rendered fragments to the ``body`` section, numbers headings,
and finally renders the side navigation into the ``nav`` section. The result
is a :class:`DocumentSections` record that the renderer consumes read-only.

Example
-------
>>> from article_pages.builder import build_document
>>> sections = build_document(["Intro", "", "** Usage"])
>>> sections.joined("body")
'<p>\nIntro<br/></p>\n<p><h3 id="header_1.1">Usage</h3>\n</p>'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import structlog

from ._constants import NAV_TITLE, SECTION_NAMES
from .classifier import escape_angles, is_code_line, is_heading, is_list_item
from .navigation import build_navigation
from .numbering import HeadingNumbering, NavigationEntry
from .scanners import find_next_code, find_next_list, find_next_paragraph

if typ.TYPE_CHECKING:
    import collections.abc as cabc

log = structlog.get_logger()

PARAGRAPH_OPEN = "<p>\n"
PARAGRAPH_CLOSE = "</p>"
PARAGRAPH_REOPEN = "\n<p>"


@dc.dataclass(slots=True)
class DocumentSections:
    """Rendered HTML fragments grouped by template injection point.

    Attributes
    ----------
    head, header, nav, body, footer : list[str]
        Fragments in rendering order for each section of the page.
    """

    head: list[str] = dc.field(default_factory=list)
    header: list[str] = dc.field(default_factory=list)
    nav: list[str] = dc.field(default_factory=list)
    body: list[str] = dc.field(default_factory=list)
    footer: list[str] = dc.field(default_factory=list)

    def joined(self, name: str) -> str:
        """Return the concatenated fragments of section ``name``.

        Raises
        ------
        KeyError
            If ``name`` is not one of the five section names.
        """
        if name not in SECTION_NAMES:
            msg = f"Unknown section '{name}'."
            raise KeyError(msg)
        return "".join(getattr(self, name))

    def as_mapping(self) -> dict[str, str]:
        """Return every section joined, keyed by section name."""
        return {name: self.joined(name) for name in SECTION_NAMES}


class DocumentBuilder:
    """Convert article lines into :class:`DocumentSections` in one pass."""

    def __init__(
        self, lines: cabc.Sequence[str], *, nav_title: str = NAV_TITLE
    ) -> None:
        """Store the lines to convert and the navigation label.

        Parameters
        ----------
        lines : Sequence[str]
            Newline-stripped article lines.
        nav_title : str, optional
            Heading shown at the top of the side navigation.
        """
        self.lines = lines
        self.nav_title = nav_title
        self.sections = DocumentSections()
        self.numbering = HeadingNumbering()
        self.nav_entries: dict[str, NavigationEntry] = {}
        self.has_content = False

    def build(self) -> DocumentSections:
        """Run the conversion and return the populated sections.

        Returns
        -------
        DocumentSections
            Sections with ``body`` and ``nav`` filled in. Calling ``build``
            again starts from fresh state and yields an equal result.
        """
        self.sections = DocumentSections()
        self.numbering = HeadingNumbering()
        self.nav_entries = {}
        self.has_content = False

        index = 0
        while index < len(self.lines):
            index = self._step(index)
        if self.has_content:
            self.sections.body.append(PARAGRAPH_CLOSE)
            self.has_content = False

        self.sections.nav.append(
            build_navigation(self.numbering, self.nav_entries, title=self.nav_title)
        )
        log.debug(
            "document_built",
            lines=len(self.lines),
            fragments=len(self.sections.body),
            headings=len(self.nav_entries),
            level_counts=list(self.numbering.level_counts),
        )
        return self.sections

    def _step(self, index: int) -> int:
        """Consume the block starting at ``index`` and return the next index."""
        body = self.sections.body
        first = index == 0
        escaped = escape_angles(self.lines[index])
        line = escaped
        if first:
            line = f"{PARAGRAPH_OPEN}{escaped}"
            self.has_content = True

        if not line:
            return self._blank_line(index)
        if is_heading(line):
            self._heading(line)
            return index + 1
        # list and code checks see the line exactly as the scanners do
        if first and (is_list_item(escaped) or is_code_line(escaped)):
            body.append(PARAGRAPH_OPEN)
        if is_list_item(escaped):
            items, index = find_next_list(self.lines, index)
            body.append(f"<ul>{items}</ul><br/>")
            return index
        if is_code_line(escaped):
            code, index = find_next_code(self.lines, index)
            body.append(f"<pre>{code}</pre><br/>")
            return index
        body.append(f"{line}<br/>")
        return index + 1

    def _blank_line(self, index: int) -> int:
        """Close the open paragraph and open another if text follows."""
        if self.has_content:
            self.sections.body.append(PARAGRAPH_CLOSE)
            self.has_content = False
        next_index = index + 1
        stop, found = find_next_paragraph(self.lines, next_index)
        if stop - index > 1 and found:
            self.sections.body.append(PARAGRAPH_REOPEN)
            self.has_content = True
        return next_index

    def _heading(self, line: str) -> None:
        level = line.count("*")
        if not self.numbering.accepts(level):
            log.debug("heading_dropped", level=level)
            return
        text = line.replace("*", "").strip()
        record = self.numbering.advance(level, text)
        tag = f"h{level + 1}"
        self.sections.body.append(f'<{tag} id="{record.anchor_id}">{text}</{tag}>\n')
        self.nav_entries[record.anchor_id] = NavigationEntry.from_record(record)


def build_document(
    lines: cabc.Sequence[str], *, nav_title: str = NAV_TITLE
) -> DocumentSections:
    """Return the sections for ``lines``; see :class:`DocumentBuilder`."""
    return DocumentBuilder(lines, nav_title=nav_title).build()


__all__ = ["DocumentBuilder", "DocumentSections", "build_document"]
