"""Heading numbering state and the records derived from it.

``HeadingNumbering`` is threaded through a single document build. It keeps a
count per heading level, the current top number, and how many headings have
been filed under each top number. Anchors take the form ``header_<top>.<sub>``.

A heading opens a new top number when it is a level-1 heading or when its
level differs from the previous heading's level. Consecutive headings of the
same deeper level share a top number and bump only the sub number.

Example
-------
>>> from article_pages.numbering import HeadingNumbering
>>> numbering = HeadingNumbering()
>>> [numbering.advance(level).anchor_id for level in (1, 2, 2, 1, 2)]
['header_1.1', 'header_2.1', 'header_2.2', 'header_3.1', 'header_4.1']
"""

from __future__ import annotations

import dataclasses as dc

from ._constants import ANCHOR_TEMPLATE, HEADING_SLOTS, MAX_HEADING_LEVEL


@dc.dataclass(frozen=True, slots=True)
class HeadingRecord:
    """Position of one accepted heading in the document outline.

    Attributes
    ----------
    level : int
        Number of asterisks on the heading line (1-5).
    top : int
        Top-level heading number.
    sub : int
        1-based position of the heading under ``top``.
    text : str
        Heading text with markers removed; empty until attached.
    """

    level: int
    top: int
    sub: int
    text: str = ""

    @property
    def anchor_id(self) -> str:
        """Return the element id used by the heading and its nav link."""
        return ANCHOR_TEMPLATE.format(top=self.top, sub=self.sub)


@dc.dataclass(frozen=True, slots=True)
class NavigationEntry:
    """Side-navigation link derived from a heading record."""

    anchor_id: str
    display_text: str
    emphasized: bool

    @classmethod
    def from_record(cls, record: HeadingRecord) -> NavigationEntry:
        """Build an entry, emphasizing text that has any uppercase letter."""
        emphasized = any(char.isupper() for char in record.text)
        return cls(
            anchor_id=record.anchor_id,
            display_text=record.text,
            emphasized=emphasized,
        )


@dc.dataclass(slots=True)
class HeadingNumbering:
    """Running counters used to number headings during one conversion."""

    level_counts: list[int] = dc.field(default_factory=lambda: [0] * HEADING_SLOTS)
    sub_counts: dict[int, int] = dc.field(default_factory=dict)
    top: int = 0
    last_level: int | None = None

    def accepts(self, level: int) -> bool:
        """Return whether headings at ``level`` are numbered and rendered."""
        return 1 <= level <= MAX_HEADING_LEVEL

    def advance(self, level: int, text: str = "") -> HeadingRecord:
        """Number a heading at ``level`` and return its record.

        Raises
        ------
        ValueError
            If ``level`` falls outside the supported range; callers check
            :meth:`accepts` first.
        """
        if not self.accepts(level):
            msg = f"Heading level {level} is outside 1-{MAX_HEADING_LEVEL}."
            raise ValueError(msg)
        self.level_counts[level - 1] += 1
        if level == 1 or level != self.last_level:
            self.top += 1
        self.sub_counts[self.top] = self.sub_counts.get(self.top, 0) + 1
        self.last_level = level
        return HeadingRecord(
            level=level, top=self.top, sub=self.sub_counts[self.top], text=text
        )

    def outline(self) -> list[tuple[int, int]]:
        """Return every numbered ``(top, sub)`` pair in ascending order."""
        return [
            (top, sub)
            for top in sorted(self.sub_counts)
            for sub in range(1, self.sub_counts[top] + 1)
        ]


__all__ = ["HeadingNumbering", "HeadingRecord", "NavigationEntry"]
