r"""Cursor-advancing scanners that consume one block of article lines.

Each scanner receives the complete line sequence and a start index and
returns the rendered fragment (or lookahead result) together with the index
where scanning stopped. Scanners never mutate their input.

Example
-------
>>> from article_pages.scanners import find_next_list
>>> find_next_list(["- a", "- b", "not a list"], 0)
('<li> a</li>\n<li> b</li>\n', 2)
"""

from __future__ import annotations

import typing as typ

from .classifier import escape_angles, is_code_line, is_list_item

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def find_next_paragraph(lines: cabc.Sequence[str], index: int) -> tuple[int, bool]:
    """Look ahead to the next blank line.

    Parameters
    ----------
    lines : Sequence[str]
        Full article, one entry per line.
    index : int
        Position to start scanning from.

    Returns
    -------
    tuple[int, bool]
        Index of the next empty line (``len(lines)`` when none remains) and
        whether any non-whitespace text was seen before it.
    """
    has_content = False
    while index < len(lines):
        line = lines[index]
        if line.strip():
            has_content = True
        if not line:
            return index, has_content
        index += 1
    return index, has_content


def find_next_code(lines: cabc.Sequence[str], index: int) -> tuple[str, int]:
    """Collect a run of code lines, escaped and stripped, one per row."""
    rows: list[str] = []
    while index < len(lines):
        line = escape_angles(lines[index])
        if not is_code_line(line):
            break
        rows.append(f"{line.strip()}\n")
        index += 1
    return "".join(rows), index


def find_next_list(lines: cabc.Sequence[str], index: int) -> tuple[str, int]:
    """Collect a run of list lines as ``<li>`` items.

    Every ``-`` character is removed from an item, not only the marker, so
    hyphenated words lose their hyphens.
    """
    items: list[str] = []
    while index < len(lines):
        line = lines[index]
        if not is_list_item(line):
            break
        items.append(f"<li>{escape_angles(line.replace('-', ''))}</li>\n")
        index += 1
    return "".join(items), index


__all__ = ["find_next_code", "find_next_list", "find_next_paragraph"]
