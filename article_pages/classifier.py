"""Classify raw article lines into heading, list, and code candidates.

Every predicate looks at a single line in isolation and has no side effects.
The document builder tries them in a fixed order (heading, list, code) and
treats anything left over as paragraph text.

Example
-------
>>> from article_pages.classifier import is_heading, is_list_item
>>> is_heading("** Options")
True
>>> is_heading("*all*")
False
>>> is_list_item("- first item")
True
"""

from __future__ import annotations

ALL_TOKEN = "*all*"


def escape_angles(line: str) -> str:
    """Return ``line`` with ``>`` and ``<`` replaced by HTML entities."""
    return line.replace(">", "&gt;").replace("<", "&lt;")


def is_heading(line: str) -> bool:
    """Return whether ``line`` opens with asterisk heading markers.

    Parameters
    ----------
    line : str
        Raw (or angle-escaped) article line.

    Returns
    -------
    bool
        ``True`` when the line contains ``"* "``, does not contain the
        literal ``*all*`` token, and has no text before its first asterisk.
    """
    if ALL_TOKEN in line:
        return False
    if "* " not in line:
        return False
    parts = line.split("*")
    if len(parts) < 2:
        return False
    return parts[0] == ""


def is_list_item(line: str) -> bool:
    """Return whether ``line`` contains a ``"- "`` list marker."""
    return "- " in line


def is_code_line(line: str) -> bool:
    """Return whether ``line`` looks like part of an indented code block.

    The decision is taken at the first non-space character: the line is code
    when it contains a tab or four consecutive spaces, or when exactly one
    space at column 0 precedes that character. Empty lines and lines made
    only of spaces are never code.

    Examples
    --------
    >>> is_code_line("\\tmake all")
    True
    >>> is_code_line(" single leading space")
    True
    >>> is_code_line("  two leading spaces")
    False
    >>> is_code_line("")
    False
    """
    spaces: list[int] = []
    for position, char in enumerate(line):
        if char == " ":
            spaces.append(position)
        elif "\t" in line or "    " in line:
            return True
        elif spaces == [0]:
            return True
    return False


__all__ = ["escape_angles", "is_code_line", "is_heading", "is_list_item"]
