"""Render the floating side navigation from collected heading entries."""

from __future__ import annotations

import typing as typ
from html import escape

from ._constants import ANCHOR_TEMPLATE, NAV_TITLE

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .numbering import HeadingNumbering, NavigationEntry


def build_navigation(
    numbering: HeadingNumbering,
    entries: cabc.Mapping[str, NavigationEntry],
    *,
    title: str = NAV_TITLE,
) -> str:
    """Return the ``sidenav`` block linking every numbered heading.

    Parameters
    ----------
    numbering : HeadingNumbering
        Final numbering state of the conversion; its outline fixes the link
        order (ascending top number, then ascending sub number).
    entries : Mapping[str, NavigationEntry]
        Navigation entries keyed by anchor id. Pairs without an entry are
        skipped.
    title : str, optional
        Label rendered above the links.

    Returns
    -------
    str
        A single HTML fragment for the ``nav`` section.
    """
    rows = ['<div class="sidenav">\n', f"<h3>{escape(title)}</h3>\n"]
    for top, sub in numbering.outline():
        entry = entries.get(ANCHOR_TEMPLATE.format(top=top, sub=sub))
        if entry is None:
            continue
        css = ' class="bold"' if entry.emphasized else ""
        rows.append(
            f'<a{css} href="#{entry.anchor_id}">{entry.display_text}</a>\n'
        )
    rows.append("</div>")
    return "".join(rows)


__all__ = ["build_navigation"]
