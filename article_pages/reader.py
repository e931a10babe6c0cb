"""Read article sources into newline-stripped lines."""

from __future__ import annotations

from pathlib import Path

import structlog

from .errors import SourceReadError

log = structlog.get_logger()


def read_source_lines(path: Path) -> list[str]:
    """Return the lines of the article at ``path`` without line endings.

    Parameters
    ----------
    path : Path
        UTF-8 encoded article file.

    Returns
    -------
    list[str]
        One entry per input line; ``\\r\\n`` and ``\\n`` endings are removed.
        No other character splits a line.

    Raises
    ------
    SourceReadError
        If the file does not exist, cannot be read, or is not valid UTF-8.
    """
    if not path.is_file():
        msg = f"Article source '{path}' not found."
        raise SourceReadError(msg)
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Unable to read article source '{path}': {exc}"
        raise SourceReadError(msg) from exc
    # only "\n" ends a line; a trailing "\r" belongs to a CRLF ending
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if lines[-1] == "":
        lines.pop()
    log.info("article_read", path=str(path), lines=len(lines))
    return lines


__all__ = ["read_source_lines"]
