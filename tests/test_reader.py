"""Unit tests for the article source reader."""

from __future__ import annotations

import typing as typ

import pytest

from article_pages.errors import SourceReadError
from article_pages.reader import read_source_lines

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_lines_are_newline_stripped(tmp_path: Path) -> None:
    source = tmp_path / "api.article"
    source.write_bytes(b"* Title\r\n\r\n\tcode\nlast")
    assert read_source_lines(source) == ["* Title", "", "\tcode", "last"]


def test_missing_source_raises(tmp_path: Path) -> None:
    with pytest.raises(SourceReadError, match="not found"):
        read_source_lines(tmp_path / "missing.article")


def test_directory_source_raises(tmp_path: Path) -> None:
    with pytest.raises(SourceReadError):
        read_source_lines(tmp_path)


def test_undecodable_source_raises(tmp_path: Path) -> None:
    source = tmp_path / "binary.article"
    source.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(SourceReadError, match="Unable to read"):
        read_source_lines(source)


def test_only_newlines_split_lines(tmp_path: Path) -> None:
    """Form feeds and Unicode separators stay inside their line."""
    source = tmp_path / "api.article"
    source.write_bytes("a\x0cb\nc d\x85e\n".encode())
    assert read_source_lines(source) == ["a\x0cb", "c d\x85e"]


def test_empty_source_has_no_lines(tmp_path: Path) -> None:
    source = tmp_path / "empty.article"
    source.write_bytes(b"")
    assert read_source_lines(source) == []
