"""Tests for the document builder and navigation post-pass.

These tests drive :func:`article_pages.builder.build_document` with small
in-memory articles and assert on the joined ``body`` and ``nav`` sections.
The ``sample_article`` fixture from ``conftest.py`` covers every block type.
"""

from __future__ import annotations

import re

import pytest

from article_pages.builder import DocumentBuilder, DocumentSections, build_document

ANCHOR_PATTERN = re.compile(r'id="(header_\d+\.\d+)"')
NAV_PATTERN = re.compile(r'href="#header_(\d+)\.(\d+)"')


def test_sample_article_body_blocks(sample_article: list[str]) -> None:
    """Every block type renders into the expected HTML fragment."""
    body = build_document(sample_article).joined("body")
    assert body.startswith("<p>\nMinimega exposes a JSON API.<br/></p>\n<p>")
    assert '<h2 id="header_1.1">Overview</h2>\n' in body
    assert '<h3 id="header_2.1">Requests</h3>\n' in body
    assert "<ul><li> first option</li>\n<li> second option</li>\n</ul><br/>" in body
    assert (
        "<pre>curl http://localhost:9001/vms\necho &lt;done&gt;\n</pre><br/>" in body
    )
    assert body.endswith("Errors are reported in the response body.<br/></p>")


def test_sample_article_anchors(sample_article: list[str]) -> None:
    body = build_document(sample_article).joined("body")
    assert ANCHOR_PATTERN.findall(body) == [
        "header_1.1",
        "header_2.1",
        "header_2.2",
        "header_3.1",
    ]


def test_heading_numbering_sequence() -> None:
    """Headings at levels 1,2,2,1,2 receive the documented anchors."""
    lines = ["intro", "* one", "** two", "** three", "* four", "** five"]
    body = build_document(lines).joined("body")
    assert ANCHOR_PATTERN.findall(body) == [
        "header_1.1",
        "header_2.1",
        "header_2.2",
        "header_3.1",
        "header_4.1",
    ]
    assert '<h2 id="header_1.1">one</h2>' in body
    assert '<h3 id="header_2.2">three</h3>' in body


def test_all_token_is_plain_text() -> None:
    body = build_document(["intro", "*all*"]).joined("body")
    assert "<h" not in body
    assert "*all*<br/>" in body


def test_headings_deeper_than_five_are_dropped() -> None:
    """Six or more asterisks emit nothing and leave numbering untouched."""
    sections = build_document(["intro", "****** too deep", "* kept"])
    body = sections.joined("body")
    assert "too deep" not in body
    assert '<h2 id="header_1.1">kept</h2>' in body
    assert sections.joined("nav").count("<a ") == 1


def test_first_line_is_always_a_paragraph() -> None:
    """The opening line is wrapped in a paragraph even if it looks like a heading."""
    body = build_document(["* Title", "text"]).joined("body")
    assert body == "<p>\n* Title<br/>text<br/></p>"


def test_first_line_code_keeps_paragraph_tags_balanced() -> None:
    body = build_document(["\tcode", "", "text"]).joined("body")
    assert body == "<p>\n<pre>code\n</pre><br/></p>\n<p>text<br/></p>"
    assert body.count("<p>") == body.count("</p>")


def test_consecutive_blank_lines_do_not_open_empty_paragraph() -> None:
    body = build_document(["a", "", "", "b"]).joined("body")
    assert body == "<p>\na<br/></p>\n<p>b<br/></p>"
    assert not re.search(r"<p>\s*</p>", body)


def test_trailing_blank_lines_close_without_reopening() -> None:
    body = build_document(["a", "", ""]).joined("body")
    assert body == "<p>\na<br/></p>"


@pytest.mark.parametrize(
    ("lines", "raw"),
    [
        (["intro", "", "text with <tag>"], "<tag>"),
        (["intro", "* heading <h>"], "<h>"),
        (["intro", "- item <li-like>"], "<lilike>"),
        (["intro", "\tcode <pre-like>"], "<pre-like>"),
        (["first <line>"], "<line>"),
    ],
)
def test_angle_brackets_are_escaped_in_every_block(lines: list[str], raw: str) -> None:
    body = build_document(lines).joined("body")
    assert raw not in body, f"raw {raw!r} leaked into {body!r}"
    escaped = raw.replace(">", "&gt;").replace("<", "&lt;")
    assert escaped in body


def test_navigation_lists_headings_in_order(sample_article: list[str]) -> None:
    nav = build_document(sample_article).joined("nav")
    assert nav.startswith('<div class="sidenav">\n<h3>Navigation</h3>\n')
    assert nav.endswith("</div>")
    assert '<a class="bold" href="#header_1.1">Overview</a>\n' in nav
    assert '<a href="#header_2.2">responses</a>\n' in nav
    pairs = [(int(top), int(sub)) for top, sub in NAV_PATTERN.findall(nav)]
    assert pairs == sorted(pairs)
    assert len(pairs) == len(set(pairs)) == 4


def test_navigation_is_sole_nav_fragment() -> None:
    sections = build_document(["intro", "* a", "** b"], nav_title="Contents")
    assert len(sections.nav) == 1
    assert "<h3>Contents</h3>" in sections.nav[0]


def test_empty_input_produces_empty_navigation() -> None:
    sections = build_document([])
    assert sections.body == []
    assert sections.nav == ['<div class="sidenav">\n<h3>Navigation</h3>\n</div>']


def test_conversion_is_idempotent(sample_article: list[str]) -> None:
    """Building twice, or reusing a builder, yields identical sections."""
    first = build_document(sample_article).as_mapping()
    second = build_document(list(sample_article)).as_mapping()
    assert first == second
    builder = DocumentBuilder(sample_article)
    assert builder.build().as_mapping() == builder.build().as_mapping() == first


def test_unknown_section_name_raises() -> None:
    with pytest.raises(KeyError, match="sidebar"):
        DocumentSections().joined("sidebar")


@pytest.mark.parametrize("first", ["    ", "     ", "        "])
def test_space_only_first_line_is_plain_text(first: str) -> None:
    """A first line of spaces is paragraph text, not an empty code block."""
    body = build_document([first, "text"]).joined("body")
    assert body == f"<p>\n{first}<br/>text<br/></p>"
    assert "<pre>" not in body


def test_first_line_list_opens_paragraph_once() -> None:
    body = build_document(["- a", "- b", "", "text"]).joined("body")
    assert body == "<p>\n<ul><li> a</li>\n<li> b</li>\n</ul><br/></p>\n<p>text<br/></p>"
