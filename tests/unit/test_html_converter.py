# Copyright (c) 2025 Tolboom Medical
# Licensed under Prosperity Public License 3.0.0
# Commercial use requires separate license - see LICENSE and COMMERCIAL_LICENSE.md

"""
Unit tests for the HTML to Markdown converter.
"""

import pytest

from lesson2md.rendering.html_converter import HtmlToMarkdownConverter


@pytest.mark.parametrize(
    "html, expected",
    [
        ("<h1>Title</h1>", "# Title"),
        ("<h2>Section</h2>", "## Section"),
        ("<h3>Deep</h3>", "### Deep"),
        ("<h6>Tiny</h6>", "###### Tiny"),
    ],
)
def test_headings_render_atx_style(converter, html, expected):
    assert converter.convert(html) == expected


def test_heading_keeps_inline_markup(converter):
    assert converter.convert("<h2>Using <em>for</em></h2>") == "## Using *for*"


def test_underscores_are_not_escaped(converter):
    assert converter.convert("<p>call snake_case_name()</p>") == "call snake_case_name()"


def test_paragraph_and_emphasis(converter):
    assert converter.convert("<p>Hello <strong>world</strong></p>") == "Hello **world**"


def test_paragraphs_are_separated_by_blank_line(converter):
    assert converter.convert("<p>first</p><p>second</p>") == "first\n\nsecond"


def test_inline_code(converter):
    assert converter.convert("<p>Use <code>range</code></p>") == "Use `range`"


def test_output_has_no_surrounding_newlines(converter):
    markdown = converter.convert("<p>text</p>")
    assert not markdown.startswith("\n")
    assert not markdown.endswith("\n")


def test_plain_text_passes_through(converter):
    assert converter.convert("just text") == "just text"


def test_heading_style_cannot_be_overridden():
    converter = HtmlToMarkdownConverter(heading_style="underlined")
    assert converter.convert("<h1>A</h1>") == "# A"


def test_converter_instances_are_independent():
    assert HtmlToMarkdownConverter().convert("<h1>A</h1>") == "# A"
    assert HtmlToMarkdownConverter(bullets="-").convert("<ul><li>x</li></ul>") == "- x"
