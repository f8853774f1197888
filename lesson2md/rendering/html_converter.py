# Copyright (c) 2025 Tolboom Medical
# Licensed under Prosperity Public License 3.0.0
# Commercial use requires separate license - see LICENSE and COMMERCIAL_LICENSE.md

"""
HTML to Markdown conversion for lesson rich text and table cells.

Wraps markdownify with a single configuration choice: headings always render
ATX-style (``#`` per level, a space, the inline content) instead of the
library's default underline style. Everything else follows markdownify's
defaults. Two post-processing steps keep the output stable:

- leading tabs/newlines and all trailing whitespace are trimmed
- escaped underscores (``\\_``) are restored, since identifiers such as
  ``snake_case`` are far more common in lessons than literal emphasis markers
"""

import re

from markdownify import ATX, MarkdownConverter

_LEADING_BREAKS = re.compile(r"^[\t\r\n]+")


class HtmlToMarkdownConverter:
    """
    Configured HTML→Markdown converter shared by all renderers of one render call.

    Build it once and pass it to the renderers that need it; the heading rule
    is part of the instance configuration, so there is no global state.

    Example:
        >>> converter = HtmlToMarkdownConverter()
        >>> converter.convert("<h2>Intro</h2>")
        '## Intro'
    """

    def __init__(self, **options):
        # Headings are always ATX; other markdownify options pass through
        options["heading_style"] = ATX
        self._converter = MarkdownConverter(**options)

    def convert(self, html: str) -> str:
        markdown = self._converter.convert(html)
        markdown = _LEADING_BREAKS.sub("", markdown).rstrip()
        return markdown.replace("\\_", "_")
