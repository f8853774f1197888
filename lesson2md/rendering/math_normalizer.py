# Copyright (c) 2025 Tolboom Medical
# Licensed under Prosperity Public License 3.0.0
# Commercial use requires separate license - see LICENSE and COMMERCIAL_LICENSE.md

"""
Inline math normalization for rich-text HTML fragments.

The lesson editor stores inline formulas as <katex> elements. The TeX source
sits either in an ``equation`` attribute (on the element or on a nested
span) or, for older content, as the element's text. Before the fragment is
converted to Markdown each <katex> element is replaced by ``$<tex>$`` so the
formula survives as inline math.
"""

from bs4 import BeautifulSoup, Tag

MATH_TAG = "katex"
EQUATION_ATTR = "equation"


def _resolve_equation(element: Tag) -> str:
    own = element.get(EQUATION_ATTR)
    if own:
        return own

    nested = element.find(attrs={EQUATION_ATTR: True})
    if nested is not None and nested.get(EQUATION_ATTR):
        return nested[EQUATION_ATTR]

    return element.get_text().strip()


def convert_katex_to_inline_math(html: str) -> str:
    """
    Replace every <katex> element in an HTML fragment with ``$...$`` text.

    Args:
        html: HTML fragment from a SlateHTML/TableHTML component

    Returns:
        The rewritten HTML (still HTML, not Markdown). An empty math element
        becomes ``$$``.

    Example:
        >>> convert_katex_to_inline_math('<p>Area <katex equation="r^2"></katex></p>')
        '<p>Area $r^2$</p>'
    """
    soup = BeautifulSoup(html, "html.parser")
    for element in soup.find_all(MATH_TAG):
        element.replace_with(f"${_resolve_equation(element)}$")
    return str(soup)
