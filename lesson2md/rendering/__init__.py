# Copyright (c) 2025 Tolboom Medical
# Licensed under Prosperity Public License 3.0.0
# Commercial use requires separate license - see LICENSE and COMMERCIAL_LICENSE.md

"""
Lesson rendering package.

Main Components:
    - math_normalizer: <katex> elements → inline ``$...$`` math
    - html_converter: markdownify wrapper with ATX headings
    - blocks: renderers for single-level components (text, math, code, quiz, tables, ...)
    - playground: renderers for nested components (Columns, WebpackBin, CodeTest)
    - dispatcher: type tag → renderer, ignored and unrecognized types
    - assembler: summary fragment, normalization, final join

Usage:
    >>> from lesson2md.rendering import render_lesson_to_markdown
    >>> markdown = render_lesson_to_markdown(page_json)
"""

from .assembler import render_lesson_fragments, render_lesson_to_markdown
from .base import Fragment, LessonRenderError
from .dispatcher import (
    IGNORED_COMPONENT_TYPES,
    ComponentCategory,
    ComponentType,
    RenderContext,
    classify_component,
    render_component,
)
from .document import LessonDocument
from .html_converter import HtmlToMarkdownConverter
from .math_normalizer import convert_katex_to_inline_math

__all__ = [
    # Assembly
    "render_lesson_to_markdown",
    "render_lesson_fragments",
    "Fragment",
    "LessonDocument",
    "LessonRenderError",
    # Dispatch
    "ComponentType",
    "ComponentCategory",
    "IGNORED_COMPONENT_TYPES",
    "RenderContext",
    "classify_component",
    "render_component",
    # Conversion
    "HtmlToMarkdownConverter",
    "convert_katex_to_inline_math",
]
