# Copyright (c) 2025 Tolboom Medical
# Licensed under Prosperity Public License 3.0.0
# Commercial use requires separate license - see LICENSE and COMMERCIAL_LICENSE.md

"""
Component dispatch: type tag → renderer.

Every component falls into exactly one category:

- RENDERED: a known ``ComponentType``; its renderer produces the fragment
- IGNORED: editor/AI helper widgets with nothing to show; no fragment at all
- UNRECOGNIZED: any other tag; logged and rendered as an empty fragment

IGNORED and UNRECOGNIZED differ in output: an unknown component still
occupies a (blank) slot in the output, an ignored one does not.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .base import Fragment
from .blocks import (
    render_code,
    render_latex,
    render_markdown_editor,
    render_match_the_answers,
    render_permutation,
    render_quiz,
    render_slate_html,
    render_table,
)
from .html_converter import HtmlToMarkdownConverter
from .playground import render_code_test, render_columns, render_webpack_bin

logger = logging.getLogger(__name__)


class ComponentType(Enum):
    """Component types with a renderer."""

    SLATE_HTML = "SlateHTML"
    TABLE_HTML = "TableHTML"
    LATEX = "Latex"
    MARKDOWN_EDITOR = "MarkdownEditor"
    CODE = "Code"
    COLUMNS = "Columns"
    QUIZ = "Quiz"
    WEBPACK_BIN = "WebpackBin"
    MATCH_THE_ANSWERS = "MatchTheAnswers"
    TABLE = "Table"
    PERMUTATION = "Permutation"
    CODE_TEST = "CodeTest"


class ComponentCategory(Enum):
    RENDERED = "rendered"
    IGNORED = "ignored"
    UNRECOGNIZED = "unrecognized"


# Widgets that are not lesson content (AI prompts, lazy-load stubs, scratch pads, diagrams)
IGNORED_COMPONENT_TYPES = frozenset({"PromptAI", "LazyLoadPlaceholder", "Notepad", "DrawIOWidget"})

# Fragments emitted exactly as rendered, skipping trailing-newline normalization
PREFORMATTED_TYPES = frozenset({ComponentType.WEBPACK_BIN})

_KNOWN_TYPES = {member.value: member for member in ComponentType}


@dataclass(frozen=True)
class RenderContext:
    """Per-render configuration handed to renderers that need it."""

    converter: HtmlToMarkdownConverter
    default_playground_language: str = "javascript"


Renderer = Callable[[dict[str, Any], RenderContext], str]

RENDERERS: dict[ComponentType, Renderer] = {
    ComponentType.SLATE_HTML: lambda content, ctx: render_slate_html(content, ctx.converter),
    ComponentType.TABLE_HTML: lambda content, ctx: render_slate_html(content, ctx.converter),
    ComponentType.LATEX: lambda content, ctx: render_latex(content),
    ComponentType.MARKDOWN_EDITOR: lambda content, ctx: render_markdown_editor(content),
    ComponentType.CODE: lambda content, ctx: render_code(content),
    ComponentType.COLUMNS: lambda content, ctx: render_columns(content),
    ComponentType.QUIZ: lambda content, ctx: render_quiz(content),
    ComponentType.WEBPACK_BIN: lambda content, ctx: render_webpack_bin(
        content, ctx.default_playground_language
    ),
    ComponentType.MATCH_THE_ANSWERS: lambda content, ctx: render_match_the_answers(content),
    ComponentType.TABLE: lambda content, ctx: render_table(content, ctx.converter),
    ComponentType.PERMUTATION: lambda content, ctx: render_permutation(content),
    ComponentType.CODE_TEST: lambda content, ctx: render_code_test(content),
}


def classify_component(type_tag: str) -> ComponentCategory:
    if type_tag in _KNOWN_TYPES:
        return ComponentCategory.RENDERED
    if type_tag in IGNORED_COMPONENT_TYPES:
        return ComponentCategory.IGNORED
    return ComponentCategory.UNRECOGNIZED


def render_component(component: dict[str, Any], context: RenderContext) -> Fragment | None:
    """
    Render one component to a fragment.

    Args:
        component: Raw component dict with ``type`` and ``content``
        context: Converter and rendering defaults for this render call

    Returns:
        The fragment, or None for ignored component types

    Raises:
        KeyError, TypeError, AttributeError: If a required field is missing or malformed
            (the assembler turns these into LessonRenderError)
    """
    type_tag = component["type"]
    category = classify_component(type_tag)

    if category is ComponentCategory.IGNORED:
        return None
    if category is ComponentCategory.UNRECOGNIZED:
        logger.warning(f"Unhandled component type: {type_tag}")
        return Fragment(component_type=type_tag, markdown="")

    component_type = _KNOWN_TYPES[type_tag]
    markdown = RENDERERS[component_type](component["content"], context)
    return Fragment(
        component_type=type_tag,
        markdown=markdown,
        preformatted=component_type in PREFORMATTED_TYPES,
    )
