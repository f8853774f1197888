# Copyright (c) 2025 Tolboom Medical
# Licensed under Prosperity Public License 3.0.0
# Commercial use requires separate license - see LICENSE and COMMERCIAL_LICENSE.md

"""
Lesson document assembly.

Turns a parsed lesson page into one Markdown document:

1. Summary fragment: ``# <title>``, the description, a ``---`` rule
2. One fragment per component, in page order (ignored widgets are skipped)
3. Every fragment except preformatted ones (WebpackBin) is normalized to end in
   exactly one newline
4. Fragments are joined with a newline, leaving one blank line between them

Rendering is a single synchronous pass with no I/O; the same input always
yields the same output.
"""

import logging
from typing import Any

from ..config import RenderSettings, render_settings
from .base import Fragment, LessonRenderError, ensure_trailing_newline
from .dispatcher import RenderContext, render_component
from .document import LessonDocument
from .html_converter import HtmlToMarkdownConverter

logger = logging.getLogger(__name__)


def _summary_fragment(document: LessonDocument) -> Fragment:
    return Fragment(
        component_type="summary",
        markdown=f"# {document.title}\n{document.description}\n---\n",
        preformatted=True,
    )


def render_lesson_fragments(
    document: LessonDocument | dict[str, Any],
    converter: HtmlToMarkdownConverter | None = None,
    settings: RenderSettings | None = None,
) -> list[Fragment]:
    """
    Render a lesson into its ordered list of fragments.

    Args:
        document: LessonDocument or the raw parsed JSON page
        converter: Configured HTML converter; a default one is built when omitted
        settings: Rendering defaults; the global settings when omitted

    Returns:
        Summary fragment followed by one fragment per non-ignored component

    Raises:
        LessonRenderError: If the document or any component is missing a required
            field. The message names the component index, its type and the field.
    """
    if not isinstance(document, LessonDocument):
        document = LessonDocument.from_json(document)
    settings = settings or render_settings
    context = RenderContext(
        converter=converter or HtmlToMarkdownConverter(),
        default_playground_language=settings.default_playground_language,
    )

    fragments = [_summary_fragment(document)]
    for index, component in enumerate(document.components):
        try:
            fragment = render_component(component, context)
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            component_type = component.get("type") if isinstance(component, dict) else None
            raise LessonRenderError(
                f"Component {index} ({component_type or 'unknown type'}) is malformed: "
                f"{type(e).__name__}: {e}"
            ) from e

        if fragment is None:
            continue
        if not fragment.preformatted:
            fragment = Fragment(
                component_type=fragment.component_type,
                markdown=ensure_trailing_newline(fragment.markdown),
            )
        fragments.append(fragment)

    logger.debug(
        f"Rendered {len(fragments) - 1} fragment(s) from {len(document.components)} component(s)"
    )
    return fragments


def render_lesson_to_markdown(
    document: LessonDocument | dict[str, Any],
    converter: HtmlToMarkdownConverter | None = None,
    settings: RenderSettings | None = None,
) -> str:
    """
    Render a lesson page to a single Markdown string.

    Example:
        >>> page = {"summary": {"title": "Loops", "description": "Intro"}, "components": []}
        >>> render_lesson_to_markdown(page)
        '# Loops\\nIntro\\n---\\n'
    """
    fragments = render_lesson_fragments(document, converter=converter, settings=settings)
    return "\n".join(fragment.markdown for fragment in fragments)
