# Copyright (c) 2025 Tolboom Medical
# Licensed under Prosperity Public License 3.0.0
# Commercial use requires separate license - see LICENSE and COMMERCIAL_LICENSE.md

"""
lesson2md - render structured lesson pages to Markdown.

The rendering engine lives in ``lesson2md.rendering``; ``lesson2md.delivery``
holds the collaborators that persist the result and post it to a webhook.
"""

from .rendering import (
    LessonDocument,
    LessonRenderError,
    render_lesson_fragments,
    render_lesson_to_markdown,
)

__version__ = "0.1.0"

__all__ = [
    "LessonDocument",
    "LessonRenderError",
    "render_lesson_fragments",
    "render_lesson_to_markdown",
]
