# Copyright (c) 2025 Tolboom Medical
# Licensed under Prosperity Public License 3.0.0
# Commercial use requires separate license - see LICENSE and COMMERCIAL_LICENSE.md

"""
Lesson document model.

A lesson page from the content API is a ``summary`` (title, description) and an
ordered list of typed components. ``LessonDocument`` is the read-only view of
that JSON the renderer works on.
"""

from dataclasses import dataclass
from typing import Any

from .base import LessonRenderError


@dataclass(frozen=True)
class LessonDocument:
    """
    Read-only view of one lesson page.

    Attributes:
        title: Lesson title (``summary.title``)
        description: Lesson description (``summary.description``)
        components: Components in page order, as raw ``{type, content}`` dicts
    """

    title: str
    description: str
    components: tuple[dict[str, Any], ...]

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "LessonDocument":
        """
        Build a document from the parsed API response.

        Raises:
            LessonRenderError: If summary, summary.title, summary.description or
                components is missing
        """
        try:
            summary = data["summary"]
            title = summary["title"]
            description = summary["description"]
            components = tuple(data["components"])
        except (KeyError, TypeError) as e:
            raise LessonRenderError(f"Lesson document is missing required field: {e}") from e
        return cls(title=title, description=description, components=components)
