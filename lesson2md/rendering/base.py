# Copyright (c) 2025 Tolboom Medical
# Licensed under Prosperity Public License 3.0.0
# Commercial use requires separate license - see LICENSE and COMMERCIAL_LICENSE.md

"""
Shared building blocks for the lesson renderers.

Holds the render error, the Fragment record produced per component, and the
two Markdown shapes every code-bearing renderer emits: fenced blocks and
collapsible <details> sections.
"""

from dataclasses import dataclass


class LessonRenderError(ValueError):
    """Raised when a lesson document is missing a required field."""


@dataclass(frozen=True)
class Fragment:
    """
    Markdown produced for one component.

    Attributes:
        component_type: The component's type tag ("summary" for the title fragment)
        markdown: Rendered text
        preformatted: True when the text is emitted as produced, without the
            trailing-newline normalization applied to other fragments
    """

    component_type: str
    markdown: str
    preformatted: bool = False


def fenced_block(code: str, language: str = "") -> str:
    return f"```{language}\n{code}\n```\n"


def details_block(summary: str, body: str) -> str:
    """Wrap body in a collapsible section; body is expected to end with a newline."""
    return f"<details>\n<summary>{summary}</summary>\n\n{body}</details>\n"


def ensure_trailing_newline(text: str) -> str:
    """Return text ending in exactly one newline (empty text becomes a lone newline)."""
    return text.rstrip("\n") + "\n"
