"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path
from typing import Any

import pytest

from lesson2md.config import RenderSettings
from lesson2md.rendering import HtmlToMarkdownConverter


@pytest.fixture
def converter() -> HtmlToMarkdownConverter:
    """Converter configured the way every render call configures it."""
    return HtmlToMarkdownConverter()


@pytest.fixture
def settings() -> RenderSettings:
    """Default settings, independent of the developer's environment."""
    return RenderSettings()


@pytest.fixture
def lesson_page() -> dict[str, Any]:
    """A lesson page touching every component category."""
    return {
        "summary": {
            "title": "Python Loops",
            "description": "Iterate over sequences with for and while.",
        },
        "components": [
            {
                "type": "SlateHTML",
                "content": {
                    "html": '<h2>Counting</h2><p>The sum is <katex equation="n(n+1)/2"></katex>.</p>'
                },
            },
            {"type": "Latex", "content": {"text": "\\sum_{i=1}^{n} i\n= \\frac{n(n+1)}{2}"}},
            {"type": "PromptAI", "content": {"prompt": "Explain loops"}},
            {"type": "MarkdownEditor", "content": {"text": "Loops repeat work."}},
            {
                "type": "Code",
                "content": {
                    "language": "python",
                    "caption": "Sum a list",
                    "content": "\ndef total(xs):\n    pass\n",
                    "solutionContent": "def total(xs):\n    return sum(xs)",
                    "showSolution": True,
                },
            },
            {
                "type": "Quiz",
                "content": {
                    "title": "Loop basics",
                    "questions": [
                        {
                            "questionText": "Which keyword starts a loop?",
                            "questionOptions": [
                                {"text": "for", "correct": True},
                                {"text": "def", "correct": False},
                            ],
                        }
                    ],
                },
            },
            {"type": "Notepad", "content": {}},
            {"type": "Table", "content": {"data": [["A", "B"], ["1", "2"]]}},
            {
                "type": "Permutation",
                "content": {
                    "options": [
                        {"hashid": "a", "content": {"data": "Step1"}},
                        {"hashid": "b", "content": {"data": "Step2"}},
                    ],
                    "protected_content": ["b", "a"],
                },
            },
            {"type": "SpinningWheel", "content": {}},
        ],
    }


@pytest.fixture
def lesson_json_file(tmp_path: Path, lesson_page: dict[str, Any]) -> Path:
    """Lesson page written to disk, as the acquisition step leaves it."""
    path = tmp_path / "python-loops.json"
    path.write_text(json.dumps(lesson_page), encoding="utf-8")
    return path
