# Copyright (c) 2025 Tolboom Medical
# Licensed under Prosperity Public License 3.0.0
# Commercial use requires separate license - see LICENSE and COMMERCIAL_LICENSE.md

"""
File management for rendered lessons.

This module provides the LessonFileManager class for consistent naming and
storage of a render's outputs: the Markdown document, the fragment list used
for diagnostics, and a copy of the source JSON.
"""

import json
import re
from pathlib import Path
from typing import Any

from rich.console import Console

from ..rendering.base import Fragment

console = Console()

_UNSAFE_CHARS = re.compile(r"[\\/:*?\"<>|\s]+")
MAX_IDENTIFIER_LENGTH = 120


def lesson_identifier(title: str, fallback: str = "lesson") -> str:
    """
    Convert a lesson title to a filesystem-safe identifier.

    Args:
        title: Lesson title (may contain slashes, colons, spaces)
        fallback: Identifier used when nothing usable remains

    Returns:
        Lowercase identifier with unsafe runs replaced by hyphens

    Example:
        >>> lesson_identifier("Loops: for / while")
        'loops-for-while'
        >>> lesson_identifier("???")
        'lesson'
    """
    safe = _UNSAFE_CHARS.sub("-", title.strip().lower())
    safe = re.sub(r"-{2,}", "-", safe).strip("-.")
    return safe[:MAX_IDENTIFIER_LENGTH] or fallback


class LessonFileManager:
    """
    Manages identifier-based naming and storage for render outputs.

    All files share one identifier: ``{identifier}.md``,
    ``{identifier}-fragments.json`` and ``{identifier}-source.json``.

    Attributes:
        identifier: File identifier used in all output filenames
        output_dir: Directory receiving the files

    Example:
        >>> manager = LessonFileManager("python-loops", Path("tmp"))
        >>> manager.save_markdown("# Loops\\n")
        PosixPath('tmp/python-loops.md')
    """

    def __init__(self, identifier: str, output_dir: Path):
        """
        Initialize file manager for one lesson.

        Args:
            identifier: Base name for all output files
            output_dir: Output directory (created if missing)
        """
        self.identifier = identifier
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        console.print(f"[blue]📁 File identifier: {self.identifier}[/blue]")

    def get_filename(self, kind: str = "", suffix: str = ".json") -> Path:
        """
        Build an output path.

        Examples:
            >>> manager.get_filename(suffix=".md")
            PosixPath('tmp/python-loops.md')
            >>> manager.get_filename("fragments")
            PosixPath('tmp/python-loops-fragments.json')
        """
        name = f"{self.identifier}-{kind}" if kind else self.identifier
        return self.output_dir / f"{name}{suffix}"

    def save_markdown(self, markdown: str) -> Path:
        filepath = self.get_filename(suffix=".md")
        filepath.write_text(markdown, encoding="utf-8")
        return filepath

    def save_json(self, data: Any, kind: str) -> Path:
        filepath = self.get_filename(kind)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        return filepath

    def save_source(self, document: dict[str, Any]) -> Path:
        return self.save_json(document, "source")

    def save_fragments(self, fragments: list[Fragment]) -> Path:
        """
        Save the ordered fragment list for diagnostics.

        Each entry records its position, component type, whether it skipped
        newline normalization, and the Markdown text.
        """
        entries = [
            {
                "index": index,
                "component_type": fragment.component_type,
                "preformatted": fragment.preformatted,
                "markdown": fragment.markdown,
            }
            for index, fragment in enumerate(fragments)
        ]
        return self.save_json(entries, "fragments")

    def load_markdown(self) -> str | None:
        """Return the saved Markdown, or None if it has not been written."""
        filepath = self.get_filename(suffix=".md")
        if not filepath.exists():
            return None
        return filepath.read_text(encoding="utf-8")
