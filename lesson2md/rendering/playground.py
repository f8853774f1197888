# Copyright (c) 2025 Tolboom Medical
# Licensed under Prosperity Public License 3.0.0
# Commercial use requires separate license - see LICENSE and COMMERCIAL_LICENSE.md

"""
Renderers for components with nested structure.

- Columns: a list of sub-components laid out side by side; only the
  MarkdownEditor columns carry text worth keeping.
- WebpackBin: a code playground whose files form a tree of folders and
  leaf modules, plus optional evaluation code and a docker job.
- CodeTest: a multi-language test harness with a main file and extra files
  per language and an optional reference solution.
"""

import logging
from dataclasses import dataclass
from typing import Any

from .base import details_block, fenced_block

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaygroundFile:
    """One leaf module collected from a playground file tree."""

    file_name: str
    code: str
    language: str


def render_columns(content: dict[str, Any]) -> str:
    markdown = ""
    for column in content.get("comps") or []:
        if column["type"] == "MarkdownEditor":
            markdown += column["content"]["text"] + "\n\n"
        else:
            logger.info(f"Skipping column sub-type: {column['type']}")
    return markdown


def collect_playground_files(
    nodes: list[dict[str, Any]], default_language: str = "javascript"
) -> list[PlaygroundFile]:
    """
    Walk a playground file tree depth-first and return its leaf files in order.

    A node flagged ``leaf`` with non-empty ``data.content`` is a file; any other
    node with ``children`` is a folder and is descended. Empty leaves and
    childless folders contribute nothing.

    Args:
        nodes: Children of the tree root (``codeContents.children``)
        default_language: Language used when a file does not declare one

    Returns:
        Files in traversal order
    """
    files: list[PlaygroundFile] = []
    for node in nodes:
        data = node.get("data") or {}
        if node.get("leaf") and data.get("content"):
            files.append(
                PlaygroundFile(
                    file_name=node.get("module", ""),
                    code=data["content"],
                    language=data.get("language") or default_language,
                )
            )
        elif node.get("children"):
            files.extend(collect_playground_files(node["children"], default_language))
    return files


def _first_enabled_loader(loaders: dict[str, Any]) -> dict[str, Any] | None:
    for loader in loaders.values():
        if loader.get("enabled"):
            return loader
    return None


def render_webpack_bin(content: dict[str, Any], default_language: str = "javascript") -> str:
    """
    Render a WebpackBin playground.

    Output order: heading, environment line (first enabled loader), one
    collapsible section per file, the evaluation code, the docker job note.

    Args:
        content: WebpackBin payload; ``codeContents`` is required
        default_language: Fence language for files without one and for evaluation code

    Returns:
        The fragment, already newline-terminated
    """
    code_contents = content["codeContents"]

    markdown = "### WebpackBin Playground\n"
    loader = _first_enabled_loader(content.get("loaders") or {})
    if loader is not None:
        markdown += f"**Environment:** {loader.get('title', '')}\n\n"

    for playground_file in collect_playground_files(
        code_contents.get("children") or [], default_language
    ):
        markdown += "\n" + details_block(
            playground_file.file_name,
            fenced_block(playground_file.code, playground_file.language),
        )

    evaluation = (code_contents.get("judge") or {}).get("evaluationContent")
    if evaluation:
        markdown += "\n" + details_block(
            "🔍 Evaluation Code", fenced_block(evaluation, default_language)
        )

    docker_job = (content.get("dockerJob") or {}).get("name")
    if docker_job:
        markdown += f"\n_This widget runs in a **Live Docker container**: `{docker_job}`_\n"

    return markdown


def _code_section(file_name: str, code: str, language: str) -> str:
    return "\n" + details_block(file_name, fenced_block(code, language.lower()))


def render_code_test(content: dict[str, Any]) -> str:
    markdown = f"### CodeTest: {content.get('caption') or ''}\n"

    additional_files = content.get("additionalFiles") or {}
    for language, block in (content.get("languageContents") or {}).items():
        markdown += f"\n#### Language: {language}\n"

        main_file = block.get("mainFileName") or f"main.{language.lower()}"
        main_code = (block.get("codeContents") or {}).get("content") or ""
        if main_code:
            markdown += _code_section(main_file, main_code, language)

        for file_name, extra in (additional_files.get(language) or {}).items():
            extra_code = (extra.get("codeContents") or {}).get("content") or ""
            if extra_code:
                markdown += _code_section(file_name, extra_code, language)

    solution = content.get("solution") or {}
    if solution.get("content"):
        markdown += _code_section(
            "💡 Solution", solution["content"], solution.get("language") or "text"
        )

    return markdown
