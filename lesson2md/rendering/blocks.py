# Copyright (c) 2025 Tolboom Medical
# Licensed under Prosperity Public License 3.0.0
# Commercial use requires separate license - see LICENSE and COMMERCIAL_LICENSE.md

"""
Renderers for single-level lesson components.

Each function takes the ``content`` payload of one component and returns its
Markdown fragment. Required fields are indexed directly so a malformed payload
raises (KeyError/TypeError) and aborts the render; optional fields fall back
to the placeholders the lesson viewer shows.

Covered components:
- SlateHTML / TableHTML (rich text)
- Latex (display math)
- MarkdownEditor (pass-through)
- Code (learner code with optional hidden solution)
- Quiz (checklists)
- MatchTheAnswers (pairs with explanations)
- Table (HTML cells → pipe table)
- Permutation (ordering exercise with answer key)
"""

from typing import Any

from .base import details_block, fenced_block
from .html_converter import HtmlToMarkdownConverter
from .math_normalizer import convert_katex_to_inline_math

DEFAULT_PERMUTATION_PROMPT = "Reorder the following steps:"
MISSING_TEXT = "—"
MISSING_MATCH = "None provided"
MISSING_OPTION = "(missing)"


def render_slate_html(content: dict[str, Any], converter: HtmlToMarkdownConverter) -> str:
    return converter.convert(convert_katex_to_inline_math(content["html"]))


def render_latex(content: dict[str, Any]) -> str:
    # Backslashes are kept verbatim; only line breaks are dropped.
    tex = content["text"].replace("\n", "")
    return f"$${tex}$$\n"


def render_markdown_editor(content: dict[str, Any]) -> str:
    return content["text"]


def render_code(content: dict[str, Any]) -> str:
    """
    Render a code exercise.

    The solution is only revealed when the component allows it (``showSolution``)
    and actually carries solution code; otherwise the fragment holds just the
    learner's starting code.
    """
    language = content.get("language") or ""
    caption = f"**{content['caption']}**\n\n" if content.get("caption") else ""
    learner_code = (content.get("content") or "").strip()
    solution_code = (content.get("solutionContent") or "").strip()

    markdown = caption + fenced_block(learner_code, language)
    if content.get("showSolution") and solution_code:
        markdown += details_block(" Solution", fenced_block(solution_code, language))
    return markdown


def render_quiz(content: dict[str, Any]) -> str:
    lines = [f"### Quiz: {content.get('title') or ''}", ""]
    for number, question in enumerate(content["questions"], start=1):
        lines.append(f"**Q{number}: {question['questionText']}**")
        for option in question["questionOptions"]:
            mark = "[x]" if option.get("correct") else "[ ]"
            lines.append(f"- {mark} {option['text']}")
        lines.append("")
    return "\n".join(lines) + "\n"


def render_match_the_answers(content: dict[str, Any]) -> str:
    statements = content["content"].get("statements") or []
    pairs = (statements[0] if statements else None) or []

    markdown = "### Match the Answers\n\n"
    for number, pair in enumerate(pairs, start=1):
        left = ((pair.get("left") or {}).get("text") or "").strip() or MISSING_TEXT
        right = ((pair.get("right") or {}).get("text") or "").strip() or MISSING_MATCH
        markdown += f"**{number}.** {left}\n Match: *{right}*\n\n"
        if pair.get("explanation"):
            markdown += f"> Explanation: {pair['explanation']}\n\n"
    return markdown


def _table_row(cells: list[str], converter: HtmlToMarkdownConverter) -> str:
    converted = [converter.convert(cell).strip() for cell in cells]
    return f"| {' | '.join(converted)} |"


def render_table(content: dict[str, Any], converter: HtmlToMarkdownConverter) -> str:
    """
    Render a data table; row 0 is the header.

    Rows keep their own cell count, so ragged input produces ragged rows.

    Example:
        >>> render_table({"data": [["A", "B"], ["1", "2"]]}, HtmlToMarkdownConverter())
        '| A | B |\\n| --- | --- |\\n| 1 | 2 |\\n'
    """
    rows = content["data"]
    if not rows:
        return ""

    header, *body = rows
    divider = f"| {' | '.join('---' for _ in header)} |"
    lines = [_table_row(header, converter), divider]
    lines.extend(_table_row(row, converter) for row in body)
    return "\n".join(lines) + "\n"


def _option_text(option: dict[str, Any]) -> str:
    data = (option.get("content") or {}).get("data") or ""
    return data.strip() or MISSING_TEXT


def render_permutation(content: dict[str, Any]) -> str:
    prompt = content.get("question_statement") or DEFAULT_PERMUTATION_PROMPT
    options = content.get("options") or []
    answer_key = content.get("protected_content") or []

    markdown = f"### Reorder the Steps\n\n**{prompt}**\n\n"
    markdown += "".join(f"- {_option_text(option)}\n" for option in options)

    if answer_key:
        text_by_id = {option.get("hashid"): _option_text(option) for option in options}
        solution = "".join(
            f"{position}. {text_by_id.get(hashid, MISSING_OPTION)}\n"
            for position, hashid in enumerate(answer_key, start=1)
        )
        markdown += f"\n<details>\n<summary> Solution</summary>\n\n{solution}\n</details>\n"
    return markdown
