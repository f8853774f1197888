# Copyright (c) 2025 Tolboom Medical
# Licensed under Prosperity Public License 3.0.0
# Commercial use requires separate license - see LICENSE and COMMERCIAL_LICENSE.md

"""
Unit tests for single-level component renderers.

Tests cover:
- Rich text with inline math
- Latex line-break removal and verbatim backslashes
- Code solution visibility rules
- Quiz checklists
- Match-the-answers placeholders
- Table header/divider/body layout
- Permutation bullets and answer key
"""

import pytest

from lesson2md.rendering.blocks import (
    render_code,
    render_latex,
    render_markdown_editor,
    render_match_the_answers,
    render_permutation,
    render_quiz,
    render_slate_html,
    render_table,
)


class TestRichText:
    def test_inline_math_survives_conversion(self, converter):
        content = {"html": '<p>Energy <katex equation="E=mc^2"></katex></p>'}
        assert render_slate_html(content, converter) == "Energy $E=mc^2$"

    def test_headings_and_underscores(self, converter):
        content = {"html": "<h3>my_module</h3><p>see max_value</p>"}
        assert render_slate_html(content, converter) == "### my_module\n\nsee max_value"

    def test_missing_html_raises(self, converter):
        with pytest.raises(KeyError):
            render_slate_html({}, converter)


class TestLatex:
    def test_newlines_removed_and_wrapped(self):
        assert render_latex({"text": "a +\nb"}) == "$$a +b$$\n"

    def test_backslashes_kept_verbatim(self):
        tex = "\\frac{1}{2}\\\\\n\\alpha"
        assert render_latex({"text": tex}) == "$$\\frac{1}{2}\\\\\\alpha$$\n"


def test_markdown_editor_is_passthrough():
    text = "## Already *Markdown*\n\n- item\n"
    assert render_markdown_editor({"text": text}) == text


class TestCode:
    def test_solution_shown_after_learner_code(self):
        content = {
            "language": "python",
            "content": "  x = 1  \n",
            "solutionContent": "\nx = 2\n",
            "showSolution": True,
        }
        assert render_code(content) == (
            "```python\nx = 1\n```\n"
            "<details>\n<summary> Solution</summary>\n\n```python\nx = 2\n```\n</details>\n"
        )

    def test_solution_hidden_when_not_allowed(self):
        content = {
            "language": "python",
            "content": "x = 1",
            "solutionContent": "x = 2",
            "showSolution": False,
        }
        markdown = render_code(content)
        assert "Solution" not in markdown
        assert "x = 2" not in markdown

    def test_blank_solution_is_omitted(self):
        content = {"language": "js", "content": "f()", "solutionContent": "  \n ", "showSolution": True}
        assert render_code(content) == "```js\nf()\n```\n"

    def test_caption_is_bold_line_before_fence(self):
        content = {"language": "sql", "caption": "Query", "content": "SELECT 1"}
        assert render_code(content) == "**Query**\n\n```sql\nSELECT 1\n```\n"

    def test_missing_language_gives_untagged_fence(self):
        assert render_code({"content": "echo hi"}) == "```\necho hi\n```\n"


class TestQuiz:
    def test_checklist_per_option(self):
        content = {
            "title": "Basics",
            "questions": [
                {
                    "questionText": "Pick one",
                    "questionOptions": [
                        {"text": "X", "correct": True},
                        {"text": "Y", "correct": False},
                    ],
                }
            ],
        }
        assert render_quiz(content) == (
            "### Quiz: Basics\n\n**Q1: Pick one**\n- [x] X\n- [ ] Y\n\n"
        )

    def test_questions_numbered_in_order_and_title_optional(self):
        content = {
            "questions": [
                {"questionText": "First", "questionOptions": []},
                {"questionText": "Second", "questionOptions": [{"text": "Z"}]},
            ]
        }
        markdown = render_quiz(content)
        assert markdown.startswith("### Quiz: \n\n")
        assert markdown.index("**Q1: First**") < markdown.index("**Q2: Second**")
        assert "- [ ] Z\n" in markdown

    def test_missing_questions_raises(self):
        with pytest.raises(KeyError, match="questions"):
            render_quiz({"title": "Broken"})


class TestMatchTheAnswers:
    def test_pairs_with_explanation(self):
        content = {
            "content": {
                "statements": [
                    [
                        {"left": {"text": " list "}, "right": {"text": "mutable"}},
                        {
                            "left": {"text": "tuple"},
                            "right": {"text": "immutable"},
                            "explanation": "Tuples cannot change.",
                        },
                    ]
                ]
            }
        }
        assert render_match_the_answers(content) == (
            "### Match the Answers\n\n"
            "**1.** list\n Match: *mutable*\n\n"
            "**2.** tuple\n Match: *immutable*\n\n"
            "> Explanation: Tuples cannot change.\n\n"
        )

    def test_placeholders_for_missing_sides(self):
        content = {"content": {"statements": [[{"left": {}, "right": {"text": "  "}}]]}}
        assert "**1.** —\n Match: *None provided*\n\n" in render_match_the_answers(content)

    def test_no_statements_renders_header_only(self):
        assert render_match_the_answers({"content": {}}) == "### Match the Answers\n\n"


class TestTable:
    def test_header_divider_and_rows(self, converter):
        content = {"data": [["A", "B"], ["1", "2"]]}
        assert render_table(content, converter) == "| A | B |\n| --- | --- |\n| 1 | 2 |\n"

    def test_cells_are_converted_from_html(self, converter):
        content = {"data": [["<b>Name</b>"], ["<p>snake_case</p>"]]}
        assert render_table(content, converter) == "| **Name** |\n| --- |\n| snake_case |\n"

    def test_ragged_rows_keep_their_own_length(self, converter):
        content = {"data": [["A", "B", "C"], ["1"], ["1", "2", "3", "4"]]}
        assert render_table(content, converter) == (
            "| A | B | C |\n| --- | --- | --- |\n| 1 |\n| 1 | 2 | 3 | 4 |\n"
        )

    def test_header_only(self, converter):
        assert render_table({"data": [["A"]]}, converter) == "| A |\n| --- |\n"

    def test_empty_table_renders_nothing(self, converter):
        assert render_table({"data": []}, converter) == ""


class TestPermutation:
    @pytest.fixture
    def options(self):
        return [
            {"hashid": "a", "content": {"data": "Step1"}},
            {"hashid": "b", "content": {"data": " Step2 "}},
        ]

    def test_bullets_in_input_order_and_solution_in_key_order(self, options):
        markdown = render_permutation({"options": options, "protected_content": ["b", "a"]})
        assert markdown == (
            "### Reorder the Steps\n\n**Reorder the following steps:**\n\n"
            "- Step1\n- Step2\n"
            "\n<details>\n<summary> Solution</summary>\n\n"
            "1. Step2\n2. Step1\n"
            "\n</details>\n"
        )

    def test_unknown_hashid_renders_missing(self, options):
        markdown = render_permutation({"options": options, "protected_content": ["a", "zzz"]})
        assert "1. Step1\n2. (missing)\n" in markdown

    def test_custom_prompt_and_missing_option_text(self):
        content = {
            "question_statement": "Order the build",
            "options": [{"hashid": "x", "content": {}}],
        }
        assert render_permutation(content) == (
            "### Reorder the Steps\n\n**Order the build**\n\n- —\n"
        )

    def test_no_answer_key_means_no_solution(self, options):
        assert "Solution" not in render_permutation({"options": options})
