"""Tests for the plain text to document converter."""

import pytest

from mcp_jira.jira.formatting import HEADING_LEVEL, text_to_adf, text_to_document
from mcp_jira.models.document import Heading, ListItem, ListNode, Paragraph


class TestTextToDocument:
    """Tests for text_to_document."""

    def test_empty_text(self):
        assert text_to_document("").content == ()

    def test_blank_lines_only(self):
        assert text_to_document("\n   \n\t\n").content == ()

    def test_paragraph_per_line(self):
        document = text_to_document("First line\nSecond line")

        assert document.content == (
            Paragraph(text="First line"),
            Paragraph(text="Second line"),
        )

    def test_paragraph_keeps_raw_line(self):
        document = text_to_document("   indented text  ")

        assert document.content == (Paragraph(text="   indented text  "),)

    def test_bullet_lines_collapse_into_one_list(self):
        document = text_to_document("- a\n- b")

        assert document.content == (
            ListNode(kind="bullet", items=(ListItem(text="a"), ListItem(text="b"))),
        )

    def test_indented_bullet(self):
        document = text_to_document("  - item")

        assert document.content == (
            ListNode(kind="bullet", items=(ListItem(text="item"),)),
        )

    def test_ordered_lines_strip_number_prefix(self):
        document = text_to_document("1. first\n2. second\n10. tenth")

        assert document.content == (
            ListNode(
                kind="ordered",
                items=(
                    ListItem(text="first"),
                    ListItem(text="second"),
                    ListItem(text="tenth"),
                ),
            ),
        )

    def test_list_kind_change_starts_new_list(self):
        document = text_to_document("- a\n1. b")

        assert document.content == (
            ListNode(kind="bullet", items=(ListItem(text="a"),)),
            ListNode(kind="ordered", items=(ListItem(text="b"),)),
        )

    def test_blank_line_closes_list(self):
        document = text_to_document("- a\n\n- b")

        assert document.content == (
            ListNode(kind="bullet", items=(ListItem(text="a"),)),
            ListNode(kind="bullet", items=(ListItem(text="b"),)),
        )

    def test_paragraph_closes_list(self):
        document = text_to_document("- a\nplain\n- b")

        assert document.content == (
            ListNode(kind="bullet", items=(ListItem(text="a"),)),
            Paragraph(text="plain"),
            ListNode(kind="bullet", items=(ListItem(text="b"),)),
        )

    def test_heading_before_blank_line(self):
        document = text_to_document("Overview:\n\nSome text")

        assert document.content == (
            Heading(level=HEADING_LEVEL, text="Overview:"),
            Paragraph(text="Some text"),
        )

    def test_heading_at_end_of_text(self):
        document = text_to_document("Some text\n  Notes:  ")

        assert document.content == (
            Paragraph(text="Some text"),
            Heading(level=HEADING_LEVEL, text="Notes:"),
        )

    def test_colon_line_followed_by_text_is_paragraph(self):
        document = text_to_document("Overview:\nmore text")

        assert document.content == (
            Paragraph(text="Overview:"),
            Paragraph(text="more text"),
        )

    def test_heading_closes_list(self):
        document = text_to_document("- a\nSteps:\n")

        assert document.content == (
            ListNode(kind="bullet", items=(ListItem(text="a"),)),
            Heading(level=HEADING_LEVEL, text="Steps:"),
        )

    def test_list_rules_win_over_heading(self):
        document = text_to_document("- ends with colon:\n")

        assert document.content == (
            ListNode(kind="bullet", items=(ListItem(text="ends with colon:"),)),
        )

    @pytest.mark.parametrize("line", ["-no space", "1.no space", "1) item", "a. item"])
    def test_near_misses_are_paragraphs(self, line):
        assert text_to_document(line).content == (Paragraph(text=line),)

    def test_ordered_prefix_needs_ascii_digits(self):
        line = "\u0661. item"

        assert text_to_document(line).content == (Paragraph(text=line),)

    def test_lists_never_nest(self):
        document = text_to_document("- a\n  - b\n- c")

        assert len(document.content) == 1
        assert [item.text for item in document.content[0].items] == ["a", "b", "c"]

    def test_deterministic(self):
        text = "Summary:\n\n- a\n- b\n1. c\nplain"

        assert text_to_document(text) == text_to_document(text)


class TestTextToAdf:
    """Tests for the ADF rendering of converted text."""

    def test_empty_document(self):
        assert text_to_adf("") == {"version": 1, "type": "doc", "content": []}

    def test_mixed_content(self):
        text = "Steps:\n\n1. Open the page\n2. Click save\n\n- note\nDone"

        assert text_to_adf(text) == {
            "version": 1,
            "type": "doc",
            "content": [
                {
                    "type": "heading",
                    "attrs": {"level": 3},
                    "content": [{"type": "text", "text": "Steps:"}],
                },
                {
                    "type": "orderedList",
                    "content": [
                        {
                            "type": "listItem",
                            "content": [
                                {
                                    "type": "paragraph",
                                    "content": [
                                        {"type": "text", "text": "Open the page"}
                                    ],
                                }
                            ],
                        },
                        {
                            "type": "listItem",
                            "content": [
                                {
                                    "type": "paragraph",
                                    "content": [{"type": "text", "text": "Click save"}],
                                }
                            ],
                        },
                    ],
                },
                {
                    "type": "bulletList",
                    "content": [
                        {
                            "type": "listItem",
                            "content": [
                                {
                                    "type": "paragraph",
                                    "content": [{"type": "text", "text": "note"}],
                                }
                            ],
                        }
                    ],
                },
                {
                    "type": "paragraph",
                    "content": [{"type": "text", "text": "Done"}],
                },
            ],
        }
