"""
Structured document nodes for rich-text Jira fields.

A Document is an ordered sequence of top-level paragraphs, headings and
(non-nested) lists. ``Document.to_adf`` renders it in the Atlassian Document
Format accepted by the v3 REST API.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

ListKind = Literal["bullet", "ordered"]

ADF_LIST_TYPES: dict[str, str] = {
    "bullet": "bulletList",
    "ordered": "orderedList",
}


def _adf_text(text: str) -> dict[str, Any]:
    return {"type": "text", "text": text}


def _adf_paragraph(text: str) -> dict[str, Any]:
    return {"type": "paragraph", "content": [_adf_text(text)]}


class DocumentNode(BaseModel):
    """Base class for immutable document nodes."""

    model_config = ConfigDict(frozen=True)

    def to_adf(self) -> dict[str, Any]:
        raise NotImplementedError


class Paragraph(DocumentNode):
    type: Literal["paragraph"] = "paragraph"
    text: str

    def to_adf(self) -> dict[str, Any]:
        return _adf_paragraph(self.text)


class Heading(DocumentNode):
    type: Literal["heading"] = "heading"
    level: int
    text: str

    def to_adf(self) -> dict[str, Any]:
        return {
            "type": "heading",
            "attrs": {"level": self.level},
            "content": [_adf_text(self.text)],
        }


class ListItem(DocumentNode):
    type: Literal["listItem"] = "listItem"
    text: str

    def to_adf(self) -> dict[str, Any]:
        return {"type": "listItem", "content": [_adf_paragraph(self.text)]}


class ListNode(DocumentNode):
    """A bullet or ordered list. Items are plain text; lists never nest."""

    type: Literal["list"] = "list"
    kind: ListKind
    items: tuple[ListItem, ...] = ()

    def to_adf(self) -> dict[str, Any]:
        return {
            "type": ADF_LIST_TYPES[self.kind],
            "content": [item.to_adf() for item in self.items],
        }


BlockNode = Paragraph | Heading | ListNode


class Document(DocumentNode):
    """An ordered sequence of top-level block nodes."""

    type: Literal["doc"] = "doc"
    content: tuple[BlockNode, ...] = ()

    def to_adf(self) -> dict[str, Any]:
        return {
            "version": 1,
            "type": "doc",
            "content": [node.to_adf() for node in self.content],
        }
