"""Conversion of plain text into structured Jira documents.

Jira Cloud's v3 API only accepts Atlassian Document Format (ADF) for rich-text
fields such as ``description``. The converter recognises a small, fixed set of
plain-text conventions:

- ``- item`` lines become bullet list items
- ``1. item`` lines become ordered list items
- a line ending in ``:`` followed by a blank line (or the end of the text)
  becomes a heading
- every other non-blank line becomes its own paragraph

Blank lines only separate blocks. Lists are never nested.
"""

import logging
import re
from typing import Any

from ..models.document import (
    BlockNode,
    Document,
    Heading,
    ListItem,
    ListKind,
    ListNode,
    Paragraph,
)

logger = logging.getLogger("mcp-jira.formatting")

HEADING_LEVEL = 3

BULLET_PREFIX = "- "
ORDERED_PREFIX_PATTERN = re.compile(r"^[0-9]+\.\s")


class _DocumentBuilder:
    """Accumulates blocks while tracking the list currently open, if any."""

    def __init__(self) -> None:
        self.blocks: list[BlockNode] = []
        self.list_kind: ListKind | None = None
        self.list_items: list[ListItem] = []

    def add_list_item(self, kind: ListKind, text: str) -> None:
        if self.list_kind != kind:
            self.close_list()
            self.list_kind = kind
        self.list_items.append(ListItem(text=text))

    def add_block(self, node: BlockNode) -> None:
        self.close_list()
        self.blocks.append(node)

    def close_list(self) -> None:
        if self.list_kind is not None:
            self.blocks.append(ListNode(kind=self.list_kind, items=tuple(self.list_items)))
        self.list_kind = None
        self.list_items = []

    def build(self) -> Document:
        self.close_list()
        return Document(content=tuple(self.blocks))


def text_to_document(text: str) -> Document:
    """Convert plain text into a Document.

    Lines are classified in a single pass with one line of look-ahead; the
    first matching rule wins. The conversion never fails: anything not
    recognised degrades to a paragraph holding the raw line.

    Args:
        text: Plain text, possibly empty

    Returns:
        The Document built from the text
    """
    lines = text.split("\n")
    builder = _DocumentBuilder()

    for index, line in enumerate(lines):
        stripped = line.strip()
        next_line = lines[index + 1] if index + 1 < len(lines) else ""

        if not stripped:
            builder.close_list()
            continue

        if stripped.startswith(BULLET_PREFIX):
            builder.add_list_item("bullet", stripped[len(BULLET_PREFIX) :])
            continue

        if ORDERED_PREFIX_PATTERN.match(stripped):
            builder.add_list_item("ordered", ORDERED_PREFIX_PATTERN.sub("", stripped, count=1))
            continue

        if stripped.endswith(":") and not next_line.strip():
            builder.add_block(Heading(level=HEADING_LEVEL, text=stripped))
            continue

        builder.add_block(Paragraph(text=line))

    document = builder.build()
    logger.debug(f"Converted {len(lines)} line(s) into {len(document.content)} block(s)")
    return document


def text_to_adf(text: str) -> dict[str, Any]:
    """Convert plain text straight into an ADF document dictionary.

    Args:
        text: Plain text, possibly empty

    Returns:
        ADF ``doc`` dictionary suitable for a rich-text field
    """
    return text_to_document(text).to_adf()
