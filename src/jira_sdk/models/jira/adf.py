"""
Atlassian Document Format (ADF) models.

Version 3 of the REST API exchanges rich text (comment bodies, worklog
comments) as ADF: a tree of typed nodes whose leaves carry text.
"""

from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING

# Block nodes rendered on their own line when flattening to plain text
BLOCK_NODE_TYPES = {
    "paragraph",
    "heading",
    "blockquote",
    "codeBlock",
    "listItem",
    "panel",
    "rule",
    "tableRow",
}


class MarkScheme(ApiModel):
    type: str | None = None
    attrs: dict[str, Any] | None = None


class CommentNodeScheme(ApiModel):
    """
    A node of an ADF document.

    The root node has ``type="doc"`` and ``version=1``; text lives in
    ``text`` nodes at the leaves.
    """

    version: int | None = None
    type: str | None = None
    content: list["CommentNodeScheme"] | None = None
    text: str | None = None
    attrs: dict[str, Any] | None = None
    marks: list[MarkScheme] | None = None

    def append_node(self, node: "CommentNodeScheme") -> "CommentNodeScheme":
        """Append a child node and return self for chaining."""
        if self.content is None:
            self.content = []
        self.content.append(node)
        return self

    def to_plain_text(self) -> str:
        """Flatten the document to plain text, one line per block node."""
        if self.type == "text":
            return self.text or EMPTY_STRING
        if self.type == "hardBreak":
            return "\n"
        if self.type == "mention" and self.attrs:
            return str(self.attrs.get("text", EMPTY_STRING))

        children = "".join(node.to_plain_text() for node in self.content or [])
        if self.type in BLOCK_NODE_TYPES:
            return children.rstrip("\n") + "\n"
        return children

    @classmethod
    def document(cls, *blocks: "CommentNodeScheme") -> "CommentNodeScheme":
        """Build a root ``doc`` node from block nodes."""
        return cls(version=1, type="doc", content=list(blocks))

    @classmethod
    def paragraph(cls, text: str) -> "CommentNodeScheme":
        """Build a paragraph holding a single text node."""
        return cls(type="paragraph", content=[cls(type="text", text=text)])


CommentNodeScheme.model_rebuild()
