"""
Jira comment models.

Version 3 comment bodies are ADF documents (``IssueCommentScheme``);
version 2 bodies are wiki-markup strings (``IssueCommentSchemeV2``).
"""

from typing import Any

from pydantic import Field

from ..base import ApiModel, TimestampMixin
from ..constants import EMPTY_STRING
from .adf import CommentNodeScheme
from .common import UserScheme, VisibilityScheme


class CommentPropertyScheme(ApiModel):
    key: str | None = None
    value: Any = None


class _CommentBase(ApiModel, TimestampMixin):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    author: UserScheme | None = None
    update_author: UserScheme | None = None
    rendered_body: str | None = None
    created: str | None = None
    updated: str | None = None
    visibility: VisibilityScheme | None = None
    jsd_public: bool | None = None
    properties: list[CommentPropertyScheme] | None = None

    def _body_text(self) -> str:
        raise NotImplementedError

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {
            "id": self.id,
            "body": self._body_text(),
        }

        if self.author:
            result["author"] = self.author.to_simplified_dict()

        if self.created:
            result["created"] = self.format_timestamp(self.created)

        if self.updated:
            result["updated"] = self.format_timestamp(self.updated)

        return result


class IssueCommentScheme(_CommentBase):
    """A comment whose body is an ADF document."""

    body: CommentNodeScheme | None = None

    def _body_text(self) -> str:
        if self.body is None:
            return EMPTY_STRING
        return self.body.to_plain_text().strip()


class IssueCommentSchemeV2(_CommentBase):
    """A comment whose body is wiki markup."""

    body: str | None = None

    def _body_text(self) -> str:
        return self.body or EMPTY_STRING


class IssueCommentPageScheme(ApiModel):
    start_at: int | None = None
    max_results: int | None = None
    total: int | None = None
    comments: list[IssueCommentScheme] | None = None


class IssueCommentPageSchemeV2(ApiModel):
    start_at: int | None = None
    max_results: int | None = None
    total: int | None = None
    comments: list[IssueCommentSchemeV2] | None = None


class CommentPayloadScheme(ApiModel):
    body: CommentNodeScheme | None = None
    visibility: VisibilityScheme | None = None
    properties: list[CommentPropertyScheme] | None = None


class CommentPayloadSchemeV2(ApiModel):
    body: str | None = None
    visibility: VisibilityScheme | None = None
    properties: list[CommentPropertyScheme] | None = None
