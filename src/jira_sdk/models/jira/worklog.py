"""
Jira worklog models.

This module provides Pydantic models for Jira worklogs (time tracking
entries), in both the ADF (v3) and rich-text (v2) flavours.
"""

from dataclasses import dataclass, field
from typing import Any

from pydantic import Field

from ..base import ApiModel, TimestampMixin
from ..constants import EMPTY_STRING
from .adf import CommentNodeScheme
from .common import UserScheme, VisibilityScheme


@dataclass
class WorklogOptionsScheme:
    """Query options accepted when adding, updating or deleting a worklog.

    ``adjust_estimate`` is one of ``new``, ``leave``, ``manual`` or ``auto``;
    ``new_estimate`` applies to ``new`` and ``reduce_by`` to ``manual``.
    """

    notify: bool = True
    adjust_estimate: str = ""
    new_estimate: str = ""
    reduce_by: str = ""
    override_editable_flag: bool = False
    expand: list[str] = field(default_factory=list)


class _WorklogBase(ApiModel, TimestampMixin):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    issue_id: str | None = None
    author: UserScheme | None = None
    update_author: UserScheme | None = None
    created: str | None = None
    updated: str | None = None
    started: str | None = None
    visibility: VisibilityScheme | None = None
    time_spent: str | None = None
    time_spent_seconds: int | None = None

    def _comment_text(self) -> str:
        raise NotImplementedError

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {
            "id": self.id,
            "time_spent": self.time_spent or EMPTY_STRING,
            "time_spent_seconds": self.time_spent_seconds or 0,
        }

        if self.author:
            result["author"] = self.author.to_simplified_dict()

        if comment := self._comment_text():
            result["comment"] = comment

        if self.started:
            result["started"] = self.format_timestamp(self.started)

        if self.updated:
            result["updated"] = self.format_timestamp(self.updated)

        return result


class IssueWorklogADFScheme(_WorklogBase):
    comment: CommentNodeScheme | None = None

    def _comment_text(self) -> str:
        if self.comment is None:
            return EMPTY_STRING
        return self.comment.to_plain_text().strip()


class IssueWorklogRichTextScheme(_WorklogBase):
    comment: str | None = None

    def _comment_text(self) -> str:
        return self.comment or EMPTY_STRING


class IssueWorklogADFPageScheme(ApiModel):
    start_at: int | None = None
    max_results: int | None = None
    total: int | None = None
    worklogs: list[IssueWorklogADFScheme] | None = None


class IssueWorklogRichTextPageScheme(ApiModel):
    start_at: int | None = None
    max_results: int | None = None
    total: int | None = None
    worklogs: list[IssueWorklogRichTextScheme] | None = None


class WorklogADFPayloadScheme(ApiModel):
    comment: CommentNodeScheme | None = None
    visibility: VisibilityScheme | None = None
    started: str | None = None
    time_spent: str | None = None
    time_spent_seconds: int | None = None


class WorklogRichTextPayloadScheme(ApiModel):
    comment: str | None = None
    visibility: VisibilityScheme | None = None
    started: str | None = None
    time_spent: str | None = None
    time_spent_seconds: int | None = None


class ChangedWorklogPropertyScheme(ApiModel):
    key: str | None = None
    value: Any = None


class ChangedWorklogScheme(ApiModel):
    worklog_id: int | None = None
    updated_time: int | None = None
    properties: list[ChangedWorklogPropertyScheme] | None = None


class ChangedWorklogPageScheme(ApiModel):
    since: int | None = None
    until: int | None = None
    self_url: str | None = Field(default=None, alias="self")
    next_page: str | None = None
    last_page: bool | None = None
    values: list[ChangedWorklogScheme] | None = None
