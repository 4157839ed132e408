"""
Jira issue models.

This module provides Pydantic models for Jira issues, their transitions and
notifications, plus the builders used to add custom field values and edit
operations to an issue payload. ``IssueScheme`` carries an ADF description
(REST API v3); ``IssueSchemeV2`` a wiki-markup one (REST API v2).
"""

import datetime
from dataclasses import dataclass
from typing import Any

from pydantic import Field

from ...exceptions import (
    JiraValidationError,
    NoAccountIDError,
    NoAccountSliceError,
    NoCustomFieldError,
    NoFieldIDError,
    NoGroupNameError,
    NoOperatorError,
)
from ..base import ApiModel, TimestampMixin
from ..constants import EMPTY_STRING, UNASSIGNED
from .adf import CommentNodeScheme
from .comment import IssueCommentPageScheme, IssueCommentPageSchemeV2
from .common import ProjectScheme, StatusCategoryScheme, StatusScheme, UserScheme
from .project import ComponentScheme
from .worklog import IssueWorklogADFPageScheme, IssueWorklogRichTextPageScheme


def _missing(kind: str) -> JiraValidationError:
    return JiraValidationError(f"jira: no {kind} value set")


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into ``base`` in place, recursing into nested dicts.

    Values from ``override`` win; nested dictionaries are merged key by key.
    """
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


class CustomFields:
    """Collects custom field values to merge into an issue payload.

    Each builder appends a ``{"fields": {field_id: value}}`` node shaped the
    way Jira expects for that field type.

    Example:
        >>> custom_fields = CustomFields()
        >>> custom_fields.select("customfield_10042", "Red")
        >>> custom_fields.number("customfield_10043", 1000.2222)
    """

    def __init__(self) -> None:
        self.fields: list[dict[str, Any]] = []

    def _add(self, field_id: str, value: Any) -> None:
        if not field_id:
            raise NoFieldIDError()
        self.fields.append({"fields": {field_id: value}})

    def groups(self, field_id: str, groups: list[str]) -> None:
        if not groups:
            raise NoGroupNameError()
        self._add(field_id, [{"name": group} for group in groups])

    def group(self, field_id: str, group: str) -> None:
        if not group:
            raise NoGroupNameError()
        self._add(field_id, {"name": group})

    def url(self, field_id: str, url: str) -> None:
        if not url:
            raise _missing("url")
        self._add(field_id, url)

    def text(self, field_id: str, value: str) -> None:
        if not value:
            raise _missing("text")
        self._add(field_id, value)

    def date_time(self, field_id: str, value: datetime.datetime) -> None:
        """Add a date-time picker value, sent as RFC 3339."""
        if not value:
            raise _missing("datetime")
        self._add(field_id, value.isoformat(timespec="seconds"))

    def date(self, field_id: str, value: datetime.date) -> None:
        """Add a date picker value, sent as ``YYYY-MM-DD``."""
        if not value:
            raise _missing("date")
        self._add(field_id, value.strftime("%Y-%m-%d"))

    def multi_select(self, field_id: str, options: list[str]) -> None:
        if not options:
            raise _missing("multi-select")
        self._add(field_id, [{"value": option} for option in options])

    def select(self, field_id: str, option: str) -> None:
        if not option:
            raise _missing("select")
        self._add(field_id, {"value": option})

    def radio_button(self, field_id: str, button: str) -> None:
        if not button:
            raise _missing("radio button")
        self._add(field_id, {"value": button})

    def user(self, field_id: str, account_id: str) -> None:
        if not account_id:
            raise NoAccountIDError()
        self._add(field_id, {"accountId": account_id})

    def users(self, field_id: str, account_ids: list[str]) -> None:
        if not account_ids:
            raise NoAccountSliceError()
        self._add(field_id, [{"accountId": account_id} for account_id in account_ids])

    def number(self, field_id: str, value: float) -> None:
        self._add(field_id, value)

    def check_box(self, field_id: str, options: list[str]) -> None:
        if not options:
            raise _missing("checkbox")
        self._add(field_id, [{"value": option} for option in options])

    def cascading(self, field_id: str, parent: str, child: str) -> None:
        if not parent:
            raise _missing("cascading parent")
        if not child:
            raise _missing("cascading child")
        self._add(field_id, {"value": parent, "child": {"value": child}})

    def raw(self, field_id: str, value: Any) -> None:
        """Add a value as-is, for field types without a dedicated builder."""
        if value is None:
            raise _missing("raw")
        self._add(field_id, value)


class UpdateOperations:
    """Collects edit operations (``add``, ``remove``, ``set``) for the
    ``update`` section of an issue payload."""

    def __init__(self) -> None:
        self.fields: list[dict[str, Any]] = []

    def add_array_operation(self, field_id: str, mapping: dict[str, str]) -> None:
        """
        Add one operation per value of an array field.

        Args:
            field_id: The field to edit, e.g. 'labels'
            mapping: Value to operation, e.g. {'triaged': 'remove', 'blocker': 'add'}
        """
        if not field_id:
            raise NoFieldIDError()

        operations = [{operation: value} for value, operation in mapping.items()]
        self.fields.append({"update": {field_id: operations}})

    def add_string_operation(self, field_id: str, operation: str, value: str) -> None:
        if not field_id:
            raise NoFieldIDError()
        if not operation:
            raise NoOperatorError()
        if not value:
            raise _missing("operation")

        self.fields.append({"update": {field_id: [{operation: value}]}})


class IssueTypeScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    description: str | None = None
    icon_url: str | None = None
    name: str | None = None
    subtask: bool | None = None
    avatar_id: int | None = None
    hierarchy_level: int | None = None


class PriorityScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    icon_url: str | None = None
    name: str | None = None
    id: str | None = None


class ResolutionScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    description: str | None = None
    name: str | None = None


class ParentScheme(ApiModel):
    id: str | None = None
    key: str | None = None
    self_url: str | None = Field(default=None, alias="self")
    fields: dict[str, Any] | None = None


class IssueTransitionScheme(ApiModel):
    id: str | None = None
    name: str | None = None
    to: StatusScheme | None = None
    has_screen: bool | None = None
    is_global: bool | None = None
    is_initial: bool | None = None
    is_available: bool | None = None
    is_conditional: bool | None = None
    is_looped: bool | None = None


class IssueTransitionsScheme(ApiModel):
    expand: str | None = None
    transitions: list[IssueTransitionScheme] | None = None


class _IssueFieldsBase(ApiModel):
    """Fields shared by both API versions.

    Custom fields (``customfield_*``) are kept as extra attributes and are
    serialised back under their own names.
    """

    parent: ParentScheme | None = None
    issue_type: IssueTypeScheme | None = Field(default=None, alias="issuetype")
    issue_links: list[dict[str, Any]] | None = Field(default=None, alias="issuelinks")
    watches: dict[str, Any] | None = None
    votes: dict[str, Any] | None = None
    versions: list[dict[str, Any]] | None = None
    project: ProjectScheme | None = None
    fix_versions: list[dict[str, Any]] | None = None
    priority: PriorityScheme | None = None
    components: list[ComponentScheme] | None = None
    creator: UserScheme | None = None
    reporter: UserScheme | None = None
    assignee: UserScheme | None = None
    resolution: ResolutionScheme | None = None
    resolution_date: str | None = Field(default=None, alias="resolutiondate")
    workratio: int | None = None
    status_category_change_date: str | None = Field(
        default=None, alias="statuscategorychangedate"
    )
    last_viewed: str | None = None
    summary: str | None = None
    created: str | None = None
    updated: str | None = None
    labels: list[str] | None = None
    status: StatusScheme | None = None
    security: dict[str, Any] | None = None
    attachment: list[dict[str, Any]] | None = None
    subtasks: list[dict[str, Any]] | None = None


class IssueFieldsScheme(_IssueFieldsBase):
    description: CommentNodeScheme | None = None
    comment: IssueCommentPageScheme | None = None
    worklog: IssueWorklogADFPageScheme | None = None


class IssueFieldsSchemeV2(_IssueFieldsBase):
    description: str | None = None
    comment: IssueCommentPageSchemeV2 | None = None
    worklog: IssueWorklogRichTextPageScheme | None = None


class _IssueBase(ApiModel, TimestampMixin):
    id: str | None = None
    key: str | None = None
    self_url: str | None = Field(default=None, alias="self")
    expand: str | None = None
    transitions: list[IssueTransitionScheme] | None = None
    changelog: dict[str, Any] | None = None

    def _description_text(self) -> str:
        raise NotImplementedError

    def to_map(self) -> dict[str, Any]:
        """The issue as the JSON object Jira expects in a request body."""
        return self.to_api_payload()

    def merge_custom_fields(self, custom_fields: CustomFields) -> dict[str, Any]:
        """
        Merge custom field values into the issue payload.

        Raises:
            NoCustomFieldError: If no custom field value was collected
        """
        if custom_fields is None or not custom_fields.fields:
            raise NoCustomFieldError()
        return build_issue_payload(self, custom_fields=custom_fields)

    def merge_operations(self, operations: UpdateOperations) -> dict[str, Any]:
        """
        Merge edit operations into the issue payload.

        Raises:
            NoOperatorError: If no operation was collected
        """
        if operations is None or not operations.fields:
            raise NoOperatorError()
        return build_issue_payload(self, operations=operations)

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        fields = getattr(self, "fields", None)
        result: dict[str, Any] = {"id": self.id, "key": self.key}
        if fields is None:
            return result

        result["summary"] = fields.summary or EMPTY_STRING
        result["description"] = self._description_text()

        if fields.status and fields.status.name:
            result["status"] = fields.status.name
        if fields.issue_type and fields.issue_type.name:
            result["issue_type"] = fields.issue_type.name
        if fields.priority and fields.priority.name:
            result["priority"] = fields.priority.name

        result["assignee"] = (
            fields.assignee.to_simplified_dict()["display_name"]
            if fields.assignee
            else UNASSIGNED
        )

        if fields.labels:
            result["labels"] = fields.labels
        if fields.created:
            result["created"] = self.format_timestamp(fields.created)
        if fields.updated:
            result["updated"] = self.format_timestamp(fields.updated)

        return result


class IssueScheme(_IssueBase):
    """An issue whose description is an ADF document."""

    fields: IssueFieldsScheme | None = None

    def _description_text(self) -> str:
        if self.fields is None or self.fields.description is None:
            return EMPTY_STRING
        return self.fields.description.to_plain_text().strip()


class IssueSchemeV2(_IssueBase):
    """An issue whose description is wiki markup."""

    fields: IssueFieldsSchemeV2 | None = None

    def _description_text(self) -> str:
        if self.fields is None:
            return EMPTY_STRING
        return self.fields.description or EMPTY_STRING


def build_issue_payload(
    payload: _IssueBase | None,
    custom_fields: CustomFields | None = None,
    operations: UpdateOperations | None = None,
) -> dict[str, Any]:
    """Serialise an issue and merge in custom fields and edit operations."""
    body = payload.to_map() if payload is not None else {}
    if custom_fields is not None:
        if not custom_fields.fields:
            raise NoCustomFieldError()
        for node in custom_fields.fields:
            deep_merge(body, node)
    if operations is not None:
        if not operations.fields:
            raise NoOperatorError()
        for node in operations.fields:
            deep_merge(body, node)
    return body


@dataclass
class IssueBulkScheme:
    """One issue of a bulk create, with its optional custom field values."""

    payload: _IssueBase | None = None
    custom_fields: CustomFields | None = None


@dataclass
class IssueMoveOptions:
    """Field values, custom fields and edit operations sent with a transition."""

    fields: _IssueBase | None = None
    custom_fields: CustomFields | None = None
    operations: UpdateOperations | None = None


class IssueResponseScheme(ApiModel):
    id: str | None = None
    key: str | None = None
    self_url: str | None = Field(default=None, alias="self")
    transition: dict[str, Any] | None = None


class IssueBulkErrorScheme(ApiModel):
    status: int | None = None
    element_errors: dict[str, Any] | None = None
    failed_element_number: int | None = None


class IssueBulkResponseScheme(ApiModel):
    issues: list[IssueResponseScheme] | None = None
    errors: list[IssueBulkErrorScheme] | None = None


class IssueNotifyUserScheme(ApiModel):
    account_id: str | None = None


class IssueNotifyGroupScheme(ApiModel):
    name: str | None = None


class IssueNotifyPermissionScheme(ApiModel):
    id: str | None = None
    key: str | None = None


class IssueNotifyToScheme(ApiModel):
    reporter: bool | None = None
    assignee: bool | None = None
    watchers: bool | None = None
    voters: bool | None = None
    users: list[IssueNotifyUserScheme] | None = None
    groups: list[IssueNotifyGroupScheme] | None = None


class IssueNotifyRestrictScheme(ApiModel):
    groups: list[IssueNotifyGroupScheme] | None = None
    permissions: list[IssueNotifyPermissionScheme] | None = None


class IssueNotifyOptionsScheme(ApiModel):
    """Body of an issue e-mail notification."""

    html_body: str | None = None
    subject: str | None = None
    text_body: str | None = None
    to: IssueNotifyToScheme | None = None
    restrict: IssueNotifyRestrictScheme | None = None
