"""
Jira notification scheme models.
"""

from dataclasses import dataclass, field

from pydantic import Field

from ..base import ApiModel
from .common import GroupScheme, ProjectRoleReferenceScheme, UserScheme


@dataclass
class NotificationSchemeSearchOptions:
    """Query options for ``NotificationSchemeService.search``."""

    notification_scheme_ids: list[str] = field(default_factory=list)
    project_ids: list[str] = field(default_factory=list)
    only_default: bool = False
    expand: list[str] = field(default_factory=list)


class NotificationRecipientScheme(ApiModel):
    id: int | None = None
    notification_type: str | None = None
    parameter: str | None = None
    recipient: str | None = None
    group: GroupScheme | None = None
    project_role: ProjectRoleReferenceScheme | None = None
    user: UserScheme | None = None
    email_address: str | None = None
    custom_field: dict | None = Field(default=None, alias="field")


class NotificationEventScheme(ApiModel):
    id: int | None = None
    name: str | None = None
    description: str | None = None


class NotificationSchemeEventScheme(ApiModel):
    event: NotificationEventScheme | None = None
    notifications: list[NotificationRecipientScheme] | None = None


class NotificationSchemeScopeScheme(ApiModel):
    type: str | None = None


class NotificationSchemeScheme(ApiModel):
    expand: str | None = None
    id: int | None = None
    self_url: str | None = Field(default=None, alias="self")
    name: str | None = None
    description: str | None = None
    notification_scheme_events: list[NotificationSchemeEventScheme] | None = None
    scope: NotificationSchemeScopeScheme | None = None
    projects: list[int] | None = None


class NotificationSchemePageScheme(ApiModel):
    max_results: int | None = None
    start_at: int | None = None
    total: int | None = None
    is_last: bool | None = None
    values: list[NotificationSchemeScheme] | None = None


class NotificationSchemeEventTypeIdScheme(ApiModel):
    id: str | None = None


class NotificationSchemeEventNotificationPayloadScheme(ApiModel):
    notification_type: str | None = None
    parameter: str | None = None


class NotificationSchemeEventPayloadScheme(ApiModel):
    event: NotificationSchemeEventTypeIdScheme | None = None
    notifications: list[NotificationSchemeEventNotificationPayloadScheme] | None = None


class NotificationSchemePayloadScheme(ApiModel):
    name: str | None = None
    description: str | None = None
    notification_scheme_events: list[NotificationSchemeEventPayloadScheme] | None = None


class NotificationSchemeCreatedPayload(ApiModel):
    id: str | None = None


class NotificationSchemeEventsPayloadScheme(ApiModel):
    """Body for appending notifications to an existing scheme."""

    notification_scheme_events: list[NotificationSchemeEventPayloadScheme] | None = None


class NotificationSchemeProjectScheme(ApiModel):
    notification_scheme_id: str | None = None
    project_id: str | None = None


class NotificationSchemeProjectPageScheme(ApiModel):
    max_results: int | None = None
    start_at: int | None = None
    total: int | None = None
    is_last: bool | None = None
    values: list[NotificationSchemeProjectScheme] | None = None
