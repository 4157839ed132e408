"""
Common Jira entity models.

This module provides the schemes shared across resource groups: users,
groups, visibility restrictions, entity properties and the minimal project
and role references embedded in other resources.
"""

from typing import Any

from pydantic import Field

from ..base import ApiModel
from ..constants import UNASSIGNED


class UserScheme(ApiModel):
    """
    Model representing a Jira user.
    """

    self_url: str | None = Field(default=None, alias="self")
    account_id: str | None = None
    account_type: str | None = None
    email_address: str | None = None
    display_name: str | None = None
    active: bool | None = None
    time_zone: str | None = None
    locale: str | None = None
    avatar_urls: dict[str, str] | None = None
    # Server/Data Center identifiers
    key: str | None = None
    name: str | None = None
    groups: "UserGroupsScheme | None" = None
    application_roles: "UserApplicationRolesScheme | None" = None

    @property
    def avatar_url(self) -> str | None:
        """The largest available avatar (48x48)."""
        if not self.avatar_urls:
            return None
        return self.avatar_urls.get("48x48")

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "account_id": self.account_id,
            "display_name": self.display_name or UNASSIGNED,
            "email": self.email_address,
            "avatar_url": self.avatar_url,
        }


class GroupScheme(ApiModel):
    name: str | None = None
    group_id: str | None = None
    self_url: str | None = Field(default=None, alias="self")


class UserGroupsScheme(ApiModel):
    size: int | None = None
    items: list[GroupScheme] | None = None


class UserApplicationRoleItemScheme(ApiModel):
    key: str | None = None
    name: str | None = None


class UserApplicationRolesScheme(ApiModel):
    size: int | None = None
    items: list[UserApplicationRoleItemScheme] | None = None


class VisibilityScheme(ApiModel):
    """Restricts a comment or worklog to a group or project role."""

    type: str | None = None
    value: str | None = None
    identifier: str | None = None


class StatusCategoryScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    id: int | None = None
    key: str | None = None
    color_name: str | None = None
    name: str | None = None


class StatusScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    description: str | None = None
    icon_url: str | None = None
    name: str | None = None
    id: str | None = None
    status_category: StatusCategoryScheme | None = None


class ProjectCategoryScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    description: str | None = None


class ProjectInsightScheme(ApiModel):
    total_issue_count: int | None = None
    last_issue_update_time: str | None = None


class ProjectScheme(ApiModel):
    """A project, or the project reference embedded in other resources.

    Embedded references carry only the identifying fields; the project
    endpoints fill in the rest according to ``expand``.
    """

    expand: str | None = None
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    key: str | None = None
    name: str | None = None
    description: str | None = None
    url: str | None = None
    email: str | None = None
    assignee_type: str | None = None
    project_type_key: str | None = None
    simplified: bool | None = None
    style: str | None = None
    favourite: bool | None = None
    is_private: bool | None = None
    uuid: str | None = None
    lead: UserScheme | None = None
    components: list[dict[str, Any]] | None = None
    issue_types: list[dict[str, Any]] | None = None
    versions: list[dict[str, Any]] | None = None
    roles: dict[str, str] | None = None
    avatar_urls: dict[str, str] | None = None
    project_keys: list[str] | None = None
    insight: ProjectInsightScheme | None = None
    project_category: ProjectCategoryScheme | None = None
    deleted: bool | None = None
    retention_till_date: str | None = None
    deleted_date: str | None = None
    deleted_by: UserScheme | None = None
    archived: bool | None = None
    archived_date: str | None = None
    archived_by: UserScheme | None = None

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {
            "id": self.id,
            "key": self.key,
            "name": self.name,
        }
        if self.description:
            result["description"] = self.description
        if self.lead:
            result["lead"] = self.lead.to_simplified_dict()["display_name"]
        if self.project_category and self.project_category.name:
            result["category"] = self.project_category.name
        if self.archived:
            result["archived"] = True
        return result


class ProjectRoleReferenceScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    id: int | None = None
    name: str | None = None
    description: str | None = None


class EntityPropertyScheme(ApiModel):
    """A JSON property stored on an issue or project."""

    key: str | None = None
    value: Any = None


class PropertyKeyScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    key: str | None = None


class PropertyPageScheme(ApiModel):
    keys: list[PropertyKeyScheme] | None = None


UserScheme.model_rebuild()
