"""
Jira project models: projects themselves, plus their categories, components,
features and roles.
"""

from dataclasses import dataclass, field
from typing import Any

from pydantic import Field

from ..base import ApiModel
from .common import ProjectScheme, StatusScheme, UserScheme


class ProjectCategoryPayloadScheme(ApiModel):
    name: str | None = None
    description: str | None = None


class ComponentScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    description: str | None = None
    lead: UserScheme | None = None
    lead_user_name: str | None = None
    assignee_type: str | None = None
    assignee: UserScheme | None = None
    real_assignee_type: str | None = None
    real_assignee: UserScheme | None = None
    is_assignee_type_valid: bool | None = None
    project: str | None = None
    project_id: int | None = None


class ComponentPayloadScheme(ApiModel):
    """Body for creating or updating a component.

    ``assignee_type`` is one of ``PROJECT_DEFAULT``, ``COMPONENT_LEAD``,
    ``PROJECT_LEAD`` or ``UNASSIGNED``.
    """

    is_assignee_type_valid: bool | None = None
    name: str | None = None
    description: str | None = None
    project: str | None = None
    assignee_type: str | None = None
    lead_account_id: str | None = None


class ComponentCountScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    issue_count: int | None = None


class ProjectFeatureScheme(ApiModel):
    project_id: int | None = None
    state: str | None = None
    toggle_locked: bool | None = None
    feature: str | None = None
    prerequisites: list[str] | None = None
    localised_name: str | None = None
    localised_description: str | None = None
    image_uri: str | None = None


class ProjectFeaturesScheme(ApiModel):
    features: list[ProjectFeatureScheme] | None = None


class RoleActorScheme(ApiModel):
    id: int | None = None
    display_name: str | None = None
    type: str | None = None
    name: str | None = None
    avatar_url: str | None = None
    actor_group: dict | None = None
    actor_user: dict | None = None


class ProjectRoleScopeScheme(ApiModel):
    type: str | None = None
    project: dict | None = None


class ProjectRoleScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    name: str | None = None
    id: int | None = None
    description: str | None = None
    actors: list[RoleActorScheme] | None = None
    scope: ProjectRoleScopeScheme | None = None
    translated_name: str | None = None
    current_user_role: bool | None = None
    admin: bool | None = None
    role_configurable: bool | None = None
    default: bool | None = None


class ProjectRoleDetailScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    name: str | None = None
    id: int | None = None
    description: str | None = None
    admin: bool | None = None
    default: bool | None = None
    role_configurable: bool | None = None
    translated_name: str | None = None
    scope: ProjectRoleScopeScheme | None = None


class ProjectRolePayloadScheme(ApiModel):
    name: str | None = None
    description: str | None = None


class ProjectPayloadScheme(ApiModel):
    """Body for creating a project.

    ``project_template_key`` and ``project_type_key`` go together, e.g.
    ``software`` with ``com.pyxis.greenhopper.jira:gh-simplified-kanban-classic``.
    """

    key: str | None = None
    name: str | None = None
    description: str | None = None
    lead_account_id: str | None = None
    url: str | None = None
    project_template_key: str | None = None
    project_type_key: str | None = None
    assignee_type: str | None = None
    avatar_id: int | None = None
    category_id: int | None = None
    notification_scheme: int | None = None
    field_configuration_scheme: int | None = None
    issue_security_scheme: int | None = None
    permission_scheme: int | None = None
    issue_type_scheme: int | None = None
    issue_type_screen_scheme: int | None = None
    workflow_scheme: int | None = None


class ProjectUpdateScheme(ApiModel):
    key: str | None = None
    name: str | None = None
    description: str | None = None
    lead_account_id: str | None = None
    url: str | None = None
    assignee_type: str | None = None
    avatar_id: int | None = None
    category_id: int | None = None
    issue_security_scheme: int | None = None
    notification_scheme: int | None = None
    permission_scheme: int | None = None


class NewProjectCreatedScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    key: str | None = None


@dataclass
class ProjectSearchOptionsScheme:
    """Query options for ``ProjectService.search``.

    ``status`` takes ``live``, ``archived`` and/or ``deleted``.
    """

    order_by: str = ""
    ids: list[int] = field(default_factory=list)
    keys: list[str] = field(default_factory=list)
    query: str = ""
    type_keys: list[str] = field(default_factory=list)
    category_id: int = 0
    action: str = ""
    status: list[str] = field(default_factory=list)
    expand: list[str] = field(default_factory=list)
    properties: list[str] = field(default_factory=list)


class ProjectSearchScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    next_page: str | None = None
    max_results: int | None = None
    start_at: int | None = None
    total: int | None = None
    is_last: bool | None = None
    values: list[ProjectScheme] | None = None


class ProjectStatusPageScheme(ApiModel):
    """The statuses available to one issue type of a project."""

    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    subtask: bool | None = None
    statuses: list[StatusScheme] | None = None


class TaskScheme(ApiModel):
    """A long-running task, such as a project deletion."""

    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    description: str | None = None
    status: str | None = None
    message: str | None = None
    result: Any = None
    submitted_by: int | None = None
    progress: int | None = None
    elapsed_runtime: int | None = None
    submitted: int | None = None
    started: int | None = None
    finished: int | None = None
    last_update: int | None = None
