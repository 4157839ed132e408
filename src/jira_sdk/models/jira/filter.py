"""
Jira filter and share permission models.
"""

from dataclasses import dataclass, field

from pydantic import Field

from ..base import ApiModel
from .common import GroupScheme, ProjectRoleReferenceScheme, ProjectScheme, UserScheme


class SharePermissionScheme(ApiModel):
    """Who a filter or dashboard is shared with."""

    id: int | None = None
    type: str | None = None
    project: ProjectScheme | None = None
    role: ProjectRoleReferenceScheme | None = None
    group: GroupScheme | None = None
    user: UserScheme | None = None


class FilterSubscriptionScheme(ApiModel):
    id: int | None = None
    user: UserScheme | None = None
    group: GroupScheme | None = None


class FilterSubscriptionPageScheme(ApiModel):
    size: int | None = None
    max_results: int | None = None
    start_index: int | None = None
    end_index: int | None = None
    items: list[FilterSubscriptionScheme] | None = None


class FilterScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    description: str | None = None
    owner: UserScheme | None = None
    jql: str | None = None
    view_url: str | None = None
    search_url: str | None = None
    favourite: bool | None = None
    favourite_count: int | None = None
    share_permissions: list[SharePermissionScheme] | None = None
    edit_permissions: list[SharePermissionScheme] | None = None
    subscriptions: FilterSubscriptionPageScheme | None = None


class FilterPayloadScheme(ApiModel):
    name: str | None = None
    description: str | None = None
    jql: str | None = None
    favourite: bool | None = None
    share_permissions: list[SharePermissionScheme] | None = None
    edit_permissions: list[SharePermissionScheme] | None = None


@dataclass
class FilterSearchOptionScheme:
    """Query options for ``FilterService.search``."""

    name: str = ""
    account_id: str = ""
    group: str = ""
    project_id: int = 0
    ids: list[int] = field(default_factory=list)
    order_by: str = ""
    expand: list[str] = field(default_factory=list)


class FilterSearchPageScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    next_page: str | None = None
    max_results: int | None = None
    start_at: int | None = None
    total: int | None = None
    is_last: bool | None = None
    values: list[FilterScheme] | None = None


class ShareFilterScopeScheme(ApiModel):
    scope: str | None = None


class PermissionFilterPayloadScheme(ApiModel):
    """A share permission to add to a filter.

    ``type`` is one of ``user``, ``project``, ``group``, ``projectRole``,
    ``global`` or ``authenticated``.
    """

    type: str | None = None
    project_id: str | None = None
    group_name: str | None = Field(default=None, alias="groupname")
    project_role_id: str | None = None
    account_id: str | None = None
    rights: int | None = None
