"""
Jira dashboard models.
"""

from dataclasses import dataclass, field

from pydantic import Field

from ..base import ApiModel
from .common import UserScheme
from .filter import SharePermissionScheme


class DashboardScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    description: str | None = None
    is_favourite: bool | None = None
    owner: UserScheme | None = None
    popularity: int | None = None
    rank: int | None = None
    view: str | None = None
    share_permissions: list[SharePermissionScheme] | None = None
    edit_permissions: list[SharePermissionScheme] | None = None


class DashboardPageScheme(ApiModel):
    start_at: int | None = None
    max_results: int | None = None
    total: int | None = None
    prev: str | None = None
    next: str | None = None
    dashboards: list[DashboardScheme] | None = None


class DashboardSearchPageScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    next_page: str | None = None
    max_results: int | None = None
    start_at: int | None = None
    total: int | None = None
    is_last: bool | None = None
    values: list[DashboardScheme] | None = None


class DashboardPayloadScheme(ApiModel):
    name: str | None = None
    description: str | None = None
    share_permissions: list[SharePermissionScheme] | None = None
    edit_permissions: list[SharePermissionScheme] | None = None


@dataclass
class DashboardSearchOptionsScheme:
    """Query options for ``DashboardService.search``."""

    dashboard_name: str = ""
    owner_account_id: str = ""
    group_permission_name: str = ""
    order_by: str = ""
    expand: list[str] = field(default_factory=list)
