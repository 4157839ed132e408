"""
Jira group models.
"""

from dataclasses import dataclass, field

from pydantic import Field

from ..base import ApiModel
from .common import UserScheme


class GroupUsersScheme(ApiModel):
    size: int | None = None
    max_results: int | None = None
    start_index: int | None = None
    end_index: int | None = None
    items: list[UserScheme] | None = None


class GroupDetailScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    name: str | None = None
    group_id: str | None = None
    users: GroupUsersScheme | None = None
    expand: str | None = None


@dataclass
class GroupBulkOptionsScheme:
    """Query options for ``GroupService.bulk``."""

    group_ids: list[str] = field(default_factory=list)
    group_names: list[str] = field(default_factory=list)


class BulkGroupScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    max_results: int | None = None
    start_at: int | None = None
    total: int | None = None
    is_last: bool | None = None
    values: list[GroupDetailScheme] | None = None


class GroupMemberPageScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    next_page: str | None = None
    max_results: int | None = None
    start_at: int | None = None
    total: int | None = None
    is_last: bool | None = None
    values: list[UserScheme] | None = None
