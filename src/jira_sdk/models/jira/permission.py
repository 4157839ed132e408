"""
Jira permission, permission scheme and grant models.
"""

from pydantic import Field

from ..base import ApiModel
from .common import ProjectScheme


class PermissionScheme(ApiModel):
    key: str | None = None
    name: str | None = None
    type: str | None = None
    description: str | None = None
    have_permission: bool | None = None


class AllPermissionsScheme(ApiModel):
    """All permissions on the instance, keyed by permission key."""

    permissions: dict[str, PermissionScheme] | None = None


class BulkProjectPermissionsScheme(ApiModel):
    issues: list[int] | None = None
    projects: list[int] | None = None
    permissions: list[str] | None = None


class PermissionCheckPayload(ApiModel):
    global_permissions: list[str] | None = None
    account_id: str | None = None
    project_permissions: list[BulkProjectPermissionsScheme] | None = None


class BulkProjectPermissionGrantsScheme(ApiModel):
    permission: str | None = None
    issues: list[int] | None = None
    projects: list[int] | None = None


class PermissionGrantsScheme(ApiModel):
    project_permissions: list[BulkProjectPermissionGrantsScheme] | None = None
    global_permissions: list[str] | None = None


class PermittedProjectsScheme(ApiModel):
    projects: list[ProjectScheme] | None = None


class PermissionGrantHolderScheme(ApiModel):
    type: str | None = None
    parameter: str | None = None
    expand: str | None = None


class PermissionGrantScheme(ApiModel):
    id: int | None = None
    self_url: str | None = Field(default=None, alias="self")
    holder: PermissionGrantHolderScheme | None = None
    permission: str | None = None


class PermissionGrantPayloadScheme(ApiModel):
    holder: PermissionGrantHolderScheme | None = None
    permission: str | None = None


class PermissionSchemeGrantsScheme(ApiModel):
    permissions: list[PermissionGrantScheme] | None = None
    expand: str | None = None


class PermissionSchemeScopeScheme(ApiModel):
    type: str | None = None
    project: ProjectScheme | None = None


class PermissionSchemeScheme(ApiModel):
    expand: str | None = None
    id: int | None = None
    self_url: str | None = Field(default=None, alias="self")
    name: str | None = None
    description: str | None = None
    permissions: list[PermissionGrantScheme] | None = None
    scope: PermissionSchemeScopeScheme | None = None


class PermissionSchemePageScheme(ApiModel):
    permission_schemes: list[PermissionSchemeScheme] | None = None


class SecurityLevelScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    description: str | None = None
    name: str | None = None


class IssueSecurityLevelsScheme(ApiModel):
    levels: list[SecurityLevelScheme] | None = None
