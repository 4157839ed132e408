"""Jira API module for jira_sdk.

This module provides the connector, the resource services and the ``Jira``
client that wires them together for one REST API version.
"""

from ..models.constants import JIRA_DEFAULT_API_VERSION
from .announcement_banner import AnnouncementBannerService
from .application_roles import ApplicationRoleService
from .audit import AuditRecordService
from .client import JiraConnector
from .comments import CommentADFService, CommentRichTextService
from .config import JiraConfig
from .dashboards import DashboardService
from .filters import FilterService, FilterShareService
from .groups import GroupService
from .issues import IssueADFService, IssueRichTextService
from .links import IssueLinkTypeService, RemoteLinkService
from .myself import MySelfService
from .notification_schemes import NotificationSchemeService
from .permissions import (
    PermissionSchemeGrantService,
    PermissionSchemeService,
    PermissionService,
)
from .projects import (
    ProjectCategoryService,
    ProjectComponentService,
    ProjectFeatureService,
    ProjectPermissionSchemeService,
    ProjectRoleService,
    ProjectService,
)
from .properties import IssuePropertyService, ProjectPropertyService
from .protocols import Connector
from .search import SearchADFService, SearchRichTextService
from .service import JiraService, encode_query
from .users import UserService
from .workflow_schemes import WorkflowSchemeIssueTypeService, WorkflowSchemeService
from .worklog import WorklogADFService, WorklogRichTextService


class Jira:
    """
    The main Jira client providing access to every resource service.

    All services share one connector and one REST API version. Version
    ``"3"`` uses Atlassian Document Format for issue descriptions and for
    comment and worklog bodies; version ``"2"`` uses plain text.

    Example:
        >>> jira = Jira.from_env()
        >>> me, response = jira.myself.details(expand=["groups"])
    """

    def __init__(
        self,
        config: JiraConfig | None = None,
        connector: Connector | None = None,
        version: str | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional configuration (will use env vars if neither a
                config nor a connector is provided)
            connector: Optional connector to use instead of a ``JiraConnector``
            version: REST API version; defaults to the configured version

        Raises:
            NoVersionProvidedError: If the version resolves to an empty string
            ValueError: If configuration is invalid or required credentials are missing
        """
        if connector is None:
            config = config or JiraConfig.from_env()
            connector = JiraConnector(config)

        if version is None:
            version = config.api_version if config else JIRA_DEFAULT_API_VERSION

        self.config = config
        self.connector = connector
        self.version = version

        self.announcement_banner = AnnouncementBannerService(connector, version)
        self.application_role = ApplicationRoleService(connector, version)
        self.audit = AuditRecordService(connector, version)
        self.dashboard = DashboardService(connector, version)
        self.filter = FilterService(connector, version)
        self.group = GroupService(connector, version)
        self.issue_property = IssuePropertyService(connector, version)
        self.link_type = IssueLinkTypeService(connector, version)
        self.remote_link = RemoteLinkService(connector, version)
        self.myself = MySelfService(connector, version)
        self.notification_scheme = NotificationSchemeService(connector, version)
        self.permission = PermissionService(connector, version)
        self.permission_scheme = PermissionSchemeService(connector, version)
        self.project = ProjectService(connector, version)
        self.project_category = ProjectCategoryService(connector, version)
        self.project_component = ProjectComponentService(connector, version)
        self.project_feature = ProjectFeatureService(connector, version)
        self.project_permission_scheme = ProjectPermissionSchemeService(connector, version)
        self.project_property = ProjectPropertyService(connector, version)
        self.project_role = ProjectRoleService(connector, version)
        self.user = UserService(connector, version)
        self.workflow_scheme = WorkflowSchemeService(connector, version)

        if version == "2":
            self.comment: CommentADFService | CommentRichTextService = (
                CommentRichTextService(connector, version)
            )
            self.worklog: WorklogADFService | WorklogRichTextService = (
                WorklogRichTextService(connector, version)
            )
            self.issue: IssueADFService | IssueRichTextService = IssueRichTextService(
                connector, version
            )
            self.search: SearchADFService | SearchRichTextService = (
                SearchRichTextService(connector, version)
            )
        else:
            self.comment = CommentADFService(connector, version)
            self.worklog = WorklogADFService(connector, version)
            self.issue = IssueADFService(connector, version)
            self.search = SearchADFService(connector, version)

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "Jira":
        """Create a client from environment variables (and an optional .env file)."""
        return cls(JiraConfig.from_env(env_file))


__all__ = [
    "Jira",
    "JiraConfig",
    "JiraConnector",
    "Connector",
    "JiraService",
    "encode_query",
    "AnnouncementBannerService",
    "ApplicationRoleService",
    "AuditRecordService",
    "CommentADFService",
    "CommentRichTextService",
    "DashboardService",
    "FilterService",
    "FilterShareService",
    "GroupService",
    "IssueADFService",
    "IssueLinkTypeService",
    "IssuePropertyService",
    "IssueRichTextService",
    "MySelfService",
    "NotificationSchemeService",
    "PermissionSchemeGrantService",
    "PermissionSchemeService",
    "PermissionService",
    "ProjectCategoryService",
    "ProjectComponentService",
    "ProjectFeatureService",
    "ProjectPermissionSchemeService",
    "ProjectPropertyService",
    "ProjectRoleService",
    "ProjectService",
    "RemoteLinkService",
    "SearchADFService",
    "SearchRichTextService",
    "UserService",
    "WorkflowSchemeIssueTypeService",
    "WorkflowSchemeService",
    "WorklogADFService",
    "WorklogRichTextService",
]
