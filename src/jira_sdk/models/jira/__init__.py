"""
Jira data models for the Jira SDK.

This package provides Pydantic models for Jira REST API resources,
organized by resource group.
"""

from .adf import CommentNodeScheme, MarkScheme
from .admin import (
    AnnouncementBannerPayloadScheme,
    AnnouncementBannerScheme,
    ApplicationRoleScheme,
)
from .audit import AuditRecordGetOptions, AuditRecordPageScheme, AuditRecordScheme
from .comment import (
    CommentPayloadScheme,
    CommentPayloadSchemeV2,
    IssueCommentPageScheme,
    IssueCommentPageSchemeV2,
    IssueCommentScheme,
    IssueCommentSchemeV2,
)
from .common import (
    EntityPropertyScheme,
    GroupScheme,
    ProjectInsightScheme,
    ProjectCategoryScheme,
    ProjectRoleReferenceScheme,
    ProjectScheme,
    PropertyPageScheme,
    StatusCategoryScheme,
    StatusScheme,
    UserScheme,
    VisibilityScheme,
)
from .dashboard import (
    DashboardPageScheme,
    DashboardPayloadScheme,
    DashboardScheme,
    DashboardSearchOptionsScheme,
    DashboardSearchPageScheme,
)
from .filter import (
    FilterPayloadScheme,
    FilterScheme,
    FilterSearchOptionScheme,
    FilterSearchPageScheme,
    PermissionFilterPayloadScheme,
    SharePermissionScheme,
    ShareFilterScopeScheme,
)
from .group import (
    BulkGroupScheme,
    GroupBulkOptionsScheme,
    GroupDetailScheme,
    GroupMemberPageScheme,
)
from .issue import (
    CustomFields,
    IssueBulkErrorScheme,
    IssueBulkResponseScheme,
    IssueBulkScheme,
    IssueFieldsScheme,
    IssueFieldsSchemeV2,
    IssueMoveOptions,
    IssueNotifyGroupScheme,
    IssueNotifyOptionsScheme,
    IssueNotifyPermissionScheme,
    IssueNotifyRestrictScheme,
    IssueNotifyToScheme,
    IssueNotifyUserScheme,
    IssueResponseScheme,
    IssueScheme,
    IssueSchemeV2,
    IssueTransitionScheme,
    IssueTransitionsScheme,
    IssueTypeScheme,
    ParentScheme,
    PriorityScheme,
    ResolutionScheme,
    UpdateOperations,
    build_issue_payload,
    deep_merge,
)
from .link import (
    IssueLinkTypeSearchScheme,
    LinkTypeScheme,
    RemoteLinkIdentify,
    RemoteLinkObjectScheme,
    RemoteLinkScheme,
)
from .notification import (
    NotificationSchemeCreatedPayload,
    NotificationSchemeEventNotificationPayloadScheme,
    NotificationSchemeEventPayloadScheme,
    NotificationSchemeEventsPayloadScheme,
    NotificationSchemeEventTypeIdScheme,
    NotificationSchemePageScheme,
    NotificationSchemePayloadScheme,
    NotificationSchemeProjectPageScheme,
    NotificationSchemeScheme,
    NotificationSchemeSearchOptions,
)
from .permission import (
    AllPermissionsScheme,
    BulkProjectPermissionsScheme,
    IssueSecurityLevelsScheme,
    PermissionCheckPayload,
    PermissionGrantHolderScheme,
    PermissionGrantPayloadScheme,
    PermissionGrantScheme,
    PermissionGrantsScheme,
    PermissionSchemeGrantsScheme,
    PermissionSchemePageScheme,
    PermissionSchemeScheme,
    PermittedProjectsScheme,
)
from .project import (
    ComponentCountScheme,
    ComponentPayloadScheme,
    ComponentScheme,
    NewProjectCreatedScheme,
    ProjectCategoryPayloadScheme,
    ProjectFeaturesScheme,
    ProjectPayloadScheme,
    ProjectRoleDetailScheme,
    ProjectRolePayloadScheme,
    ProjectRoleScheme,
    ProjectSearchOptionsScheme,
    ProjectSearchScheme,
    ProjectStatusPageScheme,
    ProjectUpdateScheme,
    TaskScheme,
)
from .search import (
    IssueBulkFetchErrorScheme,
    IssueBulkFetchScheme,
    IssueBulkFetchSchemeV2,
    IssueMatchesPageScheme,
    IssueMatchesScheme,
    IssueSearchApproximateCountScheme,
    IssueSearchCheckPayloadScheme,
    IssueSearchJQLScheme,
    IssueSearchJQLSchemeV2,
    IssueSearchScheme,
    IssueSearchSchemeV2,
)
from .user import UserPayloadScheme, UserSearchPageScheme
from .workflow import (
    WorkflowSchemeAssociationPageScheme,
    WorkflowSchemeIssueTypePayloadScheme,
    WorkflowSchemeIssueTypeScheme,
    WorkflowSchemePageScheme,
    WorkflowSchemePayloadScheme,
    WorkflowSchemeScheme,
    WorkflowMappingScheme,
)
from .worklog import (
    ChangedWorklogPageScheme,
    IssueWorklogADFPageScheme,
    IssueWorklogADFScheme,
    IssueWorklogRichTextPageScheme,
    IssueWorklogRichTextScheme,
    WorklogADFPayloadScheme,
    WorklogOptionsScheme,
    WorklogRichTextPayloadScheme,
)

__all__ = [
    # Common models
    "UserScheme",
    "GroupScheme",
    "VisibilityScheme",
    "ProjectScheme",
    "ProjectCategoryScheme",
    "ProjectRoleReferenceScheme",
    "EntityPropertyScheme",
    "PropertyPageScheme",
    "ProjectInsightScheme",
    "StatusCategoryScheme",
    "StatusScheme",
    "CommentNodeScheme",
    "MarkScheme",
    # Resource models
    "AnnouncementBannerPayloadScheme",
    "AnnouncementBannerScheme",
    "ApplicationRoleScheme",
    "AuditRecordGetOptions",
    "AuditRecordPageScheme",
    "AuditRecordScheme",
    "CommentPayloadScheme",
    "CommentPayloadSchemeV2",
    "IssueCommentPageScheme",
    "IssueCommentPageSchemeV2",
    "IssueCommentScheme",
    "IssueCommentSchemeV2",
    "DashboardPageScheme",
    "DashboardPayloadScheme",
    "DashboardScheme",
    "DashboardSearchOptionsScheme",
    "DashboardSearchPageScheme",
    "FilterPayloadScheme",
    "FilterScheme",
    "FilterSearchOptionScheme",
    "FilterSearchPageScheme",
    "PermissionFilterPayloadScheme",
    "SharePermissionScheme",
    "ShareFilterScopeScheme",
    "BulkGroupScheme",
    "GroupBulkOptionsScheme",
    "GroupDetailScheme",
    "GroupMemberPageScheme",
    "CustomFields",
    "IssueBulkErrorScheme",
    "IssueBulkResponseScheme",
    "IssueBulkScheme",
    "IssueFieldsScheme",
    "IssueFieldsSchemeV2",
    "IssueMoveOptions",
    "IssueNotifyGroupScheme",
    "IssueNotifyOptionsScheme",
    "IssueNotifyPermissionScheme",
    "IssueNotifyRestrictScheme",
    "IssueNotifyToScheme",
    "IssueNotifyUserScheme",
    "IssueResponseScheme",
    "IssueScheme",
    "IssueSchemeV2",
    "IssueTransitionScheme",
    "IssueTransitionsScheme",
    "IssueTypeScheme",
    "ParentScheme",
    "PriorityScheme",
    "ResolutionScheme",
    "UpdateOperations",
    "build_issue_payload",
    "deep_merge",
    "IssueLinkTypeSearchScheme",
    "LinkTypeScheme",
    "RemoteLinkIdentify",
    "RemoteLinkObjectScheme",
    "RemoteLinkScheme",
    "NotificationSchemeCreatedPayload",
    "NotificationSchemeEventNotificationPayloadScheme",
    "NotificationSchemeEventPayloadScheme",
    "NotificationSchemeEventsPayloadScheme",
    "NotificationSchemeEventTypeIdScheme",
    "NotificationSchemePageScheme",
    "NotificationSchemePayloadScheme",
    "NotificationSchemeProjectPageScheme",
    "NotificationSchemeScheme",
    "NotificationSchemeSearchOptions",
    "AllPermissionsScheme",
    "BulkProjectPermissionsScheme",
    "IssueSecurityLevelsScheme",
    "PermissionCheckPayload",
    "PermissionGrantHolderScheme",
    "PermissionGrantPayloadScheme",
    "PermissionGrantScheme",
    "PermissionGrantsScheme",
    "PermissionSchemeGrantsScheme",
    "PermissionSchemePageScheme",
    "PermissionSchemeScheme",
    "PermittedProjectsScheme",
    "ComponentCountScheme",
    "ComponentPayloadScheme",
    "ComponentScheme",
    "NewProjectCreatedScheme",
    "ProjectCategoryPayloadScheme",
    "ProjectFeaturesScheme",
    "ProjectPayloadScheme",
    "ProjectRoleDetailScheme",
    "ProjectRolePayloadScheme",
    "ProjectRoleScheme",
    "ProjectSearchOptionsScheme",
    "ProjectSearchScheme",
    "ProjectStatusPageScheme",
    "ProjectUpdateScheme",
    "TaskScheme",
    "IssueBulkFetchErrorScheme",
    "IssueBulkFetchScheme",
    "IssueBulkFetchSchemeV2",
    "IssueMatchesPageScheme",
    "IssueMatchesScheme",
    "IssueSearchApproximateCountScheme",
    "IssueSearchCheckPayloadScheme",
    "IssueSearchJQLScheme",
    "IssueSearchJQLSchemeV2",
    "IssueSearchScheme",
    "IssueSearchSchemeV2",
    "UserPayloadScheme",
    "UserSearchPageScheme",
    "WorkflowSchemeAssociationPageScheme",
    "WorkflowSchemeIssueTypePayloadScheme",
    "WorkflowSchemeIssueTypeScheme",
    "WorkflowSchemePageScheme",
    "WorkflowSchemePayloadScheme",
    "WorkflowSchemeScheme",
    "WorkflowMappingScheme",
    "ChangedWorklogPageScheme",
    "IssueWorklogADFPageScheme",
    "IssueWorklogADFScheme",
    "IssueWorklogRichTextPageScheme",
    "IssueWorklogRichTextScheme",
    "WorklogADFPayloadScheme",
    "WorklogOptionsScheme",
    "WorklogRichTextPayloadScheme",
]
