"""Module for Jira projects and their categories, components, features, roles
and permission schemes."""

from typing import Any

from ..exceptions import (
    NoComponentIDError,
    NoPermissionSchemeIDError,
    NoProjectCategoryIDError,
    NoProjectFeatureKeyError,
    NoProjectFeatureStateError,
    NoProjectIDOrKeyError,
    NoProjectRoleIDError,
)
from ..models.constants import DEFAULT_MAX_RESULTS, DEFAULT_START_AT
from ..models.jira import (
    ComponentCountScheme,
    ComponentPayloadScheme,
    ComponentScheme,
    IssueSecurityLevelsScheme,
    NewProjectCreatedScheme,
    NotificationSchemeScheme,
    PermissionSchemeScheme,
    ProjectCategoryPayloadScheme,
    ProjectCategoryScheme,
    ProjectFeaturesScheme,
    ProjectPayloadScheme,
    ProjectRoleDetailScheme,
    ProjectRolePayloadScheme,
    ProjectRoleScheme,
    ProjectScheme,
    ProjectSearchOptionsScheme,
    ProjectSearchScheme,
    ProjectStatusPageScheme,
    ProjectUpdateScheme,
    TaskScheme,
)
from ..models.response import ResponseScheme
from .service import JiraService


class ProjectCategoryService(JiraService):
    """Service for project categories."""

    def gets(self) -> tuple[list[ProjectCategoryScheme], ResponseScheme]:
        endpoint = self._endpoint("projectCategory")
        return self._call("GET", endpoint, target=list[ProjectCategoryScheme])

    def get(self, category_id: int) -> tuple[ProjectCategoryScheme, ResponseScheme]:
        if not category_id:
            raise NoProjectCategoryIDError()

        endpoint = self._endpoint(f"projectCategory/{category_id}")
        return self._call("GET", endpoint, target=ProjectCategoryScheme)

    def create(
        self, payload: ProjectCategoryPayloadScheme
    ) -> tuple[ProjectCategoryScheme, ResponseScheme]:
        endpoint = self._endpoint("projectCategory")
        return self._call("POST", endpoint, payload, target=ProjectCategoryScheme)

    def update(
        self, category_id: int, payload: ProjectCategoryPayloadScheme
    ) -> tuple[ProjectCategoryScheme, ResponseScheme]:
        if not category_id:
            raise NoProjectCategoryIDError()

        endpoint = self._endpoint(f"projectCategory/{category_id}")
        return self._call("PUT", endpoint, payload, target=ProjectCategoryScheme)

    def delete(self, category_id: int) -> ResponseScheme:
        if not category_id:
            raise NoProjectCategoryIDError()

        endpoint = self._endpoint(f"projectCategory/{category_id}")
        _, response = self._call("DELETE", endpoint)
        return response


class ProjectComponentService(JiraService):
    """Service for project components."""

    def create(
        self, payload: ComponentPayloadScheme
    ) -> tuple[ComponentScheme, ResponseScheme]:
        """
        Create a component in a project.

        Args:
            payload: The component; ``project`` holds the project key

        Returns:
            The created component and the response
        """
        endpoint = self._endpoint("component")
        return self._call("POST", endpoint, payload, target=ComponentScheme)

    def gets(self, project_key_or_id: str) -> tuple[list[ComponentScheme], ResponseScheme]:
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()

        endpoint = self._endpoint(f"project/{project_key_or_id}/components")
        return self._call("GET", endpoint, target=list[ComponentScheme])

    def count(self, component_id: str) -> tuple[ComponentCountScheme, ResponseScheme]:
        """Get the number of issues assigned to a component."""
        if not component_id:
            raise NoComponentIDError()

        endpoint = self._endpoint(f"component/{component_id}/relatedIssueCounts")
        return self._call("GET", endpoint, target=ComponentCountScheme)

    def delete(self, component_id: str) -> ResponseScheme:
        if not component_id:
            raise NoComponentIDError()

        endpoint = self._endpoint(f"component/{component_id}")
        _, response = self._call("DELETE", endpoint)
        return response

    def update(
        self, component_id: str, payload: ComponentPayloadScheme
    ) -> tuple[ComponentScheme, ResponseScheme]:
        if not component_id:
            raise NoComponentIDError()

        endpoint = self._endpoint(f"component/{component_id}")
        return self._call("PUT", endpoint, payload, target=ComponentScheme)

    def get(self, component_id: str) -> tuple[ComponentScheme, ResponseScheme]:
        if not component_id:
            raise NoComponentIDError()

        endpoint = self._endpoint(f"component/{component_id}")
        return self._call("GET", endpoint, target=ComponentScheme)


class ProjectFeatureService(JiraService):
    """Service for the features (e.g. boards, sprints) enabled on a project."""

    def gets(self, project_key_or_id: str) -> tuple[ProjectFeaturesScheme, ResponseScheme]:
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()

        endpoint = self._endpoint(f"project/{project_key_or_id}/features")
        return self._call("GET", endpoint, target=ProjectFeaturesScheme)

    def set(
        self, project_key_or_id: str, feature_key: str, state: str
    ) -> tuple[ProjectFeaturesScheme, ResponseScheme]:
        """
        Enable or disable a project feature.

        Args:
            project_key_or_id: The project key (e.g. 'PROJ') or ID
            feature_key: The key of the feature, e.g. 'jsw.classic.roadmap'
            state: One of ``ENABLED``, ``DISABLED`` or ``COMING_SOON``

        Returns:
            The features of the project after the change, and the response
        """
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()
        if not feature_key:
            raise NoProjectFeatureKeyError()
        if not state:
            raise NoProjectFeatureStateError()

        endpoint = self._endpoint(f"project/{project_key_or_id}/features/{feature_key}")
        return self._call("PUT", endpoint, {"state": state}, target=ProjectFeaturesScheme)


class ProjectPermissionSchemeService(JiraService):
    """Service for the permission scheme and security levels of a project."""

    def get(
        self, project_key_or_id: str, expand: list[str] | None = None
    ) -> tuple[PermissionSchemeScheme, ResponseScheme]:
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()

        params = {"expand": ",".join(expand)} if expand else None
        endpoint = self._endpoint(f"project/{project_key_or_id}/permissionscheme", params)
        return self._call("GET", endpoint, target=PermissionSchemeScheme)

    def assign(
        self, project_key_or_id: str, permission_scheme_id: int
    ) -> tuple[PermissionSchemeScheme, ResponseScheme]:
        """Assign a permission scheme to a project."""
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()
        if not permission_scheme_id:
            raise NoPermissionSchemeIDError()

        endpoint = self._endpoint(f"project/{project_key_or_id}/permissionscheme")
        return self._call(
            "PUT", endpoint, {"id": permission_scheme_id}, target=PermissionSchemeScheme
        )

    def security_levels(
        self, project_key_or_id: str
    ) -> tuple[IssueSecurityLevelsScheme, ResponseScheme]:
        """Get the issue security levels the user can set in a project."""
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()

        endpoint = self._endpoint(f"project/{project_key_or_id}/securitylevel")
        return self._call("GET", endpoint, target=IssueSecurityLevelsScheme)


class ProjectRoleService(JiraService):
    """Service for project roles."""

    def gets(self, project_key_or_id: str) -> tuple[dict[str, str], ResponseScheme]:
        """
        Get the roles of a project.

        Args:
            project_key_or_id: The project key (e.g. 'PROJ') or ID

        Returns:
            A mapping of role name to role URL, and the response
        """
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()

        endpoint = self._endpoint(f"project/{project_key_or_id}/role")
        return self._call("GET", endpoint, target=dict[str, str])

    def get(
        self, project_key_or_id: str, role_id: int
    ) -> tuple[ProjectRoleScheme, ResponseScheme]:
        """Get a project role, including its actors."""
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()
        if not role_id:
            raise NoProjectRoleIDError()

        endpoint = self._endpoint(f"project/{project_key_or_id}/role/{role_id}")
        return self._call("GET", endpoint, target=ProjectRoleScheme)

    def details(
        self, project_key_or_id: str
    ) -> tuple[list[ProjectRoleDetailScheme], ResponseScheme]:
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()

        endpoint = self._endpoint(f"project/{project_key_or_id}/roledetails")
        return self._call("GET", endpoint, target=list[ProjectRoleDetailScheme])

    def global_(self) -> tuple[list[ProjectRoleScheme], ResponseScheme]:
        """Get all project roles defined on the instance."""
        endpoint = self._endpoint("role")
        return self._call("GET", endpoint, target=list[ProjectRoleScheme])

    def create(
        self, payload: ProjectRolePayloadScheme
    ) -> tuple[ProjectRoleScheme, ResponseScheme]:
        endpoint = self._endpoint("role")
        return self._call("POST", endpoint, payload, target=ProjectRoleScheme)


class ProjectService(JiraService):
    """Service for projects."""

    def create(
        self, payload: ProjectPayloadScheme
    ) -> tuple[NewProjectCreatedScheme, ResponseScheme]:
        """
        Create a project from a template.

        Args:
            payload: Key, name, lead, project type and template of the project

        Returns:
            The ID, key and URL of the new project, and the response
        """
        endpoint = self._endpoint("project")
        return self._call("POST", endpoint, payload, target=NewProjectCreatedScheme)

    def search(
        self,
        options: ProjectSearchOptionsScheme | None = None,
        start_at: int = DEFAULT_START_AT,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> tuple[ProjectSearchScheme, ResponseScheme]:
        """
        Get a page of the projects visible to the user.

        Args:
            options: Optional filters; project IDs and keys repeat their
                query parameter, the other lists are comma-joined
            start_at: Index of the first project to return
            max_results: Maximum number of projects to return

        Returns:
            The project page and the response
        """
        params: dict[str, Any] = {"startAt": start_at, "maxResults": max_results}
        if options is not None:
            if options.expand:
                params["expand"] = ",".join(options.expand)
            if options.ids:
                params["id"] = list(options.ids)
            if options.keys:
                params["keys"] = list(options.keys)
            if options.order_by:
                params["orderBy"] = options.order_by
            if options.query:
                params["query"] = options.query
            if options.type_keys:
                params["typeKey"] = ",".join(options.type_keys)
            if options.category_id:
                params["categoryId"] = options.category_id
            if options.action:
                params["action"] = options.action
            if options.status:
                params["status"] = ",".join(options.status)
            if options.properties:
                params["properties"] = ",".join(options.properties)

        endpoint = self._endpoint("project/search", params)
        return self._call("GET", endpoint, target=ProjectSearchScheme)

    def get(
        self, project_key_or_id: str, expand: list[str] | None = None
    ) -> tuple[ProjectScheme, ResponseScheme]:
        """Get a project, e.g. with expand=['lead', 'issueTypes']."""
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()

        params = {"expand": ",".join(expand)} if expand else None
        endpoint = self._endpoint(f"project/{project_key_or_id}", params)
        return self._call("GET", endpoint, target=ProjectScheme)

    def update(
        self, project_key_or_id: str, payload: ProjectUpdateScheme
    ) -> tuple[ProjectScheme, ResponseScheme]:
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()

        endpoint = self._endpoint(f"project/{project_key_or_id}")
        return self._call("PUT", endpoint, payload, target=ProjectScheme)

    def delete(self, project_key_or_id: str, enable_undo: bool = False) -> ResponseScheme:
        """
        Delete a project.

        Args:
            project_key_or_id: The project key or ID
            enable_undo: Move the project to the recycle bin instead of
                deleting it permanently

        Returns:
            The response
        """
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()

        endpoint = self._endpoint(
            f"project/{project_key_or_id}", {"enableUndo": enable_undo}
        )
        _, response = self._call("DELETE", endpoint)
        return response

    def delete_asynchronously(
        self, project_key_or_id: str
    ) -> tuple[TaskScheme, ResponseScheme]:
        """Start deleting a project in the background; poll the returned task."""
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()

        endpoint = self._endpoint(f"project/{project_key_or_id}/delete")
        return self._call("POST", endpoint, target=TaskScheme)

    def archive(self, project_key_or_id: str) -> ResponseScheme:
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()

        endpoint = self._endpoint(f"project/{project_key_or_id}/archive")
        _, response = self._call("POST", endpoint)
        return response

    def restore(self, project_key_or_id: str) -> tuple[ProjectScheme, ResponseScheme]:
        """Restore an archived project, or one in the recycle bin."""
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()

        endpoint = self._endpoint(f"project/{project_key_or_id}/restore")
        return self._call("POST", endpoint, target=ProjectScheme)

    def statuses(
        self, project_key_or_id: str
    ) -> tuple[list[ProjectStatusPageScheme], ResponseScheme]:
        """Get the statuses of a project, grouped by issue type."""
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()

        endpoint = self._endpoint(f"project/{project_key_or_id}/statuses")
        return self._call("GET", endpoint, target=list[ProjectStatusPageScheme])

    def notification_scheme(
        self, project_key_or_id: str, expand: list[str] | None = None
    ) -> tuple[NotificationSchemeScheme, ResponseScheme]:
        """Get the notification scheme a project uses."""
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()

        params = {"expand": ",".join(expand)} if expand else None
        endpoint = self._endpoint(
            f"project/{project_key_or_id}/notificationscheme", params
        )
        return self._call("GET", endpoint, target=NotificationSchemeScheme)
