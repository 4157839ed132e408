"""Module for Jira workflow scheme operations."""

from typing import Any

from ..exceptions import (
    NoIssueTypeIDError,
    NoProjectIDOrKeyError,
    NoProjectsError,
    NoWorkflowSchemeIDError,
)
from ..models.constants import DEFAULT_MAX_RESULTS, DEFAULT_START_AT
from ..models.jira import (
    WorkflowMappingScheme,
    WorkflowSchemeAssociationPageScheme,
    WorkflowSchemeIssueTypePayloadScheme,
    WorkflowSchemeIssueTypeScheme,
    WorkflowSchemePageScheme,
    WorkflowSchemePayloadScheme,
    WorkflowSchemeScheme,
)
from ..models.response import ResponseScheme
from .protocols import Connector
from .service import JiraService


class WorkflowSchemeIssueTypeService(JiraService):
    """Service for the issue type to workflow mappings of a workflow scheme.

    Setting ``return_draft``/``update_draft`` works against the draft of a
    scheme that is in use by projects instead of the active scheme.
    """

    def get(
        self, scheme_id: int, issue_type_id: str, return_draft: bool = False
    ) -> tuple[WorkflowSchemeIssueTypeScheme, ResponseScheme]:
        if not scheme_id:
            raise NoWorkflowSchemeIDError()
        if not issue_type_id:
            raise NoIssueTypeIDError()

        params = {"returnDraftIfExists": True} if return_draft else None
        endpoint = self._endpoint(
            f"workflowscheme/{scheme_id}/issuetype/{issue_type_id}", params
        )
        return self._call("GET", endpoint, target=WorkflowSchemeIssueTypeScheme)

    def set(
        self,
        scheme_id: int,
        issue_type_id: str,
        payload: WorkflowSchemeIssueTypePayloadScheme,
    ) -> tuple[WorkflowSchemeScheme, ResponseScheme]:
        """Map an issue type to a workflow."""
        if not scheme_id:
            raise NoWorkflowSchemeIDError()
        if not issue_type_id:
            raise NoIssueTypeIDError()

        endpoint = self._endpoint(f"workflowscheme/{scheme_id}/issuetype/{issue_type_id}")
        return self._call("PUT", endpoint, payload, target=WorkflowSchemeScheme)

    def delete(
        self, scheme_id: int, issue_type_id: str, update_draft: bool = False
    ) -> tuple[WorkflowSchemeScheme, ResponseScheme]:
        """Remove the workflow mapping of an issue type."""
        if not scheme_id:
            raise NoWorkflowSchemeIDError()
        if not issue_type_id:
            raise NoIssueTypeIDError()

        params = {"updateDraftIfNeeded": True} if update_draft else None
        endpoint = self._endpoint(
            f"workflowscheme/{scheme_id}/issuetype/{issue_type_id}", params
        )
        return self._call("DELETE", endpoint, target=WorkflowSchemeScheme)

    def mapping(
        self, scheme_id: int, workflow_name: str = "", return_draft: bool = False
    ) -> tuple[list[WorkflowMappingScheme], ResponseScheme]:
        """
        Get the workflow to issue types mappings of a workflow scheme.

        Args:
            scheme_id: The ID of the workflow scheme
            workflow_name: Optional workflow to return the mapping of
            return_draft: Read the draft scheme when one exists

        Returns:
            The mappings and the response
        """
        if not scheme_id:
            raise NoWorkflowSchemeIDError()

        params: dict[str, Any] = {}
        if workflow_name:
            params["workflowName"] = workflow_name
        if return_draft:
            params["returnDraftIfExists"] = True

        endpoint = self._endpoint(f"workflowscheme/{scheme_id}/workflow", params)
        return self._call("GET", endpoint, target=list[WorkflowMappingScheme])


class WorkflowSchemeService(JiraService):
    """Service for workflow schemes.

    Issue type mappings are handled by ``issue_type``, a
    ``WorkflowSchemeIssueTypeService`` bound to the same connector and version.
    """

    def __init__(self, connector: Connector, version: str) -> None:
        super().__init__(connector, version)
        self.issue_type = WorkflowSchemeIssueTypeService(connector, version)

    def gets(
        self,
        start_at: int = DEFAULT_START_AT,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> tuple[WorkflowSchemePageScheme, ResponseScheme]:
        params = {"startAt": start_at, "maxResults": max_results}
        endpoint = self._endpoint("workflowscheme", params)
        return self._call("GET", endpoint, target=WorkflowSchemePageScheme)

    def create(
        self, payload: WorkflowSchemePayloadScheme
    ) -> tuple[WorkflowSchemeScheme, ResponseScheme]:
        endpoint = self._endpoint("workflowscheme")
        return self._call("POST", endpoint, payload, target=WorkflowSchemeScheme)

    def get(
        self, scheme_id: int, return_draft_if_exists: bool = False
    ) -> tuple[WorkflowSchemeScheme, ResponseScheme]:
        if not scheme_id:
            raise NoWorkflowSchemeIDError()

        params = {"returnDraftIfExists": True} if return_draft_if_exists else None
        endpoint = self._endpoint(f"workflowscheme/{scheme_id}", params)
        return self._call("GET", endpoint, target=WorkflowSchemeScheme)

    def update(
        self, scheme_id: int, payload: WorkflowSchemePayloadScheme
    ) -> tuple[WorkflowSchemeScheme, ResponseScheme]:
        """
        Update a workflow scheme.

        When the scheme is active, Jira only applies the change to a draft
        if ``update_draft_if_needed`` is set on the payload.
        """
        if not scheme_id:
            raise NoWorkflowSchemeIDError()

        endpoint = self._endpoint(f"workflowscheme/{scheme_id}")
        return self._call("PUT", endpoint, payload, target=WorkflowSchemeScheme)

    def delete(self, scheme_id: int) -> ResponseScheme:
        if not scheme_id:
            raise NoWorkflowSchemeIDError()

        endpoint = self._endpoint(f"workflowscheme/{scheme_id}")
        _, response = self._call("DELETE", endpoint)
        return response

    def associations(
        self, project_ids: list[int]
    ) -> tuple[WorkflowSchemeAssociationPageScheme, ResponseScheme]:
        """
        Get the workflow schemes used by projects.

        Args:
            project_ids: IDs of the projects; each one is sent as its own
                ``projectId`` parameter

        Raises:
            NoProjectsError: If no project IDs are given
        """
        if not project_ids:
            raise NoProjectsError()

        endpoint = self._endpoint("workflowscheme/project", {"projectId": list(project_ids)})
        return self._call("GET", endpoint, target=WorkflowSchemeAssociationPageScheme)

    def assign(self, scheme_id: str, project_id: str) -> ResponseScheme:
        """Assign a workflow scheme to a company-managed project."""
        if not scheme_id:
            raise NoWorkflowSchemeIDError()
        if not project_id:
            raise NoProjectIDOrKeyError()

        endpoint = self._endpoint("workflowscheme/project")
        payload = {"workflowSchemeId": scheme_id, "projectId": project_id}
        _, response = self._call("PUT", endpoint, payload)
        return response
