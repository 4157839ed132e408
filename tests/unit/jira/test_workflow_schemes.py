"""Tests for the workflow scheme services."""

import pytest

from jira_sdk.exceptions import (
    NoIssueTypeIDError,
    NoProjectIDOrKeyError,
    NoProjectsError,
    NoWorkflowSchemeIDError,
)
from jira_sdk.jira.workflow_schemes import (
    WorkflowSchemeIssueTypeService,
    WorkflowSchemeService,
)
from jira_sdk.models.jira import (
    WorkflowMappingScheme,
    WorkflowSchemeAssociationPageScheme,
    WorkflowSchemeIssueTypePayloadScheme,
    WorkflowSchemeIssueTypeScheme,
    WorkflowSchemePageScheme,
    WorkflowSchemePayloadScheme,
    WorkflowSchemeScheme,
)


class TestWorkflowSchemeService:
    """Tests for WorkflowSchemeService."""

    @pytest.fixture
    def service(self, mock_connector):
        return WorkflowSchemeService(mock_connector, "3")

    def test_issue_type_service_is_bound(self, service, mock_connector):
        assert isinstance(service.issue_type, WorkflowSchemeIssueTypeService)
        assert service.issue_type.connector is mock_connector

    def test_gets(self, service, assert_request):
        service.gets(start_at=0, max_results=50)

        assert_request(
            "GET",
            "rest/api/3/workflowscheme?maxResults=50&startAt=0",
            target=WorkflowSchemePageScheme,
        )

    def test_create(self, service, assert_request):
        payload = WorkflowSchemePayloadScheme(
            name="Example workflow scheme",
            default_workflow="jira",
            issue_type_mappings={"10000": "scrum workflow"},
        )

        service.create(payload)

        assert_request("POST", "rest/api/3/workflowscheme", payload, WorkflowSchemeScheme)

    def test_create_payload_keeps_mapping_keys(self):
        payload = WorkflowSchemePayloadScheme(
            name="Example workflow scheme",
            issue_type_mappings={"10000": "scrum workflow"},
            update_draft_if_needed=True,
        )

        assert payload.to_api_payload() == {
            "name": "Example workflow scheme",
            "issueTypeMappings": {"10000": "scrum workflow"},
            "updateDraftIfNeeded": True,
        }

    def test_get(self, service, assert_request):
        service.get(10000, return_draft_if_exists=True)

        assert_request(
            "GET",
            "rest/api/3/workflowscheme/10000?returnDraftIfExists=true",
            target=WorkflowSchemeScheme,
        )

    def test_get_active(self, service, assert_request):
        service.get(10000)

        assert_request("GET", "rest/api/3/workflowscheme/10000", target=WorkflowSchemeScheme)

    def test_update(self, service, assert_request):
        payload = WorkflowSchemePayloadScheme(name="Renamed", update_draft_if_needed=True)

        service.update(10000, payload)

        assert_request("PUT", "rest/api/3/workflowscheme/10000", payload, WorkflowSchemeScheme)

    def test_delete(self, service, assert_request):
        service.delete(10000)

        assert_request("DELETE", "rest/api/3/workflowscheme/10000")

    def test_associations(self, service, assert_request):
        service.associations([10001, 10002])

        assert_request(
            "GET",
            "rest/api/3/workflowscheme/project?projectId=10001&projectId=10002",
            target=WorkflowSchemeAssociationPageScheme,
        )

    def test_associations_without_projects(self, service, assert_no_request):
        with pytest.raises(NoProjectsError, match="jira: no projects set"):
            service.associations([])
        assert_no_request()

    def test_assign(self, service, assert_request):
        service.assign("10032", "10001")

        assert_request(
            "PUT",
            "rest/api/3/workflowscheme/project",
            {"workflowSchemeId": "10032", "projectId": "10001"},
        )

    def test_assign_without_project(self, service, assert_no_request):
        with pytest.raises(NoProjectIDOrKeyError):
            service.assign("10032", "")
        assert_no_request()

    @pytest.mark.parametrize(
        "call",
        [
            lambda s: s.get(0),
            lambda s: s.update(0, WorkflowSchemePayloadScheme()),
            lambda s: s.delete(0),
            lambda s: s.assign("", "10001"),
        ],
    )
    def test_missing_scheme_id(self, service, assert_no_request, call):
        with pytest.raises(NoWorkflowSchemeIDError, match="jira: no workflow scheme id set"):
            call(service)
        assert_no_request()


class TestWorkflowSchemeIssueTypeService:
    """Tests for WorkflowSchemeIssueTypeService."""

    @pytest.fixture
    def service(self, mock_connector):
        return WorkflowSchemeIssueTypeService(mock_connector, "2")

    def test_get(self, service, assert_request):
        service.get(10000, "10001", return_draft=True)

        assert_request(
            "GET",
            "rest/api/2/workflowscheme/10000/issuetype/10001?returnDraftIfExists=true",
            target=WorkflowSchemeIssueTypeScheme,
        )

    def test_set(self, service, assert_request):
        payload = WorkflowSchemeIssueTypePayloadScheme(
            issue_type="10001", workflow="jira", update_draft_if_needed=False
        )

        service.set(10000, "10001", payload)

        assert_request(
            "PUT",
            "rest/api/2/workflowscheme/10000/issuetype/10001",
            payload,
            WorkflowSchemeScheme,
        )

    def test_delete_updating_draft(self, service, assert_request):
        service.delete(10000, "10001", update_draft=True)

        assert_request(
            "DELETE",
            "rest/api/2/workflowscheme/10000/issuetype/10001?updateDraftIfNeeded=true",
            target=WorkflowSchemeScheme,
        )

    def test_mapping(self, service, assert_request):
        service.mapping(10000, workflow_name="jira", return_draft=True)

        assert_request(
            "GET",
            "rest/api/2/workflowscheme/10000/workflow?returnDraftIfExists=true&workflowName=jira",
            target=list[WorkflowMappingScheme],
        )

    def test_mapping_without_options(self, service, assert_request):
        service.mapping(10000)

        assert_request(
            "GET",
            "rest/api/2/workflowscheme/10000/workflow",
            target=list[WorkflowMappingScheme],
        )

    @pytest.mark.parametrize(
        "call",
        [
            lambda s: s.get(0, "10001"),
            lambda s: s.set(0, "10001", WorkflowSchemeIssueTypePayloadScheme()),
            lambda s: s.delete(0, "10001"),
            lambda s: s.mapping(0),
        ],
    )
    def test_missing_scheme_id(self, service, assert_no_request, call):
        with pytest.raises(NoWorkflowSchemeIDError):
            call(service)
        assert_no_request()

    @pytest.mark.parametrize(
        "call",
        [
            lambda s: s.get(10000, ""),
            lambda s: s.set(10000, "", WorkflowSchemeIssueTypePayloadScheme()),
            lambda s: s.delete(10000, ""),
        ],
    )
    def test_missing_issue_type(self, service, assert_no_request, call):
        with pytest.raises(NoIssueTypeIDError):
            call(service)
        assert_no_request()
