"""Tests for the ADF and rich text issue services."""

import pytest

from jira_sdk.exceptions import (
    NoAccountIDError,
    NoCustomFieldError,
    NoIssueKeyOrIDError,
    NoIssuesError,
    NoTransitionIDError,
)
from jira_sdk.jira.issues import IssueADFService, IssueRichTextService
from jira_sdk.models.jira import (
    CommentNodeScheme,
    CustomFields,
    IssueBulkResponseScheme,
    IssueBulkScheme,
    IssueFieldsScheme,
    IssueFieldsSchemeV2,
    IssueMoveOptions,
    IssueNotifyOptionsScheme,
    IssueNotifyToScheme,
    IssueResponseScheme,
    IssueScheme,
    IssueSchemeV2,
    IssueTransitionsScheme,
    IssueTypeScheme,
    ProjectScheme,
    UpdateOperations,
)
from jira_sdk.models.response import ResponseScheme
from tests.fixtures.jira_mocks import MOCK_ISSUE_ADF_RESPONSE


def _issue_v2(summary="Login page returns 500"):
    return IssueSchemeV2(
        fields=IssueFieldsSchemeV2(
            summary=summary,
            project=ProjectScheme(key="DUMMY"),
            issue_type=IssueTypeScheme(name="Bug"),
        )
    )


def _select_field():
    custom_fields = CustomFields()
    custom_fields.select("customfield_10042", "Red")
    return custom_fields


SERVICES = [(IssueADFService, "3"), (IssueRichTextService, "2")]


@pytest.mark.parametrize("service_class,version", SERVICES)
class TestSharedIssueOperations:
    """Operations that do not depend on the description format."""

    def test_delete(self, mock_connector, assert_request, service_class, version):
        response = service_class(mock_connector, version).delete("DUMMY-3", delete_sub_tasks=True)

        assert response.code == 200
        assert_request("DELETE", f"rest/api/{version}/issue/DUMMY-3?deleteSubtasks=true")

    def test_delete_keeps_subtasks_by_default(
        self, mock_connector, assert_request, service_class, version
    ):
        service_class(mock_connector, version).delete("DUMMY-3")

        assert_request("DELETE", f"rest/api/{version}/issue/DUMMY-3?deleteSubtasks=false")

    def test_assign(self, mock_connector, assert_request, service_class, version):
        service_class(mock_connector, version).assign("DUMMY-3", "5b10a2844c20165700ede21g")

        assert_request(
            "PUT",
            f"rest/api/{version}/issue/DUMMY-3/assignee",
            {"accountId": "5b10a2844c20165700ede21g"},
        )

    def test_notify(self, mock_connector, assert_request, service_class, version):
        options = IssueNotifyOptionsScheme(
            subject="Build broken",
            text_body="See the latest comment",
            to=IssueNotifyToScheme(reporter=True, assignee=True),
        )

        service_class(mock_connector, version).notify("DUMMY-3", options)

        assert_request("POST", f"rest/api/{version}/issue/DUMMY-3/notify", options)

    def test_transitions(self, mock_connector, assert_request, service_class, version):
        service_class(mock_connector, version).transitions("DUMMY-3")

        assert_request(
            "GET",
            f"rest/api/{version}/issue/DUMMY-3/transitions",
            target=IssueTransitionsScheme,
        )

    def test_creates_skips_empty_entries(
        self, mock_connector, assert_request, service_class, version
    ):
        payloads = [
            IssueBulkScheme(payload=_issue_v2("First"), custom_fields=_select_field()),
            IssueBulkScheme(payload=None),
            IssueBulkScheme(payload=_issue_v2("Second")),
        ]

        service_class(mock_connector, version).creates(payloads)

        assert_request(
            "POST",
            f"rest/api/{version}/issue/bulk",
            {
                "issueUpdates": [
                    {
                        "fields": {
                            "summary": "First",
                            "project": {"key": "DUMMY"},
                            "issuetype": {"name": "Bug"},
                            "customfield_10042": {"value": "Red"},
                        }
                    },
                    {
                        "fields": {
                            "summary": "Second",
                            "project": {"key": "DUMMY"},
                            "issuetype": {"name": "Bug"},
                        }
                    },
                ]
            },
            target=IssueBulkResponseScheme,
        )

    def test_creates_without_issues(
        self, mock_connector, assert_no_request, service_class, version
    ):
        with pytest.raises(NoIssuesError, match="jira: no issues set"):
            service_class(mock_connector, version).creates([])
        assert_no_request()

    def test_move_with_transition_only(
        self, mock_connector, assert_request, service_class, version
    ):
        service_class(mock_connector, version).move("DUMMY-3", "31")

        assert_request(
            "POST",
            f"rest/api/{version}/issue/DUMMY-3/transitions",
            {"transition": {"id": "31"}},
        )

    def test_move_with_fields(self, mock_connector, assert_request, service_class, version):
        operations = UpdateOperations()
        operations.add_array_operation("labels", {"triaged": "add"})
        options = IssueMoveOptions(
            fields=IssueSchemeV2(fields=IssueFieldsSchemeV2(summary="Fixed")),
            custom_fields=_select_field(),
            operations=operations,
        )

        service_class(mock_connector, version).move("DUMMY-3", "31", options)

        assert_request(
            "POST",
            f"rest/api/{version}/issue/DUMMY-3/transitions",
            {
                "fields": {"summary": "Fixed", "customfield_10042": {"value": "Red"}},
                "update": {"labels": [{"add": "triaged"}]},
                "transition": {"id": "31"},
            },
        )

    def test_move_ignores_options_without_fields(
        self, mock_connector, assert_request, service_class, version
    ):
        options = IssueMoveOptions(custom_fields=_select_field())

        service_class(mock_connector, version).move("DUMMY-3", "31", options)

        assert_request(
            "POST",
            f"rest/api/{version}/issue/DUMMY-3/transitions",
            {"transition": {"id": "31"}},
        )

    def test_missing_issue_key(
        self, mock_connector, assert_no_request, service_class, version
    ):
        service = service_class(mock_connector, version)

        for call in (
            lambda: service.delete(""),
            lambda: service.assign("", "abc"),
            lambda: service.notify("", IssueNotifyOptionsScheme()),
            lambda: service.transitions(""),
            lambda: service.get(""),
            lambda: service.update("", payload=_issue_v2()),
            lambda: service.move("", "31"),
        ):
            with pytest.raises(NoIssueKeyOrIDError):
                call()
        assert_no_request()

    def test_missing_account_id(
        self, mock_connector, assert_no_request, service_class, version
    ):
        with pytest.raises(NoAccountIDError):
            service_class(mock_connector, version).assign("DUMMY-3", "")
        assert_no_request()

    def test_missing_transition_id(
        self, mock_connector, assert_no_request, service_class, version
    ):
        with pytest.raises(NoTransitionIDError, match="jira: no transition id set"):
            service_class(mock_connector, version).move("DUMMY-3", "")
        assert_no_request()


class TestIssueADFService:
    """Tests for the v3 issue service."""

    @pytest.fixture
    def service(self, mock_connector):
        return IssueADFService(mock_connector, "3")

    def test_create(self, service, assert_request):
        payload = IssueScheme(
            fields=IssueFieldsScheme(
                summary="Login page returns 500",
                project=ProjectScheme(key="DUMMY"),
                issue_type=IssueTypeScheme(name="Bug"),
                description=CommentNodeScheme.document(
                    CommentNodeScheme.paragraph("Steps to reproduce")
                ),
            )
        )

        service.create(payload, _select_field())

        assert_request(
            "POST",
            "rest/api/3/issue",
            {
                "fields": {
                    "summary": "Login page returns 500",
                    "project": {"key": "DUMMY"},
                    "issuetype": {"name": "Bug"},
                    "description": {
                        "version": 1,
                        "type": "doc",
                        "content": [
                            {
                                "type": "paragraph",
                                "content": [{"type": "text", "text": "Steps to reproduce"}],
                            }
                        ],
                    },
                    "customfield_10042": {"value": "Red"},
                }
            },
            target=IssueResponseScheme,
        )

    def test_create_with_empty_custom_fields(self, service, assert_no_request):
        with pytest.raises(NoCustomFieldError):
            service.create(_issue_v2(), CustomFields())
        assert_no_request()

    def test_get(self, service, mock_connector, assert_request):
        issue = IssueScheme.from_api_response(MOCK_ISSUE_ADF_RESPONSE)
        mock_connector.call.return_value = (issue, ResponseScheme(code=200))

        result, _ = service.get("DUMMY-3", fields=["summary", "status"], expand=["changelog"])

        assert result.key == "DUMMY-3"
        assert_request(
            "GET",
            "rest/api/3/issue/DUMMY-3?expand=changelog&fields=summary%2Cstatus",
            target=IssueScheme,
        )

    def test_update_with_operations(self, service, assert_request):
        operations = UpdateOperations()
        operations.add_string_operation("summary", "set", "Renamed")

        response = service.update(
            "DUMMY-3",
            notify=False,
            payload=IssueScheme(fields=IssueFieldsScheme(labels=["backend"])),
            operations=operations,
        )

        assert response.code == 200
        assert_request(
            "PUT",
            "rest/api/3/issue/DUMMY-3?notifyUsers=false",
            {
                "fields": {"labels": ["backend"]},
                "update": {"summary": [{"set": "Renamed"}]},
            },
        )


class TestIssueRichTextService:
    """Tests for the v2 issue service."""

    @pytest.fixture
    def service(self, mock_connector):
        return IssueRichTextService(mock_connector, "2")

    def test_create(self, service, assert_request):
        service.create(_issue_v2())

        assert_request(
            "POST",
            "rest/api/2/issue",
            {
                "fields": {
                    "summary": "Login page returns 500",
                    "project": {"key": "DUMMY"},
                    "issuetype": {"name": "Bug"},
                }
            },
            target=IssueResponseScheme,
        )

    def test_get(self, service, assert_request):
        service.get("DUMMY-3")

        assert_request("GET", "rest/api/2/issue/DUMMY-3", target=IssueSchemeV2)

    def test_update_with_custom_fields(self, service, assert_request):
        service.update(
            "DUMMY-3",
            payload=IssueSchemeV2(fields=IssueFieldsSchemeV2(description="h1. Title")),
            custom_fields=_select_field(),
        )

        assert_request(
            "PUT",
            "rest/api/2/issue/DUMMY-3?notifyUsers=true",
            {"fields": {"description": "h1. Title", "customfield_10042": {"value": "Red"}}},
        )
