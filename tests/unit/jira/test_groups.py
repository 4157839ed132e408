"""Tests for the group service."""

import pytest

from jira_sdk.exceptions import NoAccountIDError, NoGroupNameError
from jira_sdk.jira.groups import GroupService
from jira_sdk.models.jira import (
    BulkGroupScheme,
    GroupBulkOptionsScheme,
    GroupDetailScheme,
    GroupMemberPageScheme,
)


@pytest.fixture
def service(mock_connector):
    return GroupService(mock_connector, "3")


def test_create(service, assert_request):
    service.create("jira-users")

    assert_request("POST", "rest/api/3/group", {"name": "jira-users"}, GroupDetailScheme)


def test_delete(service, assert_request):
    service.delete("jira users")

    assert_request("DELETE", "rest/api/3/group?groupname=jira+users")


def test_bulk_repeats_ids_and_names(service, assert_request):
    options = GroupBulkOptionsScheme(group_ids=["1", "2"], group_names=["a", "b"])

    service.bulk(options, start_at=0, max_results=50)

    assert_request(
        "GET",
        "rest/api/3/group/bulk?groupId=1&groupId=2&groupName=a&groupName=b"
        "&maxResults=50&startAt=0",
        target=BulkGroupScheme,
    )


def test_bulk_without_options(service, assert_request):
    service.bulk()

    assert_request(
        "GET", "rest/api/3/group/bulk?maxResults=50&startAt=0", target=BulkGroupScheme
    )


def test_members(service, assert_request):
    service.members("jira-users", inactive=True, start_at=0, max_results=100)

    assert_request(
        "GET",
        "rest/api/3/group/member?groupname=jira-users&includeInactiveUsers=true"
        "&maxResults=100&startAt=0",
        target=GroupMemberPageScheme,
    )


def test_add(service, assert_request):
    service.add("jira-users", "5b10a2844c20165700ede21g")

    assert_request(
        "POST",
        "rest/api/3/group/user?groupname=jira-users",
        {"accountId": "5b10a2844c20165700ede21g"},
        GroupDetailScheme,
    )


def test_remove(service, assert_request):
    service.remove("jira-users", "5b10a2844c20165700ede21g")

    assert_request(
        "DELETE",
        "rest/api/3/group/user?accountId=5b10a2844c20165700ede21g&groupname=jira-users",
    )


@pytest.mark.parametrize(
    "call",
    [
        lambda s: s.create(""),
        lambda s: s.delete(""),
        lambda s: s.members(""),
        lambda s: s.add("", "abc"),
        lambda s: s.remove("", "abc"),
    ],
)
def test_missing_group_name(service, assert_no_request, call):
    with pytest.raises(NoGroupNameError, match="jira: no group name set"):
        call(service)
    assert_no_request()


@pytest.mark.parametrize(
    "call",
    [lambda s: s.add("jira-users", ""), lambda s: s.remove("jira-users", "")],
)
def test_missing_account_id(service, assert_no_request, call):
    with pytest.raises(NoAccountIDError):
        call(service)
    assert_no_request()
