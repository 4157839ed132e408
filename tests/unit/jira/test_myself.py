"""Tests for the current user service."""

from typing import Any

import pytest

from jira_sdk.exceptions import NoKeyError, NoPropertyValueError
from jira_sdk.jira.myself import MySelfService
from jira_sdk.models.jira import UserScheme
from jira_sdk.models.response import ResponseScheme
from tests.fixtures.jira_mocks import MOCK_USER_RESPONSE


@pytest.fixture
def service(mock_connector):
    return MySelfService(mock_connector, "3")


def test_details(service, mock_connector, assert_request):
    user = UserScheme.from_api_response(MOCK_USER_RESPONSE)
    mock_connector.call.return_value = (user, ResponseScheme(code=200))

    result, _ = service.details(expand=["groups", "applicationRoles"])

    assert result.account_id == MOCK_USER_RESPONSE["accountId"]
    assert_request(
        "GET", "rest/api/3/myself?expand=groups%2CapplicationRoles", target=UserScheme
    )


def test_details_without_expand(service, assert_request):
    service.details()

    assert_request("GET", "rest/api/3/myself", target=UserScheme)


def test_get_preference(service, assert_request):
    service.get("jira.user.locale")

    assert_request("GET", "rest/api/3/mypreferences?key=jira.user.locale", target=Any)


def test_get_all_preferences(service, assert_request):
    service.get()

    assert_request("GET", "rest/api/3/mypreferences", target=Any)


def test_set_preference(service, assert_request):
    service.set("jira.user.locale", "en_US")

    assert_request("PUT", "rest/api/3/mypreferences?key=jira.user.locale", "en_US")


def test_delete_preference(service, assert_request):
    service.delete("jira.user.locale")

    assert_request("DELETE", "rest/api/3/mypreferences?key=jira.user.locale")


@pytest.mark.parametrize(
    "call", [lambda s: s.set("", "en_US"), lambda s: s.delete("")]
)
def test_missing_key(service, assert_no_request, call):
    with pytest.raises(NoKeyError, match="jira: no key set"):
        call(service)
    assert_no_request()


def test_set_preference_rejects_none(service, assert_no_request):
    with pytest.raises(NoPropertyValueError, match="jira: no property value set"):
        service.set("jira.user.locale", None)
    assert_no_request()
