"""Tests for the user service."""

import pytest

from jira_sdk.exceptions import NoAccountIDError, NoAccountSliceError
from jira_sdk.jira.users import UserService
from jira_sdk.models.jira import (
    GroupScheme,
    UserPayloadScheme,
    UserScheme,
    UserSearchPageScheme,
)
from jira_sdk.models.response import ResponseScheme
from tests.fixtures.jira_mocks import MOCK_USER_RESPONSE

ACCOUNT_ID = "5b10a2844c20165700ede21g"


@pytest.fixture
def service(mock_connector):
    return UserService(mock_connector, "3")


def test_get(service, mock_connector, assert_request):
    user = UserScheme.from_api_response(MOCK_USER_RESPONSE)
    mock_connector.call.return_value = (user, ResponseScheme(code=200))

    result, _ = service.get(ACCOUNT_ID, expand=["groups", "applicationRoles"])

    assert result.display_name == "Mia Krystof"
    assert_request(
        "GET",
        f"rest/api/3/user?accountId={ACCOUNT_ID}&expand=groups%2CapplicationRoles",
        target=UserScheme,
    )


def test_create(service, assert_request):
    payload = UserPayloadScheme(
        email_address="mia@example.com", display_name="Mia Krystof", notification=True
    )

    service.create(payload)

    assert_request("POST", "rest/api/3/user", payload, target=UserScheme)


def test_create_payload_uses_camel_case():
    payload = UserPayloadScheme(email_address="mia@example.com", display_name="Mia Krystof")

    assert payload.to_api_payload() == {
        "emailAddress": "mia@example.com",
        "displayName": "Mia Krystof",
    }


def test_delete(service, assert_request):
    response = service.delete(ACCOUNT_ID)

    assert response.code == 200
    assert_request("DELETE", f"rest/api/3/user?accountId={ACCOUNT_ID}")


def test_find_repeats_account_id(service, assert_request):
    service.find(["a1", "b2"], start_at=0, max_results=10)

    assert_request(
        "GET",
        "rest/api/3/user/bulk?accountId=a1&accountId=b2&maxResults=10&startAt=0",
        target=UserSearchPageScheme,
    )


def test_groups(service, assert_request):
    service.groups(ACCOUNT_ID)

    assert_request(
        "GET", f"rest/api/3/user/groups?accountId={ACCOUNT_ID}", target=list[GroupScheme]
    )


def test_gets(service, assert_request):
    service.gets(start_at=100, max_results=50)

    assert_request(
        "GET", "rest/api/3/users/search?maxResults=50&startAt=100", target=list[UserScheme]
    )


@pytest.mark.parametrize(
    "call",
    [
        lambda s: s.get(""),
        lambda s: s.delete(""),
        lambda s: s.groups(""),
    ],
)
def test_missing_account_id(service, assert_no_request, call):
    with pytest.raises(NoAccountIDError):
        call(service)
    assert_no_request()


def test_find_without_account_ids(service, assert_no_request):
    with pytest.raises(NoAccountSliceError, match="jira: no account id's set"):
        service.find([])
    assert_no_request()
