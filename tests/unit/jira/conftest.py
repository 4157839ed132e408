"""Test fixtures for Jira unit tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from jira_sdk.jira.config import JiraConfig
from jira_sdk.models.response import ResponseScheme


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "JIRA_URL": "https://test.atlassian.net",
            "JIRA_USERNAME": "test_username",
            "JIRA_API_TOKEN": "test_token",
        },
        clear=True,  # Clear existing environment variables
    ):
        yield


@pytest.fixture
def mock_config():
    """Create a mock JiraConfig instance."""
    return JiraConfig(
        url="https://test.atlassian.net",
        auth_type="basic",
        username="test_username",
        api_token="test_token",
    )


@pytest.fixture
def mock_connector():
    """Mock connector recording the requests built by a service.

    ``new_request`` returns a sentinel request and ``call`` answers with no
    result and a 200 response, unless a test sets ``call.return_value``.
    """
    connector = MagicMock()
    connector.new_request.return_value = MagicMock(name="prepared_request")
    connector.call.return_value = (None, ResponseScheme(code=200))
    yield connector


@pytest.fixture
def assert_request(mock_connector):
    """Assert the single request a service sent through the mock connector."""

    def _assert(method, endpoint, payload=None, target=None):
        mock_connector.new_request.assert_called_once_with(method, endpoint, payload)
        mock_connector.call.assert_called_once_with(
            mock_connector.new_request.return_value, target
        )

    return _assert


@pytest.fixture
def assert_no_request(mock_connector):
    """Assert the service failed before reaching the connector."""

    def _assert():
        mock_connector.new_request.assert_not_called()
        mock_connector.call.assert_not_called()

    return _assert
