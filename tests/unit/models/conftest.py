"""
Test fixtures for model testing.

Each fixture returns a deep copy of a mock API response so tests can
modify the data freely.
"""

import copy

import pytest

from tests.fixtures.jira_mocks import (
    MOCK_CHANGED_WORKLOGS_RESPONSE,
    MOCK_COMMENT_ADF_RESPONSE,
    MOCK_COMMENTS_ADF_RESPONSE,
    MOCK_COMMENTS_V2_RESPONSE,
    MOCK_ISSUE_ADF_RESPONSE,
    MOCK_PROJECT_RESPONSE,
    MOCK_USER_RESPONSE,
    MOCK_WORKLOGS_ADF_RESPONSE,
)


@pytest.fixture
def jira_user_data():
    return copy.deepcopy(MOCK_USER_RESPONSE)


@pytest.fixture
def jira_comment_data():
    return copy.deepcopy(MOCK_COMMENT_ADF_RESPONSE)


@pytest.fixture
def jira_comments_data():
    return copy.deepcopy(MOCK_COMMENTS_ADF_RESPONSE)


@pytest.fixture
def jira_comments_v2_data():
    return copy.deepcopy(MOCK_COMMENTS_V2_RESPONSE)


@pytest.fixture
def jira_worklogs_data():
    return copy.deepcopy(MOCK_WORKLOGS_ADF_RESPONSE)


@pytest.fixture
def jira_changed_worklogs_data():
    return copy.deepcopy(MOCK_CHANGED_WORKLOGS_RESPONSE)


@pytest.fixture
def jira_issue_data():
    return copy.deepcopy(MOCK_ISSUE_ADF_RESPONSE)


@pytest.fixture
def jira_project_data():
    return copy.deepcopy(MOCK_PROJECT_RESPONSE)
