"""
Root pytest configuration file for Jira SDK tests.
"""

import json

import pytest

from jira_sdk.models.response import ResponseScheme


@pytest.fixture
def make_response():
    """Build a ResponseScheme for a status code and JSON body."""

    def _make(code=200, body=None, method="GET", endpoint="https://test.atlassian.net/"):
        raw = json.dumps(body).encode() if body is not None else b""
        return ResponseScheme(code=code, endpoint=endpoint, method=method, body=raw)

    return _make
