"""Module for Jira protocol definitions."""

from abc import abstractmethod
from typing import Any, Protocol, runtime_checkable

from requests import PreparedRequest

from ..models.response import ResponseScheme


@runtime_checkable
class Connector(Protocol):
    """Protocol for the HTTP layer shared by every Jira service.

    Services only build endpoints and payloads; the connector owns the
    session, authentication and response decoding.
    """

    @abstractmethod
    def new_request(
        self,
        method: str,
        endpoint: str,
        payload: Any = None,
        content_type: str = "",
    ) -> PreparedRequest:
        """
        Build a request against the site.

        Args:
            method: HTTP method (e.g. 'GET', 'POST')
            endpoint: Path relative to the site, query string included
            payload: Optional body: a scheme, a dict/list or any JSON value
            content_type: Overrides the default ``application/json``

        Returns:
            The prepared request
        """

    @abstractmethod
    def call(
        self, request: PreparedRequest, target: Any = None
    ) -> tuple[Any, ResponseScheme]:
        """
        Execute a request and decode its body.

        Args:
            request: A request built by ``new_request``
            target: Optional type to decode the JSON body into

        Returns:
            The decoded result (``None`` without a target) and the response
        """
