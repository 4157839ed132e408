"""Base client module for Jira API interactions."""

import json
import logging
from typing import Any
from urllib.parse import urljoin

from atlassian import Jira
from pydantic import TypeAdapter, ValidationError
from requests import PreparedRequest, Request, Session

from ..exceptions import (
    JiraDecodeError,
    JiraRequestError,
    NoSiteError,
    http_error_for,
)
from ..models.base import ApiModel
from ..models.response import ResponseScheme
from ..utils.ssl import configure_ssl_verification
from ..utils.urls import normalize_site
from .config import JiraConfig

# Configure logging
logger = logging.getLogger("jira-sdk.connector")


class JiraConnector:
    """HTTP connector for the Jira REST API.

    Authentication is delegated to ``atlassian.Jira``, which prepares a
    ``requests`` session for basic auth or a personal access token. The
    connector then builds and sends requests on that session.
    """

    config: JiraConfig

    def __init__(
        self, config: JiraConfig | None = None, session: Session | None = None
    ) -> None:
        """Initialize the connector with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)
            session: Optional requests session to authenticate and reuse

        Raises:
            NoSiteError: If the configuration has no site URL
            ValueError: If configuration is invalid or required credentials are missing
        """
        # Load configuration from environment variables if not provided
        self.config = config or JiraConfig.from_env()
        if not self.config.url:
            raise NoSiteError()

        self.site = normalize_site(self.config.url)

        if self.config.auth_type == "token":
            self.jira = Jira(
                url=self.config.url,
                token=self.config.personal_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
                session=session,
            )
        else:  # basic auth
            self.jira = Jira(
                url=self.config.url,
                username=self.config.username,
                password=self.config.api_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
                session=session,
            )

        self.session: Session = self.jira._session

        # Configure SSL verification using the shared utility
        configure_ssl_verification(
            url=self.config.url,
            session=self.session,
            ssl_verify=self.config.ssl_verify,
        )

        if self.config.proxies:
            self.session.proxies.update(self.config.proxies)

    @classmethod
    def from_site(
        cls,
        site: str,
        username: str | None = None,
        api_token: str | None = None,
        personal_token: str | None = None,
        session: Session | None = None,
        **kwargs: Any,
    ) -> "JiraConnector":
        """Build a connector from a site URL and credentials.

        A personal token selects token auth, anything else basic auth.
        Extra keyword arguments are passed to ``JiraConfig``.
        """
        if not site:
            raise NoSiteError()

        config = JiraConfig(
            url=site,
            auth_type="token" if personal_token else "basic",
            username=username,
            api_token=api_token,
            personal_token=personal_token,
            **kwargs,
        )
        return cls(config, session=session)

    def new_request(
        self,
        method: str,
        endpoint: str,
        payload: Any = None,
        content_type: str = "",
    ) -> PreparedRequest:
        """
        Build an authenticated request for an endpoint of the site.

        Args:
            method: HTTP method (e.g. 'GET', 'POST')
            endpoint: Path relative to the site, query string included
            payload: Optional body: a scheme, a dict/list or any JSON value
            content_type: Overrides the default ``application/json``

        Returns:
            The prepared request

        Raises:
            JiraRequestError: If the payload cannot be serialised or the
                request cannot be prepared
        """
        url = urljoin(self.site, endpoint.lstrip("/"))
        headers = {"Accept": "application/json"}

        data = None
        if payload is not None:
            headers["Content-Type"] = content_type or "application/json"
            try:
                data = json.dumps(self._serialise(payload))
            except (TypeError, ValueError) as e:
                error_msg = f"Unable to serialise payload for {method} {endpoint}: {e}"
                raise JiraRequestError(error_msg) from e

        if self.config.user_agent:
            headers["User-Agent"] = self.config.user_agent

        try:
            return self.session.prepare_request(
                Request(method=method, url=url, headers=headers, data=data)
            )
        except ValueError as e:
            error_msg = f"Unable to build request {method} {url}: {e}"
            raise JiraRequestError(error_msg) from e

    @staticmethod
    def _serialise(payload: Any) -> Any:
        if isinstance(payload, ApiModel):
            return payload.to_api_payload()
        return payload

    def call(
        self, request: PreparedRequest, target: Any = None
    ) -> tuple[Any, ResponseScheme]:
        """
        Send a request and decode the response body.

        Args:
            request: A request built by ``new_request``
            target: Optional type (a scheme, ``list[...]``, ``dict[...]``)
                to decode the JSON body into

        Returns:
            The decoded result, ``None`` without a target or for an empty
            body, and the response envelope

        Raises:
            JiraHTTPError: If Jira answers with a non-success status
            JiraDecodeError: If the body does not match the target
            requests.RequestException: On transport failures
        """
        logger.debug(f"{request.method} {request.url}")

        settings = self.session.merge_environment_settings(
            request.url, {}, None, None, None
        )
        response = self.session.send(request, **settings)

        scheme = ResponseScheme(
            code=response.status_code,
            endpoint=request.url or "",
            method=request.method or "",
            body=response.content or b"",
            headers=dict(response.headers),
        )

        if not scheme.ok:
            logger.warning(
                f"Jira returned {scheme.code} for {scheme.method} {scheme.endpoint}"
            )
            raise http_error_for(scheme)

        if target is None or not scheme.body:
            return None, scheme

        try:
            result = TypeAdapter(target).validate_python(scheme.json())
        except (ValueError, ValidationError) as e:
            error_msg = f"Unable to decode {scheme.method} {scheme.endpoint} response: {e}"
            raise JiraDecodeError(error_msg, scheme) from e

        return result, scheme
