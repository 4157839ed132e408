"""Base class shared by the Jira resource services."""

import logging
from typing import Any
from urllib.parse import quote_plus, urlencode

from ..exceptions import NoVersionProvidedError
from ..models.response import ResponseScheme
from .protocols import Connector

logger = logging.getLogger("jira-sdk")


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(params: dict[str, Any]) -> str:
    """Encode query parameters with the keys in alphabetical order.

    A list or tuple value repeats its key once per item, keeping the item
    order. Spaces become ``+`` and reserved characters are percent-encoded.
    """
    pairs = []
    for key in sorted(params):
        value = params[key]
        items = value if isinstance(value, (list, tuple)) else [value]
        pairs.extend((key, _query_value(item)) for item in items)
    return urlencode(pairs, quote_via=quote_plus)


class JiraService:
    """Base for every resource service.

    A service holds the connector and the REST API version; it is stateless
    otherwise and may be shared between threads.
    """

    def __init__(self, connector: Connector, version: str) -> None:
        if not version:
            raise NoVersionProvidedError()

        self.connector = connector
        self.version = version

    def _endpoint(self, path: str, params: dict[str, Any] | None = None) -> str:
        endpoint = f"rest/api/{self.version}/{path}"
        query = encode_query(params) if params else ""
        if query:
            endpoint = f"{endpoint}?{query}"
        return endpoint

    def _call(
        self,
        method: str,
        endpoint: str,
        payload: Any = None,
        target: Any = None,
    ) -> tuple[Any, ResponseScheme]:
        logger.debug("%s: %s %s", type(self).__name__, method, endpoint)
        request = self.connector.new_request(method, endpoint, payload)
        return self.connector.call(request, target)
