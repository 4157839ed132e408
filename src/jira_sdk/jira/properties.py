"""Module for Jira issue and project entity properties."""

from typing import Any

from ..exceptions import (
    JiraValidationError,
    NoIssueKeyOrIDError,
    NoProjectIDOrKeyError,
    NoPropertyKeyError,
    NoPropertyValueError,
)
from ..models.jira import EntityPropertyScheme, PropertyPageScheme
from ..models.response import ResponseScheme
from .service import JiraService


class _EntityPropertyService(JiraService):
    """Entity properties stored under ``{resource}/{key}/properties``.

    Property values are arbitrary JSON other than ``None``.
    """

    resource: str = ""
    missing_key_error: type[JiraValidationError] = JiraValidationError

    def _check(self, key_or_id: str, property_key: str | None = None) -> None:
        if not key_or_id:
            raise self.missing_key_error()
        if property_key is not None and not property_key:
            raise NoPropertyKeyError()

    def gets(self, key_or_id: str) -> tuple[PropertyPageScheme, ResponseScheme]:
        """List the property keys of an entity."""
        self._check(key_or_id)

        endpoint = self._endpoint(f"{self.resource}/{key_or_id}/properties")
        return self._call("GET", endpoint, target=PropertyPageScheme)

    def get(
        self, key_or_id: str, property_key: str
    ) -> tuple[EntityPropertyScheme, ResponseScheme]:
        self._check(key_or_id, property_key)

        endpoint = self._endpoint(f"{self.resource}/{key_or_id}/properties/{property_key}")
        return self._call("GET", endpoint, target=EntityPropertyScheme)

    def set(self, key_or_id: str, property_key: str, value: Any) -> ResponseScheme:
        """
        Create or replace a property.

        Args:
            key_or_id: The key or ID of the entity
            property_key: The key of the property
            value: The JSON value to store, anything but None

        Returns:
            The response; Jira answers 201 for a new property and 200 otherwise

        Raises:
            NoPropertyValueError: If the value is None
        """
        self._check(key_or_id, property_key)
        if value is None:
            raise NoPropertyValueError()

        endpoint = self._endpoint(f"{self.resource}/{key_or_id}/properties/{property_key}")
        _, response = self._call("PUT", endpoint, value)
        return response

    def delete(self, key_or_id: str, property_key: str) -> ResponseScheme:
        self._check(key_or_id, property_key)

        endpoint = self._endpoint(f"{self.resource}/{key_or_id}/properties/{property_key}")
        _, response = self._call("DELETE", endpoint)
        return response


class IssuePropertyService(_EntityPropertyService):
    resource = "issue"
    missing_key_error = NoIssueKeyOrIDError


class ProjectPropertyService(_EntityPropertyService):
    resource = "project"
    missing_key_error = NoProjectIDOrKeyError
