"""Module for Jira issue link types and remote links."""

from ..exceptions import (
    NoIssueKeyOrIDError,
    NoLinkTypeIDError,
    NoRemoteLinkGlobalIDError,
    NoRemoteLinkIDError,
)
from ..models.jira import (
    IssueLinkTypeSearchScheme,
    LinkTypeScheme,
    RemoteLinkIdentify,
    RemoteLinkScheme,
)
from ..models.response import ResponseScheme
from .service import JiraService


class IssueLinkTypeService(JiraService):
    """Service for issue link types (e.g. 'Blocks', 'Relates')."""

    def gets(self) -> tuple[IssueLinkTypeSearchScheme, ResponseScheme]:
        endpoint = self._endpoint("issueLinkType")
        return self._call("GET", endpoint, target=IssueLinkTypeSearchScheme)

    def get(self, link_type_id: str) -> tuple[LinkTypeScheme, ResponseScheme]:
        if not link_type_id:
            raise NoLinkTypeIDError()

        endpoint = self._endpoint(f"issueLinkType/{link_type_id}")
        return self._call("GET", endpoint, target=LinkTypeScheme)

    def create(self, payload: LinkTypeScheme) -> tuple[LinkTypeScheme, ResponseScheme]:
        """
        Create an issue link type.

        Args:
            payload: The link type; ``name``, ``inward`` and ``outward`` are required

        Returns:
            The created link type and the response
        """
        endpoint = self._endpoint("issueLinkType")
        return self._call("POST", endpoint, payload, target=LinkTypeScheme)

    def update(
        self, link_type_id: str, payload: LinkTypeScheme
    ) -> tuple[LinkTypeScheme, ResponseScheme]:
        if not link_type_id:
            raise NoLinkTypeIDError()

        endpoint = self._endpoint(f"issueLinkType/{link_type_id}")
        return self._call("PUT", endpoint, payload, target=LinkTypeScheme)

    def delete(self, link_type_id: str) -> ResponseScheme:
        if not link_type_id:
            raise NoLinkTypeIDError()

        endpoint = self._endpoint(f"issueLinkType/{link_type_id}")
        _, response = self._call("DELETE", endpoint)
        return response


class RemoteLinkService(JiraService):
    """Service for links from issues to resources outside Jira."""

    def gets(
        self, issue_key_or_id: str, global_id: str = ""
    ) -> tuple[list[RemoteLinkScheme], ResponseScheme]:
        """
        Get the remote links of an issue.

        Args:
            issue_key_or_id: The issue key (e.g. 'PROJ-123') or ID
            global_id: Optional global ID to return a single link

        Returns:
            The remote links and the response
        """
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()

        params = {"globalId": global_id} if global_id else None
        endpoint = self._endpoint(f"issue/{issue_key_or_id}/remotelink", params)
        return self._call("GET", endpoint, target=list[RemoteLinkScheme])

    def get(
        self, issue_key_or_id: str, link_id: str
    ) -> tuple[RemoteLinkScheme, ResponseScheme]:
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()
        if not link_id:
            raise NoRemoteLinkIDError()

        endpoint = self._endpoint(f"issue/{issue_key_or_id}/remotelink/{link_id}")
        return self._call("GET", endpoint, target=RemoteLinkScheme)

    def create(
        self, issue_key_or_id: str, payload: RemoteLinkScheme
    ) -> tuple[RemoteLinkIdentify, ResponseScheme]:
        """Create a remote link, or update the one with the same global ID."""
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()

        endpoint = self._endpoint(f"issue/{issue_key_or_id}/remotelink")
        return self._call("POST", endpoint, payload, target=RemoteLinkIdentify)

    def update(
        self, issue_key_or_id: str, link_id: str, payload: RemoteLinkScheme
    ) -> ResponseScheme:
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()
        if not link_id:
            raise NoRemoteLinkIDError()

        endpoint = self._endpoint(f"issue/{issue_key_or_id}/remotelink/{link_id}")
        _, response = self._call("PUT", endpoint, payload)
        return response

    def delete_by_id(self, issue_key_or_id: str, link_id: str) -> ResponseScheme:
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()
        if not link_id:
            raise NoRemoteLinkIDError()

        endpoint = self._endpoint(f"issue/{issue_key_or_id}/remotelink/{link_id}")
        _, response = self._call("DELETE", endpoint)
        return response

    def delete_by_global_id(self, issue_key_or_id: str, global_id: str) -> ResponseScheme:
        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()
        if not global_id:
            raise NoRemoteLinkGlobalIDError()

        endpoint = self._endpoint(
            f"issue/{issue_key_or_id}/remotelink", {"globalId": global_id}
        )
        _, response = self._call("DELETE", endpoint)
        return response
