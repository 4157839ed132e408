"""
Jira issue link type and remote link models.
"""

from pydantic import Field

from ..base import ApiModel


class LinkTypeScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    inward: str | None = None
    outward: str | None = None


class IssueLinkTypeSearchScheme(ApiModel):
    issue_link_types: list[LinkTypeScheme] | None = None


class RemoteLinkIconScheme(ApiModel):
    title: str | None = None
    url16x16: str | None = None
    link: str | None = None


class RemoteLinkStatusScheme(ApiModel):
    resolved: bool | None = None
    icon: RemoteLinkIconScheme | None = None


class RemoteLinkApplicationScheme(ApiModel):
    type: str | None = None
    name: str | None = None


class RemoteLinkObjectScheme(ApiModel):
    url: str | None = None
    title: str | None = None
    summary: str | None = None
    icon: RemoteLinkIconScheme | None = None
    status: RemoteLinkStatusScheme | None = None


class RemoteLinkScheme(ApiModel):
    """A link from an issue to a resource outside Jira."""

    self_url: str | None = Field(default=None, alias="self")
    id: int | None = None
    global_id: str | None = None
    application: RemoteLinkApplicationScheme | None = None
    relationship: str | None = None
    object: RemoteLinkObjectScheme | None = None


class RemoteLinkIdentify(ApiModel):
    """Returned when a remote link is created or updated."""

    id: int | None = None
    self_url: str | None = Field(default=None, alias="self")
