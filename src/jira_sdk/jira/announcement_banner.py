"""Module for the Jira announcement banner."""

from ..models.jira import AnnouncementBannerPayloadScheme, AnnouncementBannerScheme
from ..models.response import ResponseScheme
from .service import JiraService


class AnnouncementBannerService(JiraService):
    """Service for the site-wide announcement banner.

    Reading and changing the banner needs the Administer Jira global
    permission.
    """

    def get(self) -> tuple[AnnouncementBannerScheme, ResponseScheme]:
        """Get the current announcement banner configuration."""
        endpoint = self._endpoint("announcementBanner")
        return self._call("GET", endpoint, target=AnnouncementBannerScheme)

    def update(self, payload: AnnouncementBannerPayloadScheme) -> ResponseScheme:
        """Update the announcement banner."""
        endpoint = self._endpoint("announcementBanner")
        _, response = self._call("PUT", endpoint, payload)
        return response
