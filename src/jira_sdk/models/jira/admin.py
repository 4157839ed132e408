"""
Jira application role and announcement banner models.
"""

from ..base import ApiModel


class ApplicationRoleScheme(ApiModel):
    key: str | None = None
    groups: list[str] | None = None
    name: str | None = None
    default_groups: list[str] | None = None
    selected_by_default: bool | None = None
    defined: bool | None = None
    number_of_seats: int | None = None
    remaining_seats: int | None = None
    user_count: int | None = None
    user_count_description: str | None = None
    has_unlimited_seats: bool | None = None
    platform: bool | None = None


class AnnouncementBannerScheme(ApiModel):
    hash_id: str | None = None
    is_dismissible: bool | None = None
    is_enabled: bool | None = None
    message: str | None = None
    visibility: str | None = None


class AnnouncementBannerPayloadScheme(ApiModel):
    """Banner update body. ``visibility`` is ``public`` or ``private``."""

    is_dismissible: bool | None = None
    is_enabled: bool | None = None
    message: str | None = None
    visibility: str | None = None
