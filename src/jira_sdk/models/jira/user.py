"""
Jira user management models.

``UserScheme`` itself lives in ``common`` since most resources embed it.
"""

from ..base import ApiModel
from .common import UserScheme


class UserPayloadScheme(ApiModel):
    """Body for creating a user.

    Without a password Jira generates one; set ``notification`` so the
    user receives the e-mail that lets them choose their own.
    """

    email_address: str | None = None
    display_name: str | None = None
    password: str | None = None
    notification: bool | None = None
    products: list[str] | None = None


class UserSearchPageScheme(ApiModel):
    max_results: int | None = None
    start_at: int | None = None
    total: int | None = None
    is_last: bool | None = None
    values: list[UserScheme] | None = None
