"""
Jira audit record models.
"""

from dataclasses import dataclass
from datetime import date, datetime

from ..base import ApiModel


@dataclass
class AuditRecordGetOptions:
    """Filters for ``AuditRecordService.get``.

    ``from_`` and ``to`` accept ``date``/``datetime`` objects or date strings.
    """

    filter: str = ""
    from_: date | datetime | str | None = None
    to: date | datetime | str | None = None


class AuditRecordObjectItemScheme(ApiModel):
    id: str | None = None
    name: str | None = None
    type_name: str | None = None
    parent_id: str | None = None
    parent_name: str | None = None


class AuditRecordChangedValueScheme(ApiModel):
    field_name: str | None = None
    changed_from: str | None = None
    changed_to: str | None = None


class AuditRecordAssociatedItemScheme(ApiModel):
    id: str | None = None
    name: str | None = None
    type_name: str | None = None
    parent_id: str | None = None
    parent_name: str | None = None


class AuditRecordScheme(ApiModel):
    id: int | None = None
    summary: str | None = None
    remote_address: str | None = None
    author_key: str | None = None
    author_account_id: str | None = None
    created: str | None = None
    category: str | None = None
    event_source: str | None = None
    description: str | None = None
    object_item: AuditRecordObjectItemScheme | None = None
    changed_values: list[AuditRecordChangedValueScheme] | None = None
    associated_items: list[AuditRecordAssociatedItemScheme] | None = None


class AuditRecordPageScheme(ApiModel):
    offset: int | None = None
    limit: int | None = None
    total: int | None = None
    records: list[AuditRecordScheme] | None = None
