"""
Jira workflow scheme models.
"""

from pydantic import Field

from ..base import ApiModel


class WorkflowSchemeScheme(ApiModel):
    """A workflow scheme: the default workflow plus per issue type mappings."""

    id: int | None = None
    name: str | None = None
    description: str | None = None
    default_workflow: str | None = None
    issue_type_mappings: dict[str, str] | None = None
    original_default_workflow: str | None = None
    original_issue_type_mappings: dict[str, str] | None = None
    draft: bool | None = None
    last_modified_user: dict | None = None
    last_modified: str | None = None
    self_url: str | None = Field(default=None, alias="self")
    update_draft_if_needed: bool | None = None
    issue_types: dict[str, dict] | None = None


class WorkflowSchemePageScheme(ApiModel):
    self_url: str | None = Field(default=None, alias="self")
    next_page: str | None = None
    max_results: int | None = None
    start_at: int | None = None
    total: int | None = None
    is_last: bool | None = None
    values: list[WorkflowSchemeScheme] | None = None


class WorkflowSchemePayloadScheme(ApiModel):
    name: str | None = None
    description: str | None = None
    default_workflow: str | None = None
    issue_type_mappings: dict[str, str] | None = None
    update_draft_if_needed: bool | None = None


class WorkflowSchemeAssociationsScheme(ApiModel):
    project_ids: list[str] | None = None
    workflow_scheme: WorkflowSchemeScheme | None = None


class WorkflowSchemeAssociationPageScheme(ApiModel):
    values: list[WorkflowSchemeAssociationsScheme] | None = None


class WorkflowSchemeIssueTypeScheme(ApiModel):
    issue_type: str | None = None
    workflow: str | None = None


class WorkflowSchemeIssueTypePayloadScheme(ApiModel):
    issue_type: str | None = None
    workflow: str | None = None
    update_draft_if_needed: bool | None = None


class WorkflowMappingScheme(ApiModel):
    workflow: str | None = None
    issue_types: list[str] | None = None
    default_mapping: bool | None = None
    update_draft_if_needed: bool | None = None
