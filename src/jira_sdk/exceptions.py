"""Exceptions raised by the Jira SDK.

Validation errors are raised before any request is built. Each one has a
fixed message so callers can match on the class or on the text.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.response import ResponseScheme


class JiraSDKError(Exception):
    """Base class for every error raised by the SDK."""


class JiraValidationError(JiraSDKError, ValueError):
    """A required parameter was missing or empty."""

    message = "jira: invalid parameters"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class NoVersionProvidedError(JiraValidationError):
    message = "jira: no module version set"


class NoSiteError(JiraValidationError):
    message = "jira: no atlassian site set"


class NoIssueKeyOrIDError(JiraValidationError):
    message = "jira: no issue key/id set"


class NoCommentIDError(JiraValidationError):
    message = "jira: no comment id set"


class NoFilterIDError(JiraValidationError):
    message = "jira: no filter id set"


class NoAccountIDError(JiraValidationError):
    message = "jira: no account id set"


class NoPermissionGrantIDError(JiraValidationError):
    message = "jira: no permission grant id set"


class NoPermissionSchemeIDError(JiraValidationError):
    message = "jira: no permission scheme id set"


class NoPermissionKeysError(JiraValidationError):
    message = "jira: no permission keys set"


class NoWorklogIDError(JiraValidationError):
    message = "jira: no worklog id set"


class NoWorklogsError(JiraValidationError):
    message = "jira: no worklog's id set"


class NoProjectIDOrKeyError(JiraValidationError):
    message = "jira: no project id or key set"


class NoProjectCategoryIDError(JiraValidationError):
    message = "jira: no project category id set"


class NoProjectRoleIDError(JiraValidationError):
    message = "jira: no project role id set"


class NoProjectFeatureKeyError(JiraValidationError):
    message = "jira: no project feature key set"


class NoProjectFeatureStateError(JiraValidationError):
    message = "jira: no project state key set"


class NoProjectsError(JiraValidationError):
    message = "jira: no projects set"


class NoPropertyKeyError(JiraValidationError):
    message = "jira: no property key set"


class NoComponentIDError(JiraValidationError):
    message = "jira: no component id set"


class NoWorkflowSchemeIDError(JiraValidationError):
    message = "jira: no workflow scheme id set"


class NoIssueTypeIDError(JiraValidationError):
    message = "jira: no issue type id set"


class NoGroupNameError(JiraValidationError):
    message = "jira: no group name set"


class NoDashboardIDError(JiraValidationError):
    message = "jira: no dashboard id set"


class NoApplicationRoleError(JiraValidationError):
    message = "jira: no application role key set"


class NoLinkTypeIDError(JiraValidationError):
    message = "jira: no link type id set"


class NoRemoteLinkIDError(JiraValidationError):
    message = "jira: no remote link id set"


class NoRemoteLinkGlobalIDError(JiraValidationError):
    message = "jira: no global remote link id set"


class NoNotificationSchemeIDError(JiraValidationError):
    message = "jira: no notification scheme id set"


class NoNotificationIDError(JiraValidationError):
    message = "jira: no notification id set"


class NoKeyError(JiraValidationError):
    message = "jira: no key set"


class NoPropertyValueError(JiraValidationError):
    message = "jira: no property value set"


class NoTransitionIDError(JiraValidationError):
    message = "jira: no transition id set"


class NoJQLError(JiraValidationError):
    message = "jira: no jql set"


class NoIssuesError(JiraValidationError):
    message = "jira: no issues set"


class NoAccountSliceError(JiraValidationError):
    message = "jira: no account id's set"


class NoFieldIDError(JiraValidationError):
    message = "jira: no field id set"


class NoCustomFieldError(JiraValidationError):
    message = "jira: no custom field set"


class NoOperatorError(JiraValidationError):
    message = "jira: no update operation set"


class JiraRequestError(JiraSDKError):
    """The HTTP request could not be built (bad endpoint or payload)."""


class JiraDecodeError(JiraSDKError):
    """The response body could not be decoded into the requested type."""

    def __init__(self, message: str, response: "ResponseScheme") -> None:
        super().__init__(message)
        self.response = response


class JiraHTTPError(JiraSDKError):
    """Jira answered with a non-success status code.

    The full response envelope is kept on ``response`` so callers can read
    the error body Jira sent back.
    """

    message = "invalid http response status, please refer the response.body for more details"

    def __init__(self, response: "ResponseScheme", message: str | None = None) -> None:
        super().__init__(
            f"{message or self.message} "
            f"({response.method} {response.endpoint} -> {response.code})"
        )
        self.response = response

    @property
    def status_code(self) -> int:
        return self.response.code


class InvalidStatusCodeError(JiraHTTPError):
    pass


class BadRequestError(JiraHTTPError):
    message = "atlassian invalid payload"


class UnauthorizedError(JiraHTTPError):
    message = "atlassian insufficient permissions"


class NotFoundError(JiraHTTPError):
    message = "no atlassian resource found"


class InternalError(JiraHTTPError):
    message = "atlassian internal error"


def http_error_for(response: "ResponseScheme") -> JiraHTTPError:
    """Pick the error class matching a non-success response."""
    code = response.code
    if code == 400:
        return BadRequestError(response)
    if code in (401, 403):
        return UnauthorizedError(response)
    if code == 404:
        return NotFoundError(response)
    if code >= 500:
        return InternalError(response)
    return InvalidStatusCodeError(response)
