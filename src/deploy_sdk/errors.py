"""SDK error types."""

from __future__ import annotations


class DeploySDKError(RuntimeError):
    """Base SDK error."""


class APIUnavailableError(DeploySDKError):
    """Platform API could not be reached."""


class APIRequestError(APIUnavailableError):
    """Platform API returned a structured HTTP error response."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        code: str | None = None,
        body: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.body = body or {}


class NotAuthorized(DeploySDKError):
    """Token has no access to the requested account or team."""

    code = "NOT_AUTHORIZED"


class TeamDeleted(DeploySDKError):
    """The configured team no longer exists."""

    code = "TEAM_DELETED"
