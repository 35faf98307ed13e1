from typing import Any, Mapping, Optional


class PlatePilotError(Exception):
    """Base class for errors surfaced to API clients.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, upstream info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Unexpected error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(PlatePilotError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_message = "Invalid input"


class NotFoundError(PlatePilotError):
    """Raised when a requested meal, planner day or grocery item does not exist."""

    http_status = 404
    default_message = "Not found"


class ExternalServiceError(PlatePilotError):
    """Raised when the upstream recipe API fails or returns something unusable."""

    http_status = 502
    default_message = "Upstream service error"
