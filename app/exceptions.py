from typing import Any, Mapping, Optional


class ServiceError(Exception):
    """Base class for every failure the service layer reports to callers.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context
        code: machine-readable error code (defaults to the class ``default_code``)
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_code = "SERVICE_ERROR"
    default_message = "Service error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(ServiceError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_code = "SERVICE_VALIDATION_ERROR"
    default_message = "Invalid input"


class UnauthenticatedError(ServiceError):
    """Raised when the session token is missing or does not resolve to a user."""

    http_status = 401
    default_code = "UNAUTHENTICATED"
    default_message = "Invalid or expired session"


class UnauthorizedError(ServiceError):
    """Raised when a mutation targets a meal the caller does not own.

    A meal that does not exist at all produces the same error, so callers
    cannot probe for other users' meal ids.
    """

    http_status = 403
    default_code = "UNAUTHORIZED"
    default_message = "Unauthorized"


class NotFoundError(ServiceError):
    """Raised when a requested resource was not found."""

    http_status = 404
    default_code = "NOT_FOUND"
    default_message = "Not found"


class AlreadyExistsError(ServiceError):
    """Raised when a resource conflict occurs (duplicate email)."""

    http_status = 409
    default_code = "ALREADY_EXISTS"
    default_message = "Already exists"
