"""
API exceptions.

Every expected failure a route can produce is an APIError subclass carrying
its HTTP status. The registered handler (app.core.error_handlers) renders
them into the standard envelope:

    {"success": false, "message": "...", "errors": [...]}
"""

from typing import List, Optional


class APIError(Exception):
    """Base class for errors rendered as structured JSON responses."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[str]] = None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"success": False, "message": self.message}
        if self.errors is not None:
            body["errors"] = self.errors
        return body


class ValidationError(APIError):
    """Client payload or query failed structural validation."""
    status_code = 400
    default_message = "Validation error"

    def __init__(self, errors: List[str], message: Optional[str] = None):
        super().__init__(message, errors=list(errors))


class ConflictError(APIError):
    """Unique value already taken (e.g. e-mail on registration)."""
    status_code = 400
    default_message = "Resource already exists"


class UnauthenticatedError(APIError):
    """Missing, invalid or expired credentials."""
    status_code = 401
    default_message = "Access token required"


class ForbiddenError(APIError):
    """Authenticated, but not allowed to perform the action."""
    status_code = 403
    default_message = "Insufficient permissions"


class NotFoundError(APIError):
    status_code = 404
    default_message = "Not found"


class InternalError(APIError):
    """Storage or unexpected failure. Detail is only exposed in development."""
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, detail: Optional[str] = None, expose_detail: bool = False):
        super().__init__()
        self.detail = detail
        self.expose_detail = expose_detail

    def to_dict(self) -> dict:
        body = super().to_dict()
        if self.expose_detail and self.detail:
            body["error"] = self.detail
        return body
