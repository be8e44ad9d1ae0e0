"""
Base exception classes for the Platewise backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to one HTTP status code.
"""

from typing import Optional, Any


class PlatewiseError(Exception):
    """
    Base exception for all Platewise errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logs and internal APIs."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(PlatewiseError):
    """Resource not found."""

    pass


class ValidationError(PlatewiseError):
    """
    Input validation failed.

    Carries every violation found, not just the first one.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[list[dict[str, Any]]] = None,
        code: Optional[str] = None,
    ):
        super().__init__(message, code=code, details={"errors": errors or []})
        self.errors = errors or []


class AuthenticationError(PlatewiseError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(PlatewiseError):
    """Authorization failed (insufficient permissions)."""

    pass


class ConflictError(PlatewiseError):
    """The request conflicts with existing state (e.g. duplicate registration)."""

    pass


class ExternalServiceError(PlatewiseError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class DatabaseError(ExternalServiceError):
    """A Supabase/PostgREST request failed. ``db_code`` is the Postgres SQLSTATE, if any."""

    def __init__(self, message: str, db_code: Optional[str] = None):
        super().__init__(
            message,
            service="supabase",
            code="DATABASE_ERROR",
            details={"db_code": db_code},
        )
        self.db_code = db_code
