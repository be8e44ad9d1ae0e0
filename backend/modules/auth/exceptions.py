"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers, which answer every one of them with the same 401 body.
"""

from shared.exceptions import AuthenticationError


class InvalidTokenError(AuthenticationError):
    """Raised when a token is absent, malformed, or its signature does not match."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a correctly signed token is past its expiry."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when the request carries no authorization credential."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidCredentialsError(AuthenticationError):
    """Raised when an email/password pair does not match an account."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials.", code="INVALID_CREDENTIALS")
