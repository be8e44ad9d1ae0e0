"""
Accounts module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when signing up with an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "This email is already registered.",
            code="EMAIL_ALREADY_REGISTERED",
            details={"email": email},
        )


class UserNotFoundError(NotFoundError):
    """Raised when a token's user no longer exists."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found.",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )
