"""
Authentication module.

Handles access token issuing/verification, the protected request gate,
and password hashing.

Public API:
- TokenCodec: Issue and verify bearer tokens
- resolve / parse_authorization: The protected request gate
- PasswordHasher: Argon2 password hashing
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import ITokenCodec, IPasswordHasher
from .models import (
    AccessTokenResponse,
    AuthenticatedRequest,
    AuthorizationCredentials,
    HttpRequest,
    TokenPayload,
)
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    InvalidCredentialsError,
)
from .passwords import PasswordHasher
from .resolver import parse_authorization, resolve
from .tokens import TokenCodec

__all__ = [
    # Interfaces
    "ITokenCodec",
    "IPasswordHasher",
    # Implementations
    "TokenCodec",
    "PasswordHasher",
    "parse_authorization",
    "resolve",
    # Models
    "AccessTokenResponse",
    "AuthenticatedRequest",
    "AuthorizationCredentials",
    "HttpRequest",
    "TokenPayload",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
]
