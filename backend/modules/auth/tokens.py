"""
Bearer token codec.

Issues and verifies HS256 access tokens carrying the user ID as ``sub``.
Tokens are never stored: a token is valid for its whole lifetime and there
is no revocation list.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from shared.config import DEFAULT_ACCESS_TOKEN_TTL_SECONDS

from .exceptions import ExpiredTokenError, InvalidTokenError
from .models import TokenPayload

ALGORITHM = "HS256"


class TokenCodec:
    """
    Signs identity claims into access tokens and reverses the process.

    The signing secret is injected so tests can run with their own.
    """

    def __init__(self, secret: str, ttl_seconds: int = DEFAULT_ACCESS_TOKEN_TTL_SECONDS):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        if ttl_seconds <= 0:
            raise ValueError("Token TTL must be positive")
        self._secret = secret
        self._ttl = timedelta(seconds=ttl_seconds)

    @property
    def ttl_seconds(self) -> int:
        return int(self._ttl.total_seconds())

    def issue(self, subject: str, issued_at: Optional[datetime] = None) -> str:
        """
        Issue a signed token for ``subject``.

        Args:
            subject: The user ID to embed
            issued_at: Issue time, defaults to now (UTC)

        Returns:
            Encoded JWT string
        """
        if not subject:
            raise ValueError("Token subject must not be empty")

        issued_at = issued_at or datetime.now(timezone.utc)
        payload = {
            "sub": subject,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def decode(self, token: Optional[str]) -> TokenPayload:
        """
        Verify ``token`` and return its claims.

        Raises:
            InvalidTokenError: Absent, malformed, badly signed, or missing claims
            ExpiredTokenError: Signature is valid but ``exp`` has passed
        """
        if not token:
            raise InvalidTokenError("Access token not provided")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": ["sub", "iat", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))

        return TokenPayload(**payload)

    def verify(self, token: Optional[str]) -> str:
        """Verify ``token`` and return the identity claim it carries."""
        return self.decode(token).sub
