"""
Authentication module interfaces.

Other modules should depend on these protocols, not on the concrete
codec and hasher, so tests can swap them out.
"""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class ITokenCodec(Protocol):
    """Issues and verifies bearer tokens."""

    def issue(self, subject: str) -> str:
        """
        Issue a signed token whose identity claim is ``subject``.

        Args:
            subject: User ID

        Returns:
            Opaque token string
        """
        ...

    def verify(self, token: Optional[str]) -> str:
        """
        Verify a token and return its identity claim.

        Raises:
            InvalidTokenError: If the token is absent, malformed or forged
            ExpiredTokenError: If the token is past its expiry
        """
        ...


@runtime_checkable
class IPasswordHasher(Protocol):
    """One-way password hashing."""

    def hash(self, password: str) -> str:
        ...

    def verify(self, password: str, stored_hash: Optional[str]) -> bool:
        ...
