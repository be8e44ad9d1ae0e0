"""Password hashing and verification."""

from typing import Optional

from argon2 import PasswordHasher as _Argon2Hasher, exceptions as argon_exc


class PasswordHasher:
    """Argon2id hashing for account passwords."""

    def __init__(self) -> None:
        self._ph = _Argon2Hasher()

    def hash(self, password: str) -> str:
        return self._ph.hash(password)

    def verify(self, password: str, stored_hash: Optional[str]) -> bool:
        if not stored_hash:
            return False
        try:
            return self._ph.verify(stored_hash, password)
        except (argon_exc.VerificationError, argon_exc.InvalidHashError):
            return False
