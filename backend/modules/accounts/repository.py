"""
User repository for database access.

Encapsulates Supabase queries and row mapping for the ``users`` table.
"""

from typing import Any, Optional

from shared.exceptions import DatabaseError
from shared.repository import BaseRepository, UNIQUE_VIOLATION

from .exceptions import EmailAlreadyRegisteredError
from .models import DailyGoals, SignUpRequest, UserRecord


class UserRepository(BaseRepository[UserRecord]):
    """Repository for user accounts."""

    table = "users"

    def email_exists(self, email: str) -> bool:
        """Whether an account already uses ``email``."""
        result = self._execute(self._table().select("email").eq("email", email).limit(1))
        return bool(result.data)

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        result = self._execute(self._table().select("*").eq("email", email).limit(1))
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        result = self._execute(self._table().select("*").eq("id", user_id))
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def create(
        self,
        request: SignUpRequest,
        password_hash: str,
        goals: DailyGoals,
    ) -> UserRecord:
        """
        Insert a new user.

        Args:
            request: Validated sign-up data.
            password_hash: Hash of the account password (never the plain text).
            goals: Computed daily targets.

        Returns:
            The stored user with its generated ID.

        Raises:
            EmailAlreadyRegisteredError: If the email was taken since the
                caller last checked (the unique index decides)
        """
        try:
            row = self._insert_one({
                "name": request.account.name,
                "email": request.account.email,
                "password": password_hash,
                "goal": request.goal.value,
                "gender": request.gender.value,
                "birth_date": request.birth_date.isoformat(),
                "height": request.height,
                "weight": request.weight,
                "activity_level": request.activity_level,
                **goals.model_dump(),
            })
        except DatabaseError as e:
            if e.db_code == UNIQUE_VIOLATION:
                raise EmailAlreadyRegisteredError(request.account.email) from e
            raise
        return self._map_to_user(row)

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        """Map database row to UserRecord model."""
        return UserRecord(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            password=data["password"],
            goal=data["goal"],
            gender=data["gender"],
            birth_date=data["birth_date"],
            height=data["height"],
            weight=data["weight"],
            activity_level=data["activity_level"],
            calories=data.get("calories") or 0,
            proteins=data.get("proteins") or 0,
            carbohydrates=data.get("carbohydrates") or 0,
            fats=data.get("fats") or 0,
            created_at=data.get("created_at"),
        )
