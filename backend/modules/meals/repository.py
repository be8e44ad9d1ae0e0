"""
Meal repository for database access.

Encapsulates Supabase queries and row mapping for the ``meals`` table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Meal, MealInputType, MealStatus


class MealRepository(BaseRepository[Meal]):
    """
    Repository for meal data access.

    Note: ownership filtering happens here by ``user_id``, but the service
    decides what a missing row means to the caller.
    """

    table = "meals"

    def create_pending(
        self,
        user_id: str,
        input_file_key: str,
        input_type: MealInputType,
    ) -> Meal:
        """
        Insert a meal waiting for its upload.

        Args:
            user_id: Owner of the meal.
            input_file_key: S3 key the client will upload to.
            input_type: audio or picture.

        Returns:
            The stored Meal with its generated ID.
        """
        row = self._insert_one({
            "user_id": user_id,
            "input_file_key": input_file_key,
            "input_type": input_type.value,
            "status": MealStatus.UPLOADING.value,
            "icon": "",
            "name": "",
            "foods": [],
        })
        return self._map_to_meal(row)

    def get_for_user(self, meal_id: str, user_id: str) -> Optional[Meal]:
        """Get a meal by ID, only if ``user_id`` owns it."""
        result = self._execute(
            self._table()
            .select("*")
            .eq("id", meal_id)
            .eq("user_id", user_id)
        )
        if not result.data:
            return None
        return self._map_to_meal(result.data[0])

    def _map_to_meal(self, data: dict[str, Any]) -> Meal:
        """Map database row to Meal model."""
        return Meal(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            status=data["status"],
            input_type=MealInputType(data["input_type"]),
            input_file_key=data["input_file_key"],
            name=data.get("name") or "",
            icon=data.get("icon") or "",
            foods=data.get("foods") or [],
            created_at=data.get("created_at"),
        )
