"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the row-to-model mapping convention.
"""

import logging
from typing import Any, TypeVar, Generic

from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import DatabaseError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Postgres SQLSTATE for a unique constraint violation
UNIQUE_VIOLATION = "23505"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Subclasses set ``table`` and implement domain-specific data access
    methods, mapping rows to Pydantic models internally. Queries go
    through ``_execute`` so PostgREST failures surface as DatabaseError.

    Example:
        class MealRepository(BaseRepository[Meal]):
            table = "meals"

            def get_by_id(self, meal_id: str) -> Optional[Meal]:
                result = self._execute(self._table().select("*").eq("id", meal_id))
                if not result.data:
                    return None
                return self._map_to_meal(result.data[0])
    """

    table: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _table(self) -> Any:
        """Query builder for this repository's table."""
        return self._db.table(self.table)

    def _execute(self, query: Any) -> Any:
        """
        Run a built query.

        Raises:
            DatabaseError: If PostgREST rejects the request
        """
        try:
            return query.execute()
        except APIError as e:
            logger.error("Query on %s failed: %s (%s)", self.table, e.message, e.code)
            raise DatabaseError("Database request failed.", db_code=e.code) from e

    def _insert_one(self, data: dict[str, Any]) -> dict[str, Any]:
        """Insert a single row and return it as stored (with generated columns)."""
        result = self._execute(self._table().insert(data))
        return result.data[0]
