"""Tests for the users repository."""

from datetime import date
import pytest
from unittest.mock import MagicMock

from postgrest.exceptions import APIError

from modules.accounts.exceptions import EmailAlreadyRegisteredError
from modules.accounts.models import DailyGoals, Goal, SignUpRequest
from modules.accounts.repository import UserRepository
from shared.exceptions import DatabaseError


def create_mock_user_row(user_id: str = "user-1") -> dict:
    return {
        "id": user_id,
        "name": "Ana",
        "email": "ana@example.com",
        "password": "$argon2id$...",
        "goal": "lose",
        "gender": "female",
        "birth_date": "1995-01-01",
        "height": 165.0,
        "weight": 60.0,
        "activity_level": 2,
        "calories": 1500,
        "proteins": 132,
        "carbohydrates": 150,
        "fats": 42,
        "created_at": "2025-01-01T00:00:00+00:00",
    }


def make_sign_up_request() -> SignUpRequest:
    return SignUpRequest.model_validate({
        "goal": "lose",
        "gender": "female",
        "birthDate": "1995-01-01",
        "height": 165,
        "weight": 60,
        "activityLevel": 2,
        "account": {"name": "Ana", "email": "ana@example.com", "password": "longenough"},
    })


class TestUserRepository:
    def test_email_exists(self, mock_db: MagicMock):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value.data = [{"email": "ana@example.com"}]

        assert UserRepository(mock_db).email_exists("ana@example.com") is True
        mock_db.table.assert_called_with("users")
        mock_db.table.return_value.select.assert_called_with("email")

    def test_email_does_not_exist(self, mock_db: MagicMock):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value.data = []

        assert UserRepository(mock_db).email_exists("new@example.com") is False

    def test_get_by_email_maps_row(self, mock_db: MagicMock):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value.data = [create_mock_user_row()]

        user = UserRepository(mock_db).get_by_email("ana@example.com")

        assert user.id == "user-1"
        assert user.goal == Goal.LOSE
        assert user.birth_date == date(1995, 1, 1)
        assert user.password == "$argon2id$..."

    def test_get_by_id_missing(self, mock_db: MagicMock):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = []

        assert UserRepository(mock_db).get_by_id("nope") is None

    def test_create_inserts_flattened_row(self, mock_db: MagicMock):
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [
            create_mock_user_row()
        ]
        request = make_sign_up_request()
        goals = DailyGoals(calories=1500, proteins=132, carbohydrates=150, fats=42)

        user = UserRepository(mock_db).create(request, password_hash="$argon2id$...", goals=goals)

        inserted = mock_db.table.return_value.insert.call_args.args[0]
        assert inserted == {
            "name": "Ana",
            "email": "ana@example.com",
            "password": "$argon2id$...",
            "goal": "lose",
            "gender": "female",
            "birth_date": "1995-01-01",
            "height": 165.0,
            "weight": 60.0,
            "activity_level": 2,
            "calories": 1500,
            "proteins": 132,
            "carbohydrates": 150,
            "fats": 42,
        }
        assert "longenough" not in inserted.values()
        assert user.id == "user-1"

    def test_create_duplicate_email_is_conflict(self, mock_db: MagicMock):
        """A sign-up that lost the race to the unique index is a conflict."""
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"code": "23505", "message": 'duplicate key value violates unique constraint "users_email_key"'}
        )
        goals = DailyGoals(calories=1500, proteins=132, carbohydrates=150, fats=42)

        with pytest.raises(EmailAlreadyRegisteredError):
            UserRepository(mock_db).create(make_sign_up_request(), password_hash="h", goals=goals)

    def test_create_other_failure_is_database_error(self, mock_db: MagicMock):
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"code": "08006", "message": "connection failure"}
        )
        goals = DailyGoals(calories=1500, proteins=132, carbohydrates=150, fats=42)

        with pytest.raises(DatabaseError):
            UserRepository(mock_db).create(make_sign_up_request(), password_hash="h", goals=goals)
