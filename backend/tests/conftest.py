"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from api.dependencies import reset_container
from modules.auth.tokens import TokenCodec


# Test signing secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def token_codec() -> TokenCodec:
    """Token codec signing with the test secret."""
    return TokenCodec(TEST_JWT_SECRET, ttl_seconds=3600)


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def auth_token(token_codec: TokenCodec, test_user_id: str) -> str:
    """Create a valid auth token for testing."""
    return token_codec.issue(test_user_id)


@pytest.fixture
def expired_token(token_codec: TokenCodec, test_user_id: str) -> str:
    """A correctly signed token whose expiry passed an hour ago."""
    issued_at = datetime.now(timezone.utc) - timedelta(hours=2)
    return token_codec.issue(test_user_id, issued_at=issued_at)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def mock_db() -> MagicMock:
    """A Supabase client double; configure ``table(...)`` chains per test."""
    return MagicMock()
