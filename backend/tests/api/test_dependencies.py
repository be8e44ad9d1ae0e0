"""Tests for the service container wiring."""

import pytest
from unittest.mock import MagicMock, patch

from api.dependencies import (
    get_account_service,
    get_container,
    get_meal_service,
    get_token_codec,
    reset_container,
)
from modules.accounts.service import AccountService
from modules.auth.passwords import PasswordHasher
from modules.auth.tokens import TokenCodec
from modules.meals.service import MealService
from modules.meals.storage import S3UploadBroker


@pytest.fixture
def settings():
    with patch("api.dependencies.get_settings") as mock_settings:
        mock_settings.return_value.jwt_secret = "container-test-secret-that-is-long-enough"
        mock_settings.return_value.access_token_ttl_seconds = 120
        mock_settings.return_value.uploads_bucket = "uploads"
        mock_settings.return_value.upload_url_expires_in = 300
        yield mock_settings.return_value


@pytest.fixture
def clients():
    with patch("shared.database.get_supabase_client") as db, \
         patch("shared.storage.get_s3_client") as s3:
        db.return_value = MagicMock(name="supabase")
        s3.return_value = MagicMock(name="s3")
        yield db.return_value, s3.return_value


class TestServiceContainer:
    def test_container_is_singleton(self):
        assert get_container() is get_container()

    def test_reset_container(self):
        first = get_container()
        reset_container()
        assert get_container() is not first

    def test_token_codec_uses_settings(self, settings):
        codec = get_token_codec()

        assert isinstance(codec, TokenCodec)
        assert codec.ttl_seconds == 120
        assert codec.verify(codec.issue("user-1")) == "user-1"
        assert get_token_codec() is codec

    def test_account_service_wiring(self, settings, clients):
        service = get_account_service()

        assert isinstance(service, AccountService)
        assert isinstance(get_container().password_hasher, PasswordHasher)
        assert get_container().user_repository._db is clients[0]

    def test_meal_service_wiring(self, settings, clients):
        service = get_meal_service()
        broker = get_container().upload_broker

        assert isinstance(service, MealService)
        assert isinstance(broker, S3UploadBroker)
        assert broker._bucket == "uploads"
        assert broker._expires_in == 300
        assert get_container().meal_repository._db is clients[0]

    def test_missing_secret_fails_on_first_use(self, settings):
        settings.jwt_secret = ""

        with pytest.raises(ValueError):
            get_token_codec()
