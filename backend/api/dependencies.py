"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations from settings.
"""

from typing import TYPE_CHECKING

from shared.config import get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import ITokenCodec, IPasswordHasher
    from modules.accounts.interfaces import IAccountService
    from modules.accounts.repository import UserRepository
    from modules.meals.interfaces import IMealService, IUploadBroker
    from modules.meals.repository import MealRepository


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._token_codec: "ITokenCodec | None" = None
        self._password_hasher: "IPasswordHasher | None" = None
        self._user_repository: "UserRepository | None" = None
        self._meal_repository: "MealRepository | None" = None
        self._upload_broker: "IUploadBroker | None" = None
        self._account_service: "IAccountService | None" = None
        self._meal_service: "IMealService | None" = None

    @property
    def token_codec(self) -> "ITokenCodec":
        """Get the token codec, signing with the configured secret."""
        if self._token_codec is None:
            from modules.auth.tokens import TokenCodec
            settings = get_settings()
            self._token_codec = TokenCodec(
                settings.jwt_secret,
                ttl_seconds=settings.access_token_ttl_seconds,
            )
        return self._token_codec

    @property
    def password_hasher(self) -> "IPasswordHasher":
        if self._password_hasher is None:
            from modules.auth.passwords import PasswordHasher
            self._password_hasher = PasswordHasher()
        return self._password_hasher

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.accounts.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def meal_repository(self) -> "MealRepository":
        if self._meal_repository is None:
            from modules.meals.repository import MealRepository
            from shared.database import get_supabase_client
            self._meal_repository = MealRepository(get_supabase_client())
        return self._meal_repository

    @property
    def upload_broker(self) -> "IUploadBroker":
        """Get the S3 upload broker for the configured bucket."""
        if self._upload_broker is None:
            from modules.meals.storage import S3UploadBroker
            from shared.storage import get_s3_client
            settings = get_settings()
            self._upload_broker = S3UploadBroker(
                get_s3_client(),
                bucket=settings.uploads_bucket,
                expires_in=settings.upload_url_expires_in,
            )
        return self._upload_broker

    @property
    def accounts(self) -> "IAccountService":
        """Get the account service instance."""
        if self._account_service is None:
            from modules.accounts.service import AccountService
            self._account_service = AccountService(
                repository=self.user_repository,
                tokens=self.token_codec,
                passwords=self.password_hasher,
            )
        return self._account_service

    @property
    def meals(self) -> "IMealService":
        """Get the meal service instance."""
        if self._meal_service is None:
            from modules.meals.service import MealService
            self._meal_service = MealService(
                repository=self.meal_repository,
                broker=self.upload_broker,
            )
        return self._meal_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._token_codec = None
        self._password_hasher = None
        self._user_repository = None
        self._meal_repository = None
        self._upload_broker = None
        self._account_service = None
        self._meal_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container with new
    service instances. Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_token_codec() -> "ITokenCodec":
    """FastAPI dependency for the token codec."""
    return get_container().token_codec


def get_account_service() -> "IAccountService":
    """FastAPI dependency for account service."""
    return get_container().accounts


def get_meal_service() -> "IMealService":
    """FastAPI dependency for meal service."""
    return get_container().meals
