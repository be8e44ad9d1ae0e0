"""
Centralized configuration for the Platewise backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., SUPABASE_*, AWS_*).
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

# Access tokens stay valid for three days
DEFAULT_ACCESS_TOKEN_TTL_SECONDS = 3 * 24 * 60 * 60


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Platewise API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server (local development only; production runs behind API Gateway)
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:8081", "http://localhost:19006"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # Access tokens
    jwt_secret: str = ""
    access_token_ttl_seconds: int = DEFAULT_ACCESS_TOKEN_TTL_SECONDS

    # Uploads (S3)
    aws_region: Optional[str] = None
    uploads_bucket: str = ""
    upload_url_expires_in: int = 600
    s3_endpoint_url: Optional[str] = None


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
