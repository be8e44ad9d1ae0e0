"""
Object storage client factory for S3.

Credentials come from the standard AWS chain (environment, shared config,
or the Lambda execution role).
"""

from typing import Any, Optional

import boto3

from .config import get_settings

# Module-level client cache
_s3_client: Optional[Any] = None


def get_s3_client() -> Any:
    """
    Get a cached S3 client bound to the configured region.

    Raises:
        RuntimeError: If no uploads bucket is configured
    """
    global _s3_client

    if _s3_client is None:
        settings = get_settings()
        if not settings.uploads_bucket:
            raise RuntimeError(
                "Upload storage configuration missing. "
                "Set the UPLOADS_BUCKET environment variable."
            )
        kwargs: dict[str, Any] = {}
        if settings.aws_region:
            kwargs["region_name"] = settings.aws_region
        if settings.s3_endpoint_url:
            kwargs["endpoint_url"] = settings.s3_endpoint_url
        _s3_client = boto3.client("s3", **kwargs)

    return _s3_client


def reset_s3_client_cache() -> None:
    """Reset the cached S3 client."""
    global _s3_client
    _s3_client = None
