"""
Presigned upload broker.

Media never passes through the API: the client receives a short-lived
PUT URL for one freshly generated S3 key and uploads there directly.
"""

import logging
import uuid
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import UploadCapabilityUnavailableError
from .models import MediaKind, UploadCapability

logger = logging.getLogger(__name__)

DEFAULT_EXPIRES_IN = 600


def build_storage_key(kind: MediaKind) -> str:
    """A new random object key carrying the extension for ``kind``."""
    return f"{uuid.uuid4()}{kind.extension}"


class S3UploadBroker:
    """
    Mints upload capabilities against an S3 bucket.

    Keys are never reused; the URL is valid for ``expires_in`` seconds
    whether or not anything is ever uploaded.
    """

    def __init__(self, client: Any, bucket: str, expires_in: int = DEFAULT_EXPIRES_IN):
        self._client = client
        self._bucket = bucket
        self._expires_in = expires_in

    async def issue_upload_capability(self, kind: MediaKind) -> UploadCapability:
        """
        Presign a PUT for a new object of the given kind.

        Raises:
            UploadCapabilityUnavailableError: If S3 credentials or config
                cannot produce a signed URL
        """
        key = build_storage_key(kind)

        try:
            url = self._client.generate_presigned_url(
                "put_object",
                Params={
                    "Bucket": self._bucket,
                    "Key": key,
                    "ContentType": kind.value,
                },
                ExpiresIn=self._expires_in,
            )
        except (BotoCoreError, ClientError) as e:
            logger.exception("Failed to presign upload for %s", key)
            raise UploadCapabilityUnavailableError(str(e)) from e

        logger.info("Issued upload capability for %s (expires in %ss)", key, self._expires_in)
        return UploadCapability(
            storage_key=key,
            upload_url=url,
            expires_in=self._expires_in,
        )
