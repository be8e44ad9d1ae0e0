"""Tests for the presigned upload broker."""

import pytest
from unittest.mock import MagicMock

from botocore.exceptions import ClientError, NoCredentialsError

from modules.meals.exceptions import UploadCapabilityUnavailableError
from modules.meals.models import MediaKind
from modules.meals.storage import S3UploadBroker, build_storage_key


def make_client(url: str = "https://uploads.s3.amazonaws.com/signed") -> MagicMock:
    client = MagicMock()
    client.generate_presigned_url.return_value = url
    return client


class TestBuildStorageKey:
    @pytest.mark.parametrize(
        "kind, extension",
        [(MediaKind.AUDIO, ".m4a"), (MediaKind.IMAGE, ".jpeg")],
    )
    def test_extension_matches_kind(self, kind, extension):
        assert build_storage_key(kind).endswith(extension)

    def test_keys_are_unique(self):
        keys = {build_storage_key(MediaKind.IMAGE) for _ in range(200)}
        assert len(keys) == 200


class TestS3UploadBroker:
    @pytest.mark.asyncio
    async def test_presigns_put_for_new_key(self):
        client = make_client()
        broker = S3UploadBroker(client, bucket="meal-uploads")

        capability = await broker.issue_upload_capability(MediaKind.IMAGE)

        client.generate_presigned_url.assert_called_once_with(
            "put_object",
            Params={
                "Bucket": "meal-uploads",
                "Key": capability.storage_key,
                "ContentType": "image/jpeg",
            },
            ExpiresIn=600,
        )
        assert capability.upload_url == "https://uploads.s3.amazonaws.com/signed"
        assert capability.storage_key.endswith(".jpeg")
        assert capability.expires_in == 600
        assert capability.method == "PUT"

    @pytest.mark.asyncio
    async def test_custom_expiry(self):
        client = make_client()
        broker = S3UploadBroker(client, bucket="b", expires_in=60)

        capability = await broker.issue_upload_capability(MediaKind.AUDIO)

        assert client.generate_presigned_url.call_args.kwargs["ExpiresIn"] == 60
        assert capability.expires_in == 60
        assert capability.storage_key.endswith(".m4a")

    @pytest.mark.asyncio
    async def test_never_reuses_a_key(self):
        broker = S3UploadBroker(make_client(), bucket="b")

        first = await broker.issue_upload_capability(MediaKind.IMAGE)
        second = await broker.issue_upload_capability(MediaKind.IMAGE)

        assert first.storage_key != second.storage_key

    @pytest.mark.asyncio
    async def test_missing_credentials_is_unavailable(self):
        client = MagicMock()
        client.generate_presigned_url.side_effect = NoCredentialsError()
        broker = S3UploadBroker(client, bucket="b")

        with pytest.raises(UploadCapabilityUnavailableError) as exc_info:
            await broker.issue_upload_capability(MediaKind.IMAGE)

        assert exc_info.value.service == "s3"
        assert exc_info.value.code == "UPLOAD_CAPABILITY_UNAVAILABLE"

    @pytest.mark.asyncio
    async def test_client_error_is_unavailable(self):
        client = MagicMock()
        client.generate_presigned_url.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "denied"}},
            "PutObject",
        )
        broker = S3UploadBroker(client, bucket="b")

        with pytest.raises(UploadCapabilityUnavailableError):
            await broker.issue_upload_capability(MediaKind.AUDIO)
