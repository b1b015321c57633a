"""
S3ObjectStorage tests. Presigning is local computation, so these run
offline with dummy credentials.
"""

from unittest.mock import MagicMock
from urllib.parse import parse_qs, urlparse

import pytest
from botocore.exceptions import ClientError

from invitapp.adapter.services.s3_storage import S3ObjectStorage, public_s3_url
from invitapp.app.services.object_storage import StorageError


def _storage(region: str = "eu-west-1") -> S3ObjectStorage:
    return S3ObjectStorage(
        bucket="invites-bucket",
        region=region,
        access_key_id="AKIAEXAMPLEKEY",
        secret_access_key="example-secret",
    )


def test_public_url_is_pure_function_of_bucket_region_key():
    assert (
        public_s3_url("b", "eu-west-1", "invitations/1-ab-a.jpg")
        == "https://b.s3.eu-west-1.amazonaws.com/invitations/1-ab-a.jpg"
    )
    assert (
        public_s3_url("b", "us-east-1", "invitations/1-ab-a.jpg")
        == "https://b.s3.amazonaws.com/invitations/1-ab-a.jpg"
    )


@pytest.mark.asyncio
async def test_presign_put_encodes_expiry_and_key():
    storage = _storage()
    key = "invitations/1700000000000-0a1b2c3d-a.jpg"

    url = await storage.presign_put(key, "image/jpeg", 3600)

    parsed = urlparse(url)
    query = parse_qs(parsed.query)
    assert query["X-Amz-Expires"] == ["3600"]
    assert query["X-Amz-Algorithm"] == ["AWS4-HMAC-SHA256"]
    assert "X-Amz-Signature" in query
    assert key in parsed.path
    assert "invites-bucket" in url


@pytest.mark.asyncio
async def test_presign_put_uses_given_expiry():
    url = await _storage().presign_put("invitations/k.jpg", "image/jpeg", 60)

    assert parse_qs(urlparse(url).query)["X-Amz-Expires"] == ["60"]


@pytest.mark.asyncio
async def test_upload_file_sets_public_read(tmp_path):
    client = MagicMock()
    storage = S3ObjectStorage(bucket="invites-bucket", region="eu-west-1", client=client)
    path = tmp_path / "a.jpg"
    path.write_bytes(b"img")

    await storage.upload_file(str(path), "invitations/k.jpg", "image/jpeg")

    client.upload_file.assert_called_once_with(
        str(path),
        "invites-bucket",
        "invitations/k.jpg",
        ExtraArgs={"ContentType": "image/jpeg", "ACL": "public-read"},
    )


@pytest.mark.asyncio
async def test_upload_file_wraps_client_errors(tmp_path):
    client = MagicMock()
    client.upload_file.side_effect = ClientError(
        {"Error": {"Code": "AccessDenied", "Message": "Access Denied"}}, "PutObject"
    )
    storage = S3ObjectStorage(bucket="invites-bucket", region="eu-west-1", client=client)

    with pytest.raises(StorageError):
        await storage.upload_file(str(tmp_path / "a.jpg"), "invitations/k.jpg", "image/jpeg")
