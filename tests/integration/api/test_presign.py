from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient

from tests.fixtures.app_config import API


@pytest.mark.asyncio
async def test_presign_upload(client: AsyncClient, login, fake_storage):
    """Pre-signed upload grant

    Given I am logged in and object storage is configured
    When I ask for a grant for "foto boda.jpg"
    Then I get a PUT URL valid for one hour
    And a key under the invitations prefix with the sanitized name
    And the public URL the object will have once uploaded
    """
    headers = await login(client)

    response = await client.post(
        f"{API}/s3/presign",
        json={"filename": "foto boda.jpg", "contentType": "image/jpeg"},
        headers=headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["key"].startswith("invitations/")
    assert data["key"].endswith("-fotoboda.jpg")
    assert "X-Amz-Expires=3600" in data["url"]
    assert data["publicUrl"] == fake_storage.public_url(data["key"])
    assert data["expiresIn"] == 3600

    expires_at = datetime.fromisoformat(data["expiresAt"].replace("Z", "+00:00"))
    remaining = expires_at - datetime.now(timezone.utc)
    assert timedelta(minutes=59) < remaining <= timedelta(hours=1)


@pytest.mark.asyncio
async def test_presign_without_storage(client_without_storage: AsyncClient, login):
    headers = await login(client_without_storage)

    response = await client_without_storage.post(
        f"{API}/s3/presign",
        json={"filename": "a.jpg", "contentType": "image/jpeg"},
        headers=headers,
    )

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "STORAGE_NOT_CONFIGURED"


@pytest.mark.asyncio
async def test_presign_rejects_empty_filename(client: AsyncClient, login):
    headers = await login(client)

    response = await client.post(
        f"{API}/s3/presign",
        json={"filename": "", "contentType": "image/jpeg"},
        headers=headers,
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_presign_rejects_malformed_content_type(client: AsyncClient, login):
    headers = await login(client)

    response = await client.post(
        f"{API}/s3/presign",
        json={"filename": "a.jpg", "contentType": "jpeg"},
        headers=headers,
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_presign_signing_failure(client: AsyncClient, login, fake_storage):
    headers = await login(client)
    fake_storage.fail_on = "a.jpg"

    response = await client.post(
        f"{API}/s3/presign",
        json={"filename": "a.jpg", "contentType": "image/jpeg"},
        headers=headers,
    )

    assert response.status_code == 502
    assert response.json()["error"]["code"] == "PRESIGN_FAILED"


@pytest.mark.asyncio
async def test_presign_requires_token(client: AsyncClient):
    response = await client.post(
        f"{API}/s3/presign", json={"filename": "a.jpg", "contentType": "image/jpeg"}
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_presign_long_filename_key_fits_s3_limit(client: AsyncClient, login):
    headers = await login(client)
    filename = "a" * 1020 + ".jpg"

    response = await client.post(
        f"{API}/s3/presign",
        json={"filename": filename, "contentType": "image/jpeg"},
        headers=headers,
    )

    assert response.status_code == 200
    key = response.json()["key"]
    assert len(key.encode("utf-8")) <= 1024
    assert key.startswith("invitations/")
    assert key.endswith(".jpg")
