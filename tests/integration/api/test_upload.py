import pytest
from httpx import AsyncClient

from tests.fixtures.app_config import API, TestConfig
from tests.utils.json_compare import gallery_names

FORM = {"title": "Quince Años", "host": "Familia Ruiz", "date": "2031-03-01", "time": "19:00"}


def _image(name: str):
    return ("gallery", (name, f"bytes of {name}".encode(), "image/jpeg"))


@pytest.mark.asyncio
async def test_upload_creates_invitation(client: AsyncClient, login, fake_storage):
    """Server-mediated upload

    Given I am logged in and object storage is configured
    When I post the invitation form with three images and a song
    Then every file is stored under a fresh key
    And the gallery lists the images in the order I sent them
    And musicUrl points at the stored song
    """
    headers = await login(client)

    response = await client.post(
        f"{API}/invitations/upload",
        data=FORM,
        files=[
            _image("a.jpg"),
            _image("b.jpg"),
            _image("c.jpg"),
            ("music", ("vals.mp3", b"ID3 data", "audio/mpeg")),
        ],
        headers=headers,
    )

    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "Quince Años"
    assert data["date"] == "2031-03-01"
    assert gallery_names(data) == ["a.jpg", "b.jpg", "c.jpg"]
    assert data["musicUrl"].endswith("-vals.mp3")

    assert len(fake_storage.uploaded_keys) == 4
    assert all(key.startswith("invitations/") for key in fake_storage.uploaded_keys)
    first_key = fake_storage.uploaded_keys[0]
    assert fake_storage.objects[first_key] == (b"bytes of a.jpg", "image/jpeg")
    assert data["gallery"][0]["url"] == fake_storage.public_url(first_key)


@pytest.mark.asyncio
async def test_upload_accepts_bracketed_gallery_field(client: AsyncClient, login):
    headers = await login(client)

    response = await client.post(
        f"{API}/invitations/upload",
        data={"title": "Boda"},
        files=[("gallery[]", ("x.png", b"png", "image/png"))],
        headers=headers,
    )

    assert response.status_code == 201
    assert gallery_names(response.json()) == ["x.png"]


@pytest.mark.asyncio
async def test_upload_without_files(client: AsyncClient, login):
    headers = await login(client)

    response = await client.post(
        f"{API}/invitations/upload",
        data={"title": "Solo texto"},
        headers=headers,
    )

    assert response.status_code == 201
    assert response.json()["gallery"] == []
    assert response.json()["musicUrl"] is None


@pytest.mark.asyncio
async def test_upload_rejects_two_music_files(client: AsyncClient, login, fake_storage):
    headers = await login(client)

    response = await client.post(
        f"{API}/invitations/upload",
        data=FORM,
        files=[
            ("music", ("one.mp3", b"1", "audio/mpeg")),
            ("music", ("two.mp3", b"2", "audio/mpeg")),
        ],
        headers=headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "TOO_MANY_MUSIC_FILES"
    assert fake_storage.uploaded_keys == []


@pytest.mark.asyncio
async def test_upload_requires_title(client: AsyncClient, login):
    headers = await login(client)

    response = await client.post(
        f"{API}/invitations/upload",
        data={"host": "Nadie"},
        files=[_image("a.jpg")],
        headers=headers,
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_upload_failure_keeps_earlier_objects(client: AsyncClient, login, fake_storage):
    """Partial failure

    Given storage rejects the second image
    When I post three images
    Then the request fails with 502
    And the first image stays in storage
    And no invitation is created
    """
    headers = await login(client)
    fake_storage.fail_on = "b.jpg"

    response = await client.post(
        f"{API}/invitations/upload",
        data=FORM,
        files=[_image("a.jpg"), _image("b.jpg"), _image("c.jpg")],
        headers=headers,
    )

    assert response.status_code == 502
    assert response.json()["error"]["code"] == "STORAGE_UPLOAD_FAILED"
    assert len(fake_storage.uploaded_keys) == 1
    assert fake_storage.uploaded_keys[0].endswith("-a.jpg")

    listing = await client.get(f"{API}/invitations", headers=headers)
    assert listing.json() == []


@pytest.mark.asyncio
async def test_upload_without_storage(client_without_storage: AsyncClient, login):
    headers = await login(client_without_storage)

    response = await client_without_storage.post(
        f"{API}/invitations/upload",
        data=FORM,
        files=[_image("a.jpg")],
        headers=headers,
    )

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "STORAGE_NOT_CONFIGURED"


@pytest.mark.asyncio
async def test_upload_requires_token(client: AsyncClient):
    response = await client.post(
        f"{API}/invitations/upload", data=FORM, files=[_image("a.jpg")]
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_upload_accepts_more_than_a_thousand_gallery_files(
    client: AsyncClient, login, fake_storage
):
    """Large gallery

    Given storage is configured
    When I post 1001 gallery images
    Then all of them are stored and listed in order
    """
    headers = await login(client)
    names = [f"img{i:04d}.jpg" for i in range(1001)]

    response = await client.post(
        f"{API}/invitations/upload",
        data={"title": "Galería enorme"},
        files=[_image(name) for name in names],
        headers=headers,
    )

    assert response.status_code == 201
    assert gallery_names(response.json()) == names
    assert len(fake_storage.uploaded_keys) == 1001


@pytest.mark.asyncio
async def test_upload_over_part_limit_uses_error_envelope(
    client: AsyncClient, login, fake_storage, monkeypatch
):
    monkeypatch.setattr(TestConfig, "UPLOAD_MAX_FILES", 2)
    headers = await login(client)

    response = await client.post(
        f"{API}/invitations/upload",
        data={"title": "Boda"},
        files=[_image("a.jpg"), _image("b.jpg"), _image("c.jpg")],
        headers=headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_MULTIPART"
    assert fake_storage.uploaded_keys == []
