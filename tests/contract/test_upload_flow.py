"""End-to-end behaviour of the assembled service."""

from __future__ import annotations

import os
from pathlib import Path
from urllib.parse import urlsplit

import pytest
from fastapi.testclient import TestClient

from filedrop.security.capability import generate_delete_token

pytestmark = pytest.mark.integration

SECRET = "test-upload-password"


def _path(url: str) -> str:
    return urlsplit(url).path


def upload(client: TestClient, headers: dict[str, str], filename: str, data: bytes, content_type: str):
    return client.post("/upload", headers=headers, files={"file": (filename, data, content_type)})


def test_health(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.text == "Still alive"


def test_upload_then_fetch_round_trip(client: TestClient, auth_headers, upload_dir: Path) -> None:
    payload = os.urandom(3 * 1024 * 1024 + 17)

    response = upload(client, auth_headers, "blob.bin", payload, "application/octet-stream")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["url"].startswith("https://files.example.test/file/")
    assert body["size_bytes"] == len(payload)

    fetched = client.get(_path(body["url"]))
    assert fetched.status_code == 200
    assert fetched.content == payload
    assert [p.name for p in upload_dir.iterdir()] == [body["url"].rsplit("/", 1)[-1]]


def test_delete_url_embeds_signed_token(client: TestClient, auth_headers) -> None:
    body = upload(client, auth_headers, "photo.png", b"png", "image/png").json()
    name = body["url"].rsplit("/", 1)[-1]

    assert body["delete_url"] == (
        f"https://files.example.test/delete/{generate_delete_token(name, SECRET)}/{name}"
    )
    assert body["info_url"] == f"https://files.example.test/{name}"


def test_delete_succeeds_once_then_404(client: TestClient, auth_headers) -> None:
    body = upload(client, auth_headers, "notes.txt", b"hello", "text/plain").json()
    delete_path = _path(body["delete_url"])

    first = client.delete(delete_path)
    second = client.delete(delete_path)

    assert first.status_code == 200
    assert first.text == "File deleted successfully"
    assert second.status_code == 404
    assert client.get(_path(body["url"])).status_code == 404


def test_delete_with_wrong_token_keeps_file(client: TestClient, auth_headers) -> None:
    body = upload(client, auth_headers, "notes.txt", b"hello", "text/plain").json()
    name = body["url"].rsplit("/", 1)[-1]

    forged = client.delete(f"/delete/{generate_delete_token(name, 'guess')}/{name}")

    assert forged.status_code == 401
    assert client.get(_path(body["url"])).content == b"hello"


def test_delete_token_for_other_file_is_rejected(client: TestClient, auth_headers) -> None:
    first = upload(client, auth_headers, "a.txt", b"a", "text/plain").json()
    second = upload(client, auth_headers, "b.txt", b"b", "text/plain").json()
    token = _path(first["delete_url"]).split("/")[2]
    other_name = second["url"].rsplit("/", 1)[-1]

    response = client.delete(f"/delete/{token}/{other_name}")

    assert response.status_code == 401


def test_bad_token_for_missing_file_is_unauthorized_not_404(client: TestClient) -> None:
    response = client.delete(f"/delete/{'0' * 64}/missing.txt")

    assert response.status_code == 401


@pytest.mark.parametrize(
    "headers",
    [{}, {"Authorization": "Bearer nope"}],
)
def test_unauthorized_upload_stores_nothing(client: TestClient, upload_dir: Path, headers) -> None:
    response = upload(client, headers, "photo.png", b"png", "image/png")

    assert response.status_code == 401
    assert list(upload_dir.iterdir()) == []


def test_extension_is_preserved(client: TestClient, auth_headers) -> None:
    with_ext = upload(client, auth_headers, "photo.png", b"png", "image/png").json()
    without_ext = upload(client, auth_headers, "LICENSE", b"text", "text/plain").json()

    assert with_ext["url"].endswith(".png")
    assert "." not in without_ext["url"].rsplit("/", 1)[-1]


@pytest.mark.parametrize(
    ("filename", "content_type", "expected", "absent"),
    [
        ("photo.png", "image/png", ['property="og:image"'], ["og:video"]),
        ("clip.mp4", "video/mp4", ['property="og:video"', "twitter:player"], ["og:image"]),
        ("notes.txt", "text/plain", [], ["og:image", "og:video", "twitter:card"]),
    ],
)
def test_info_page_branches_on_content_type(
    client: TestClient,
    auth_headers,
    filename: str,
    content_type: str,
    expected: list[str],
    absent: list[str],
) -> None:
    body = upload(client, auth_headers, filename, b"content", content_type).json()

    page = client.get(_path(body["info_url"]))

    assert page.status_code == 200
    assert f'url={body["url"]}' in page.text
    for marker in expected:
        assert marker in page.text
    for marker in absent:
        assert marker not in page.text


def test_upload_without_file_is_bad_request(client: TestClient, auth_headers, upload_dir: Path) -> None:
    response = client.post("/upload", headers=auth_headers, data={"field": "value"})

    assert response.status_code == 400
    assert list(upload_dir.iterdir()) == []
