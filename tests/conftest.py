from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from filedrop.config import AppConfig
from filedrop.main import create_app

TEST_SECRET = "test-upload-password"
TEST_PUBLIC_URL = "https://files.example.test"


def build_config(upload_dir: Path, **overrides: object) -> AppConfig:
    values: dict[str, object] = {
        "upload_password": TEST_SECRET,
        "public_url": TEST_PUBLIC_URL,
        "upload_dir": upload_dir,
    }
    values.update(overrides)
    return AppConfig(_env_file=None, **values)  # type: ignore[arg-type]


@pytest.fixture()
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture()
def app_config(upload_dir: Path) -> AppConfig:
    return build_config(upload_dir)


@pytest.fixture()
def client(app_config: AppConfig) -> TestClient:
    return TestClient(create_app(app_config))


@pytest.fixture()
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {TEST_SECRET}"}
