from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.config.settings import Settings
from app.factory import create_app


@pytest.fixture()
def test_settings(tmp_path: Path) -> Settings:
    return Settings(uploads_dir=tmp_path / "uploads", conversion_engine="none")


@pytest.fixture()
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client
