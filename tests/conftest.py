"""Shared pytest fixtures."""

import pytest

from backend.core.config import Settings
from backend.services.content_service import ContentService


@pytest.fixture
def settings():
    return Settings(LEGACY_ANCHOR_TOLERANCE=0.5)


@pytest.fixture
def service(settings):
    return ContentService(settings=settings)


@pytest.fixture
def client(service):
    from fastapi.testclient import TestClient

    from backend.main import app
    from backend.services.content_service import get_content_service

    app.dependency_overrides[get_content_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
