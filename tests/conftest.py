import pytest
from fastapi.testclient import TestClient

from app.services.gallery.gallery_service import GalleryService

from tests.fakes import FakeDogApiClient


@pytest.fixture
def fake_client():
    return FakeDogApiClient()


@pytest.fixture
def test_client(fake_client):
    from app.main import app, app_state

    with TestClient(app) as client:
        # Swap the real HTTP client for the fake after startup
        app_state["dog_api_client"].close()
        app_state["dog_api_client"] = fake_client
        app_state["gallery_service"] = GalleryService(client=fake_client)
        yield client
