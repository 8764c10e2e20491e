import pytest
from fastapi.testclient import TestClient

from project_report_api.app.core.config import settings
from project_report_api.app.main import create_app
from project_report_api.app.services import build_services


@pytest.fixture
def services():
    return build_services()


@pytest.fixture
def app(services):
    return create_app(services)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {settings.api_token}"}


@pytest.fixture
def project(client, auth_headers):
    response = client.post(
        "/api/v1/projects",
        json={"name": "Alpha", "description": "d"},
        headers=auth_headers,
    )
    assert response.status_code == 201
    return response.json()
