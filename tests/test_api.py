"""
Tests for the dashboard web app.

The patient API client is replaced through app.dependency_overrides, so each
request runs the real pipeline against canned data.
"""
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from vitals_dashboard.api import app as app_module
from vitals_dashboard.api.app import create_app
from vitals_dashboard.api.dependencies import get_api_client
from vitals_dashboard.clients import PatientAPIClient
from vitals_dashboard.core.config import Settings
from vitals_dashboard.core.exceptions import DashboardError, TransportError
from vitals_dashboard.surface import FAILURE_MESSAGE


@pytest.fixture
def fake_api_client():
    client = PatientAPIClient(url="http://test-server/", username="u", password="p")
    client.fetch_patients = AsyncMock()
    return client


@pytest.fixture
def client(fake_api_client):
    app = create_app()
    app.dependency_overrides[get_api_client] = lambda: fake_api_client
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_dashboard_default_patient(client, fake_api_client, patients):
    fake_api_client.fetch_patients.return_value = patients

    response = client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "Jessica Taylor" in response.text
    assert "160/78 mmHg" in response.text
    fake_api_client.fetch_patients.assert_awaited_once()


def test_dashboard_selected_patient(client, fake_api_client, patients):
    fake_api_client.fetch_patients.return_value = patients

    response = client.get("/", params={"patient": "Emily Williams"})

    assert response.status_code == 200
    assert "Emily Williams" in response.text
    assert "18 years" in response.text


def test_dashboard_patient_not_found(client, fake_api_client, patients):
    fake_api_client.fetch_patients.return_value = patients

    response = client.get("/", params={"patient": "Nobody Here"})

    assert response.status_code == 404
    assert FAILURE_MESSAGE in response.text
    assert "Nobody Here not found" not in response.text


def test_dashboard_upstream_failure(client, fake_api_client):
    fake_api_client.fetch_patients.side_effect = TransportError(upstream_status=500)

    response = client.get("/")

    assert response.status_code == 502
    assert FAILURE_MESSAGE in response.text


def test_dashboard_unexpected_failure(client, fake_api_client):
    fake_api_client.fetch_patients.side_effect = RuntimeError("boom")

    response = client.get("/")

    assert response.status_code == 500
    assert FAILURE_MESSAGE in response.text
    assert "boom" not in response.text


def test_dashboard_empty_patient_param_rejected(client):
    response = client.get("/", params={"patient": ""})

    assert response.status_code == 422


def test_health_endpoint(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "1.0.0"
    assert "timestamp" in data


def test_failed_load_is_answered_by_the_route():
    """Pipeline errors never escape the route, so no DashboardError handler is registered."""
    assert DashboardError not in create_app().exception_handlers


def test_lifespan_configures_logging_from_settings():
    settings = Settings(
        _env_file=None,
        patient_api_username="user",
        patient_api_password="secret",
        log_level="debug",
        log_format="text",
    )

    with patch.object(app_module, "get_settings", return_value=settings), \
            patch.object(app_module, "setup_logging") as mock_setup:
        with TestClient(create_app()):
            pass

    mock_setup.assert_called_once_with(level="DEBUG", json_format=False, include_uvicorn=True)
