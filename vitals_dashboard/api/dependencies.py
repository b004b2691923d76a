"""
FastAPI dependency functions for the dashboard web app.

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_api_client] = lambda: fake_client
"""
import logging

from vitals_dashboard.clients import PatientAPIClient
from vitals_dashboard.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


def get_app_settings() -> Settings:
    """Get the cached application settings."""
    return get_settings()


def get_api_client() -> PatientAPIClient:
    """
    Get a patient API client.

    A new client per request is fine: the client holds no connection between
    calls, only the URL and credentials.
    """
    return PatientAPIClient(settings=get_settings())
