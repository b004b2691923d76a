"""
Core module for application configuration, logging, and shared exceptions.

This module provides:
- Settings: Application configuration via pydantic-settings
- Exceptions: Pipeline exception classes with HTTP status codes
- Logging: Structured JSON logging with per-load correlation IDs
"""
from vitals_dashboard.core.config import Settings, get_settings
from vitals_dashboard.core.exceptions import (
    DashboardError,
    TransportError,
    ParseError,
    PatientNotFoundError,
)
from vitals_dashboard.core.logging_config import (
    setup_logging,
    get_load_id,
    set_load_id,
    clear_load_id,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Exceptions
    "DashboardError",
    "TransportError",
    "ParseError",
    "PatientNotFoundError",
    # Logging
    "setup_logging",
    "get_load_id",
    "set_load_id",
    "clear_load_id",
]
