"""
Shared exception classes for the vitals dashboard.

This module provides:
- Custom exception hierarchy for the fetch/select/render pipeline
- HTTP status codes the web app answers a failed page load with

Usage:
    from vitals_dashboard.core.exceptions import PatientNotFoundError

    # In the pipeline - raise domain exceptions
    raise PatientNotFoundError(patient_name="Jessica Taylor")
"""
from typing import Any, Optional

from fastapi import status


# =============================================================================
# BASE EXCEPTION CLASS
# =============================================================================

class DashboardError(Exception):
    """
    Base exception for all dashboard pipeline errors.

    Every error in this hierarchy is fatal for the current page load.
    Field-level missing data is never raised; it is rendered as a placeholder.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "An unexpected error occurred"

    def __init__(
        self,
        detail: Optional[str] = None,
        status_code: Optional[int] = None,
        **kwargs: Any
    ):
        """
        Initialize the exception.

        Args:
            detail: Human-readable error message. Uses class default if not provided.
            status_code: HTTP status code for the web app. Uses class default if not provided.
            **kwargs: Additional context attached to the failure log.
        """
        self.detail = detail or self.__class__.detail
        self.status_code = status_code or self.__class__.status_code
        self.context = kwargs
        super().__init__(self.detail)


# =============================================================================
# FETCH EXCEPTIONS
# =============================================================================

class TransportError(DashboardError):
    """Raised when the patient API does not answer with a success status."""

    status_code = status.HTTP_502_BAD_GATEWAY
    detail = "Patient API request failed"

    def __init__(self, upstream_status: Optional[int] = None, detail: Optional[str] = None, **kwargs: Any):
        if detail is None and upstream_status is not None:
            detail = f"Patient API request failed: {upstream_status}"
        self.upstream_status = upstream_status
        super().__init__(detail=detail, upstream_status=upstream_status, **kwargs)


class ParseError(DashboardError):
    """Raised when the patient API body is not a JSON list of patients."""

    status_code = status.HTTP_502_BAD_GATEWAY
    detail = "Patient API returned an unreadable body"


# =============================================================================
# SELECTION EXCEPTIONS
# =============================================================================

class PatientNotFoundError(DashboardError):
    """Raised when the requested patient is not in the fetched list."""

    status_code = status.HTTP_404_NOT_FOUND
    detail = "Patient not found"

    def __init__(self, patient_name: Optional[str] = None, **kwargs: Any):
        detail = f"{patient_name} not found in API data" if patient_name else self.detail
        super().__init__(detail=detail, patient_name=patient_name, **kwargs)
