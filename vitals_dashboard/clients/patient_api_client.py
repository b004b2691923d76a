"""
HTTP client for the patient API.
Issues a single authenticated GET and parses the body into PatientRecord objects.
"""
import logging
from typing import List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from vitals_dashboard.core.config import Settings, get_settings
from vitals_dashboard.core.exceptions import ParseError, TransportError
from vitals_dashboard.schemas import PatientRecord

logger = logging.getLogger(__name__)

_patient_list_adapter = TypeAdapter(List[PatientRecord])


class PatientAPIClient:
    """Client for the patient list endpoint.

    Every call sends the same basic-auth credentials and follows redirects to
    the final response. There is no retry and no timeout: a call either returns
    the full list or raises.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        settings: Optional[Settings] = None,
    ):
        if url is None or username is None or password is None:
            settings = settings or get_settings()
            url = url or settings.patient_api_url
            username = username or settings.patient_api_username
            password = password or settings.patient_api_password.get_secret_value()

        if not url:
            raise ValueError("PATIENT_API_URL must be set in config")

        self.url = url
        self._auth = httpx.BasicAuth(username, password)
        self._transport = transport

    async def fetch_patients(self) -> List[PatientRecord]:
        """
        Fetch every patient from the API.

        Returns:
            List of PatientRecord in the order the API returned them

        Raises:
            TransportError: For non-success responses or connection failures
            ParseError: If the body is not JSON or not a list of patient objects.
                Mistyped fields inside a patient degrade to None instead.
        """
        logger.info("Fetching patients", extra={"url": self.url})

        try:
            async with httpx.AsyncClient(
                auth=self._auth,
                timeout=None,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(self.url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            error_msg = f"API error {e.response.status_code}: {e.response.text[:200]}"
            logger.warning(error_msg)
            raise TransportError(upstream_status=e.response.status_code) from e
        except httpx.RequestError as e:
            error_msg = f"Request error: {e}"
            logger.warning(error_msg)
            raise TransportError(detail=error_msg) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise ParseError(detail=f"Patient API body is not valid JSON: {e}") from e

        try:
            patients = _patient_list_adapter.validate_python(payload)
        except ValidationError as e:
            raise ParseError(
                detail="Patient API body is not a list of patients",
                error_count=e.error_count(),
            ) from e

        logger.info("Fetched patients", extra={"patient_count": len(patients)})
        return patients
