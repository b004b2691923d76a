"""
FastAPI application serving the patient dashboard.

Each GET / is one page load: a fresh DashboardService fetches the patient
list, renders into a fresh HtmlSurface and returns the page. A failed load
returns the generic failure notice instead, with the details only in the log.
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import Depends, FastAPI, Query
from fastapi.responses import HTMLResponse

from vitals_dashboard import __version__
from vitals_dashboard.api.dependencies import get_api_client, get_app_settings
from vitals_dashboard.clients import PatientAPIClient
from vitals_dashboard.core.config import Settings, get_settings
from vitals_dashboard.core.exceptions import DashboardError
from vitals_dashboard.core.logging_config import setup_logging
from vitals_dashboard.services.dashboard_service import DashboardService, LoadState
from vitals_dashboard.surface import CollectingNotifier, HtmlSurface, render_failure_page

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging at startup from the same settings the CLI uses."""
    settings = get_settings()
    setup_logging(
        level=settings.log_level,
        json_format=settings.log_format.lower() == "json",
        include_uvicorn=True,
    )
    logger.info("Starting patient dashboard...")
    yield
    logger.info("Patient dashboard shutting down...")


def create_app() -> FastAPI:
    """Create the FastAPI application with its routes."""
    app = FastAPI(
        title="Patient Vitals Dashboard",
        description="Renders a patient's profile, latest vitals and yearly blood pressure chart.",
        version=__version__,
        lifespan=lifespan,
    )

    @app.get("/", response_class=HTMLResponse, summary="Render the patient dashboard")
    async def dashboard(
        patient: Optional[str] = Query(None, min_length=1, description="Patient name", examples=["Jessica Taylor"]),
        api_client: PatientAPIClient = Depends(get_api_client),
        settings: Settings = Depends(get_app_settings),
    ) -> HTMLResponse:
        patient_name = patient or settings.dashboard_target_patient
        surface = HtmlSurface()
        notifier = CollectingNotifier()
        service = DashboardService(api_client=api_client, surface=surface, notifier=notifier)

        state = await service.load(patient_name)
        title = f"{patient_name} - Patient Dashboard"
        if state is LoadState.RENDERED:
            return HTMLResponse(surface.render_html(title=title))

        status_code = service.error.status_code if isinstance(service.error, DashboardError) else 500
        return HTMLResponse(
            render_failure_page(notifier.messages[0], title=title),
            status_code=status_code,
        )

    @app.get("/health", summary="Liveness probe")
    async def health() -> Dict[str, Any]:
        return {
            "status": "healthy",
            "version": __version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app


app = create_app()
