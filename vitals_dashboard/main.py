"""
Command-line entry point: render one patient's dashboard to an HTML file.

Usage:
    vitals-dashboard --patient "Jessica Taylor" --output dashboard.html
    vitals-dashboard serve

Credentials are read from PATIENT_API_USERNAME / PATIENT_API_PASSWORD
(environment or .env).
"""
import asyncio
import logging
import sys
from typing import List, Optional

from vitals_dashboard.clients import PatientAPIClient
from vitals_dashboard.core.config import get_settings
from vitals_dashboard.core.logging_config import setup_logging
from vitals_dashboard.services.dashboard_service import DashboardService, LoadState
from vitals_dashboard.surface import ConsoleNotifier, HtmlSurface

logger = logging.getLogger(__name__)


async def render_dashboard(patient_name: str, output_path: str) -> LoadState:
    """Run one page load and write the page when it rendered."""
    surface = HtmlSurface()
    service = DashboardService(
        api_client=PatientAPIClient(),
        surface=surface,
        notifier=ConsoleNotifier(),
    )

    state = await service.load(patient_name)
    if state is LoadState.RENDERED:
        path = surface.write(output_path, title=f"{patient_name} - Patient Dashboard")
        print(f"✓ Dashboard for {patient_name} saved to {path.resolve()}")
    return state


def serve() -> None:
    """Serve the dashboard over HTTP with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "vitals_dashboard.api.app:app",
        host=settings.dashboard_host,
        port=settings.dashboard_port,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the dashboard CLI."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Render a patient's profile, vitals and blood pressure chart"
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=["render", "serve"],
        default="render",
        help="render an HTML file (default) or serve the dashboard over HTTP"
    )
    parser.add_argument(
        "--patient",
        help="Patient name to render (default: DASHBOARD_TARGET_PATIENT)"
    )
    parser.add_argument(
        "--output",
        help="Output HTML file (default: DASHBOARD_OUTPUT_PATH)"
    )
    parser.add_argument(
        "--log-level",
        help="Log level (default: LOG_LEVEL)"
    )
    parser.add_argument(
        "--text-logs",
        action="store_true",
        help="Human-readable logs instead of JSON"
    )

    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(
        level=args.log_level or settings.log_level,
        json_format=not args.text_logs and settings.log_format.lower() == "json",
        include_uvicorn=args.command == "serve",
    )

    if args.command == "serve":
        serve()
        return 0

    patient_name = args.patient or settings.dashboard_target_patient
    output_path = args.output or settings.dashboard_output_path

    state = asyncio.run(render_dashboard(patient_name, output_path))
    return 0 if state is LoadState.RENDERED else 1


if __name__ == "__main__":
    sys.exit(main())
