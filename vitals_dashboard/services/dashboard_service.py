"""
Service layer for one dashboard page load.

Architecture:
    DashboardService → PatientAPIClient   (fetch)
                     → select_by_name     (select)
                     → history_analyzer   (most_recent, aggregate_by_year)
                     → ViewRenderer       (profile, vitals, diagnosis list)
                     → ChartRenderer      (yearly blood pressure chart)

Steps run strictly one after another. The fetch is the only await. Any
failure stops the pipeline, is logged once and produces exactly one
user-visible notice; steps that already wrote to the surface are not undone.
"""
import enum
import logging
import uuid
from typing import Optional

from vitals_dashboard.clients import PatientAPIClient
from vitals_dashboard.core.exceptions import DashboardError, PatientNotFoundError
from vitals_dashboard.core.logging_config import clear_load_id, set_load_id
from vitals_dashboard.services.graph import ChartRenderer
from vitals_dashboard.services.history_analyzer import aggregate_by_year, most_recent
from vitals_dashboard.services.patient_selector import select_by_name
from vitals_dashboard.services.view_renderer import ViewRenderer
from vitals_dashboard.surface.base import DisplaySurface
from vitals_dashboard.surface.notifier import FAILURE_MESSAGE, Notifier

logger = logging.getLogger(__name__)


class LoadState(str, enum.Enum):
    """Lifecycle of a page load."""
    IDLE = "idle"
    LOADING = "loading"
    RENDERED = "rendered"
    FAILED = "failed"


class DashboardService:
    """
    Runs the fetch → select → analyze → render pipeline for one page load.

    Dependencies are injected so tests can substitute a fake client, surface
    and notifier. An instance is single-use: once RENDERED or FAILED it
    stays there.
    """

    def __init__(
        self,
        api_client: PatientAPIClient,
        surface: DisplaySurface,
        notifier: Notifier,
        chart_renderer: Optional[ChartRenderer] = None,
    ):
        """
        Initialize the dashboard service.

        Args:
            api_client: Client used for the single patient list fetch.
            surface: Display surface the renderers write into.
            notifier: Channel for the one failure notice.
            chart_renderer: Optional chart renderer. A default instance is created if omitted.
        """
        self._client = api_client
        self._surface = surface
        self._notifier = notifier
        self._view = ViewRenderer(surface)
        self._chart = chart_renderer or ChartRenderer()
        self._state = LoadState.IDLE
        self.error: Optional[BaseException] = None

    @property
    def state(self) -> LoadState:
        return self._state

    async def load(self, target_name: str) -> LoadState:
        """
        Load and render the dashboard for target_name.

        Never raises for pipeline failures; inspect the returned state and
        ``self.error`` instead.

        Raises:
            RuntimeError: If this instance has already been used.
        """
        if self._state is not LoadState.IDLE:
            raise RuntimeError(f"Dashboard already loaded (state={self._state.value})")

        set_load_id(str(uuid.uuid4()))
        self._state = LoadState.LOADING
        logger.info("Loading dashboard", extra={"patient_name": target_name})

        try:
            await self._run(target_name)
        except Exception as e:
            self._fail(e, target_name)
        else:
            self._state = LoadState.RENDERED
            logger.info("Dashboard rendered", extra={"patient_name": target_name})
        finally:
            clear_load_id()

        return self._state

    async def _run(self, target_name: str) -> None:
        patients = await self._client.fetch_patients()

        patient = select_by_name(patients, target_name)
        if patient is None:
            raise PatientNotFoundError(patient_name=target_name)

        history = patient.diagnosis_history
        latest = most_recent(history)
        aggregate = aggregate_by_year(history)

        self._view.render_profile(patient, fallback_name=target_name)
        self._view.render_vitals(latest)
        self._view.render_diagnosis_list(history)
        self._chart.render(self._surface, history, aggregate)

    def _fail(self, error: Exception, target_name: str) -> None:
        self.error = error
        self._state = LoadState.FAILED

        extra = {"patient_name": target_name, "error_type": type(error).__name__}
        if isinstance(error, DashboardError):
            extra["context"] = error.context
            logger.error(f"Dashboard load failed: {error.detail}", exc_info=error, extra=extra)
        else:
            logger.exception(f"Unexpected error while loading dashboard: {error}", extra=extra)

        self._notifier.notify(FAILURE_MESSAGE)
