"""
Writes a patient's profile, latest vitals and diagnosis history into a DisplaySurface.

All null handling happens here: every optional value passes through
display_value(), which substitutes the placeholder for anything missing.
"""
import logging
from typing import List, Optional, Sequence

from vitals_dashboard.schemas import HistoryEntry, PatientRecord
from vitals_dashboard.surface import base as slots
from vitals_dashboard.surface.base import DisplaySurface, ListItem

logger = logging.getLogger(__name__)

PLACEHOLDER = "—"
NO_VITALS_MESSAGE = "No vitals available."
NO_HISTORY_MESSAGE = "No diagnosis history found."
DIAGNOSIS_LIST_LIMIT = 6


def display_value(value: object) -> str:
    """Text for a possibly-missing value; whole floats drop their '.0'."""
    if value is None:
        return PLACEHOLDER
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_age(age: Optional[int]) -> str:
    # Zero counts as missing
    return f"{age} years" if age else PLACEHOLDER


class ViewRenderer:
    """Renders the non-chart parts of the dashboard."""

    def __init__(self, surface: DisplaySurface):
        self._surface = surface

    def render_profile(self, patient: PatientRecord, fallback_name: Optional[str] = None) -> None:
        """Fill the profile slots and the avatar."""
        name = patient.name if patient.name is not None else fallback_name
        values = {
            slots.PATIENT_NAME: display_value(name),
            slots.PATIENT_GENDER: display_value(patient.gender),
            slots.PATIENT_AGE: format_age(patient.age),
            slots.PATIENT_DOB: display_value(patient.date_of_birth),
            slots.PATIENT_PHONE: display_value(patient.phone_number),
            slots.PATIENT_EMERGENCY: display_value(patient.emergency_contact),
            slots.PATIENT_INSURANCE: display_value(patient.insurance_type),
            slots.PATIENT_BLOOD_TYPE: display_value(patient.blood_type),
        }
        for slot in slots.PROFILE_SLOTS:
            self._surface.set_text(slot, values[slot])

        self._surface.set_image(slots.PATIENT_AVATAR, patient.profile_picture or "")

    def render_vitals(self, latest: Optional[HistoryEntry]) -> None:
        """Fill the vitals list from the most recent history entry."""
        if latest is None:
            self._surface.set_items(slots.VITALS_LIST, [NO_VITALS_MESSAGE])
            return

        items: List[ListItem] = [
            ("Blood Pressure", f"{display_value(latest.systolic_value)}/{display_value(latest.diastolic_value)} mmHg"),
            ("Heart Rate", f"{display_value(latest.heart_rate_value)} bpm"),
            ("Respiratory Rate", f"{display_value(latest.respiratory_rate_value)} bpm"),
            ("Temperature", f"{display_value(latest.temperature_value)} °F"),
        ]
        self._surface.set_items(slots.VITALS_LIST, items)

    def render_diagnosis_list(self, history: Optional[Sequence[HistoryEntry]]) -> None:
        """
        Fill the diagnosis list with the first six entries in input order.

        The list is not re-sorted by recency, so it can disagree with the
        vitals panel when the API does not return history newest-first.
        """
        if not history:
            self._surface.set_items(slots.DIAGNOSIS_LIST, [NO_HISTORY_MESSAGE])
            return

        lines: List[ListItem] = [
            format_history_line(entry) for entry in history[:DIAGNOSIS_LIST_LIMIT]
        ]
        self._surface.set_items(slots.DIAGNOSIS_LIST, lines)


def format_history_line(entry: HistoryEntry) -> str:
    """'<Month> <Year> — BP <S>/<D> mmHg, HR <R> bpm'"""
    return (
        f"{display_value(entry.month)} {display_value(entry.year)} — "
        f"BP {display_value(entry.systolic_value)}/{display_value(entry.diastolic_value)} mmHg, "
        f"HR {display_value(entry.heart_rate_value)} bpm"
    )
