"""
Shared pytest fixtures for dashboard tests.

Key patterns:
1. Credentials are set in the environment before any config import
2. RecordingSurface stands in for the page and records every write
3. Patient payloads are plain dicts shaped like the real API response
"""
import os
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pytest

# Set test credentials before importing config modules
# This must happen before any config imports
os.environ.setdefault("PATIENT_API_USERNAME", "test-user")
os.environ.setdefault("PATIENT_API_PASSWORD", "test-password")
os.environ.setdefault("PATIENT_API_URL", "http://patients.test/")

from vitals_dashboard.schemas import HistoryEntry, PatientRecord
from vitals_dashboard.surface.base import DisplaySurface, ListItem


class RecordingSurface(DisplaySurface):
    """DisplaySurface that keeps the latest value of every slot and a call log."""

    def __init__(self) -> None:
        self.texts: Dict[str, str] = {}
        self.images: Dict[str, str] = {}
        self.items: Dict[str, List[ListItem]] = {}
        self.figure = None
        self.calls: List[Tuple[str, str]] = []

    def set_text(self, slot: str, text: str) -> None:
        self.calls.append(("set_text", slot))
        self.texts[slot] = text

    def set_image(self, slot: str, url: str) -> None:
        self.calls.append(("set_image", slot))
        self.images[slot] = url

    def set_items(self, region: str, items: Sequence[ListItem]) -> None:
        self.calls.append(("set_items", region))
        self.items[region] = list(items)

    def draw_chart(self, figure) -> None:
        self.calls.append(("draw_chart", "chart"))
        self.figure = figure

    def snapshot(self) -> Dict[str, Any]:
        return {
            "texts": dict(self.texts),
            "images": dict(self.images),
            "items": {k: list(v) for k, v in self.items.items()},
            "figure": self.figure.to_dict() if self.figure is not None else None,
        }


def history_entry(
    month: Optional[str],
    year: Optional[int],
    systolic: Optional[float] = None,
    diastolic: Optional[float] = None,
    heart_rate: Optional[float] = None,
    respiratory_rate: Optional[float] = None,
    temperature: Optional[float] = None,
) -> Dict[str, Any]:
    """Build one diagnosis_history item the way the API sends it."""
    entry: Dict[str, Any] = {"month": month, "year": year}
    blood_pressure: Dict[str, Any] = {}
    if systolic is not None:
        blood_pressure["systolic"] = {"value": systolic, "levels": "Normal"}
    if diastolic is not None:
        blood_pressure["diastolic"] = {"value": diastolic, "levels": "Normal"}
    if blood_pressure:
        entry["blood_pressure"] = blood_pressure
    if heart_rate is not None:
        entry["heart_rate"] = {"value": heart_rate, "levels": "Normal"}
    if respiratory_rate is not None:
        entry["respiratory_rate"] = {"value": respiratory_rate, "levels": "Normal"}
    if temperature is not None:
        entry["temperature"] = {"value": temperature, "levels": "Normal"}
    return entry


def to_history(raw: List[Dict[str, Any]]) -> List[HistoryEntry]:
    return [HistoryEntry.model_validate(item) for item in raw]


JESSICA_HISTORY = [
    history_entry("March", 2024, 160, 78, heart_rate=78, respiratory_rate=20, temperature=98.6),
    history_entry("February", 2024, 120, 110, heart_rate=77, respiratory_rate=19, temperature=99.2),
    history_entry("January", 2024, 110, 60, heart_rate=70, respiratory_rate=18, temperature=98.4),
    history_entry("December", 2023, 160, 70, heart_rate=76, respiratory_rate=22, temperature=97.2),
    history_entry("November", 2023, 113, 81, heart_rate=99, respiratory_rate=25, temperature=98.5),
    history_entry("October", 2023, 119, 79, heart_rate=79, respiratory_rate=16, temperature=99.1),
    history_entry("September", 2023, 116, 79, heart_rate=80, respiratory_rate=24, temperature=98.2),
]


@pytest.fixture
def jessica_payload() -> Dict[str, Any]:
    """Jessica Taylor as returned by the patient API."""
    return {
        "name": "Jessica Taylor",
        "gender": "Female",
        "age": 28,
        "profile_picture": "https://fedskillstest.ct.digital/4.png",
        "date_of_birth": "1996-08-23",
        "phone_number": "(415) 555-1234",
        "emergency_contact": "(415) 555-5678",
        "insurance_type": "Sunrise Health Assurance",
        "diagnosis_history": [dict(entry) for entry in JESSICA_HISTORY],
        "diagnostic_list": [{"name": "Hypertension", "status": "Under Observation"}],
        "lab_results": ["Blood Tests", "CT Scans"],
        "blood_type": "O+",
    }


@pytest.fixture
def patients_payload(jessica_payload) -> List[Dict[str, Any]]:
    """Full API response: a few other patients around Jessica Taylor."""
    return [
        {"name": "Emily Williams", "gender": "Female", "age": 18, "diagnosis_history": []},
        jessica_payload,
        {"name": "Ryan Johnson", "gender": "Male", "age": 45, "diagnosis_history": None},
    ]


@pytest.fixture
def patients(patients_payload) -> List[PatientRecord]:
    return [PatientRecord.model_validate(item) for item in patients_payload]


@pytest.fixture
def jessica(jessica_payload) -> PatientRecord:
    return PatientRecord.model_validate(jessica_payload)


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()
