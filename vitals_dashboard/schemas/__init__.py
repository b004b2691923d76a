"""
Pydantic schemas for the patient API payload.
"""
from vitals_dashboard.schemas.patient import (
    Measurement,
    BloodPressure,
    HistoryEntry,
    PatientRecord,
)

__all__ = [
    "Measurement",
    "BloodPressure",
    "HistoryEntry",
    "PatientRecord",
]
