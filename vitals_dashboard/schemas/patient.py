"""
Pydantic schemas for the patient list returned by the patient API.

All models are frozen: they are read-only projections of one API response and
live only for a single page load. Every leaf value is optional; missing or
unreadable data is rendered as a placeholder rather than rejected, so one
mistyped field never costs the whole patient list.
"""
from typing import Any, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)

Number = Union[int, float]


def none_if_invalid(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    """Run the field's own validation, degrading a type mismatch to None."""
    try:
        return handler(value)
    except ValidationError:
        return None


class Measurement(BaseModel):
    """A single measured value, e.g. ``{"value": 120}``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    value: Optional[Number] = Field(None, description="Measured value")

    @field_validator("value", mode="wrap")
    @classmethod
    def lenient_value(cls, value, handler):
        return none_if_invalid(value, handler)


class BloodPressure(BaseModel):
    """Systolic and diastolic readings of one history entry."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    systolic: Optional[Measurement] = None
    diastolic: Optional[Measurement] = None

    @field_validator("systolic", "diastolic", mode="wrap")
    @classmethod
    def lenient_readings(cls, value, handler):
        return none_if_invalid(value, handler)


class HistoryEntry(BaseModel):
    """One dated clinical snapshot within a patient's diagnosis history.

    The ``*_value`` properties walk the nested structure and return ``None``
    as soon as any level is missing.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    month: Optional[str] = Field(None, description="Calendar month name", examples=["March"])
    year: Optional[int] = Field(None, description="Calendar year", examples=[2024])
    blood_pressure: Optional[BloodPressure] = None
    heart_rate: Optional[Measurement] = None
    respiratory_rate: Optional[Measurement] = None
    temperature: Optional[Measurement] = None

    @field_validator(
        "month", "year", "blood_pressure", "heart_rate", "respiratory_rate", "temperature",
        mode="wrap",
    )
    @classmethod
    def lenient_fields(cls, value, handler):
        return none_if_invalid(value, handler)

    @property
    def systolic_value(self) -> Optional[Number]:
        if self.blood_pressure is None or self.blood_pressure.systolic is None:
            return None
        return self.blood_pressure.systolic.value

    @property
    def diastolic_value(self) -> Optional[Number]:
        if self.blood_pressure is None or self.blood_pressure.diastolic is None:
            return None
        return self.blood_pressure.diastolic.value

    @property
    def heart_rate_value(self) -> Optional[Number]:
        return self.heart_rate.value if self.heart_rate is not None else None

    @property
    def respiratory_rate_value(self) -> Optional[Number]:
        return self.respiratory_rate.value if self.respiratory_rate is not None else None

    @property
    def temperature_value(self) -> Optional[Number]:
        return self.temperature.value if self.temperature is not None else None


class PatientRecord(BaseModel):
    """Schema for one patient in the API response.

    ``name`` is the lookup key for patient selection. Keys the dashboard does
    not display (diagnostic list, lab results) are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: Optional[str] = Field(None, description="Patient full name", examples=["Jessica Taylor"])
    gender: Optional[str] = None
    age: Optional[int] = Field(None, description="Age in years", examples=[28])
    date_of_birth: Optional[str] = Field(None, examples=["08/23/1996"])
    phone_number: Optional[str] = None
    emergency_contact: Optional[str] = None
    insurance_type: Optional[str] = None
    blood_type: Optional[str] = None
    profile_picture: Optional[str] = Field(None, description="Avatar image URL")
    diagnosis_history: Tuple[HistoryEntry, ...] = Field(
        default_factory=tuple,
        description="Clinical snapshots in the order the API returned them"
    )

    @field_validator(
        "name", "gender", "age", "date_of_birth", "phone_number", "emergency_contact",
        "insurance_type", "blood_type", "profile_picture",
        mode="wrap",
    )
    @classmethod
    def lenient_fields(cls, value, handler):
        return none_if_invalid(value, handler)

    @field_validator("diagnosis_history", mode="before")
    @classmethod
    def readable_history(cls, value):
        """Treat a null or non-list history as empty and drop non-object entries."""
        if not isinstance(value, (list, tuple)):
            return ()
        return tuple(entry for entry in value if isinstance(entry, (dict, HistoryEntry)))
