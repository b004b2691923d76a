"""
Display surface contract.

The dashboard never touches a page directly; it writes into named slots of an
injected DisplaySurface. Every write replaces the previous content of its slot,
so rendering the same input twice leaves the surface unchanged.
"""
from abc import ABC, abstractmethod
from typing import Sequence, Tuple, Union

import plotly.graph_objects as go

# Profile text slots, in display order
PATIENT_NAME = "patient_name"
PATIENT_GENDER = "patient_gender"
PATIENT_AGE = "patient_age"
PATIENT_DOB = "patient_dob"
PATIENT_PHONE = "patient_phone"
PATIENT_EMERGENCY = "patient_emergency"
PATIENT_INSURANCE = "patient_insurance"
PATIENT_BLOOD_TYPE = "patient_blood_type"

PROFILE_SLOTS: Tuple[str, ...] = (
    PATIENT_NAME,
    PATIENT_GENDER,
    PATIENT_AGE,
    PATIENT_DOB,
    PATIENT_PHONE,
    PATIENT_EMERGENCY,
    PATIENT_INSURANCE,
    PATIENT_BLOOD_TYPE,
)

# Image slot
PATIENT_AVATAR = "patient_avatar"

# List regions
VITALS_LIST = "vitals_list"
DIAGNOSIS_LIST = "diagnosis_list"

# A list item is either plain text or a (label, value) pair
ListItem = Union[str, Tuple[str, str]]


class DisplaySurface(ABC):
    """Write-only presentation surface with full-replace semantics."""

    @abstractmethod
    def set_text(self, slot: str, text: str) -> None:
        """Replace the text of a named slot."""

    @abstractmethod
    def set_image(self, slot: str, url: str) -> None:
        """Replace the image shown in a named slot."""

    @abstractmethod
    def set_items(self, region: str, items: Sequence[ListItem]) -> None:
        """Replace every item of a list region."""

    @abstractmethod
    def draw_chart(self, figure: go.Figure) -> None:
        """Replace the chart on the drawing surface."""
