"""
Patient selection from a fetched patient list.
"""
import logging
from typing import Iterable, Optional

from vitals_dashboard.schemas import PatientRecord

logger = logging.getLogger(__name__)


def select_by_name(records: Iterable[PatientRecord], target_name: str) -> Optional[PatientRecord]:
    """
    Return the first record whose name exactly matches target_name.

    The match is case-sensitive and follows the input order. Returns None
    when nothing matches; the caller decides whether that is fatal.
    """
    for record in records:
        if record.name == target_name:
            return record

    logger.debug("No patient matched", extra={"patient_name": target_name})
    return None
