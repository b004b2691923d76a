"""Patient vitals dashboard: fetch a patient list, pick one patient, render their vitals."""

__version__ = "1.0.0"
