from vitals_dashboard.clients.patient_api_client import PatientAPIClient

__all__ = ["PatientAPIClient"]
