from models.applicant import Applicant
from models.application import LoanApplication
from models.audit import AuditLogEntry
from models.status import ApplicationStatus, StatusCode

__all__ = [
    "Applicant",
    "ApplicationStatus",
    "AuditLogEntry",
    "LoanApplication",
    "StatusCode",
]
