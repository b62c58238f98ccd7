from schemas.applicant import ApplicantCreate, ApplicantResponse, ApplicantUpdate
from schemas.application import ApplicationDetail, ApplicationSubmit, ApplicationSummary, StatusUpdate
from schemas.audit import AuditEntryCreate, AuditEntryResponse

__all__ = [
    "ApplicantCreate",
    "ApplicantResponse",
    "ApplicantUpdate",
    "ApplicationDetail",
    "ApplicationSubmit",
    "ApplicationSummary",
    "AuditEntryCreate",
    "AuditEntryResponse",
    "StatusUpdate",
]
