"""Error taxonomy for the loan intake service.

Only the storage layer enforces anything: unknown applicant on submit
(foreign key) and duplicate applicant ids (primary key). Lookups that come
back empty are reported by the HTTP layer, not by the services.
"""


class LoanIntakeError(Exception):
    """Base exception for all loan intake errors."""

    status_code = 400


class EntityNotFoundError(LoanIntakeError):
    """Raised when a requested entity does not exist."""

    status_code = 404


class ApplicantNotFoundError(EntityNotFoundError):
    def __init__(self, applicant_id: str):
        super().__init__(f"Applicant {applicant_id} not found")
        self.applicant_id = applicant_id


class ApplicationNotFoundError(EntityNotFoundError):
    def __init__(self, application_id: int):
        super().__init__(f"Application {application_id} not found")
        self.application_id = application_id


class ReferentialIntegrityError(LoanIntakeError):
    """Raised when a foreign key reference is violated."""

    status_code = 409


class DuplicateApplicantError(LoanIntakeError):
    """Raised when an applicant id is already taken."""

    status_code = 409

    def __init__(self, applicant_id: str):
        super().__init__(f"Applicant {applicant_id} already exists")
        self.applicant_id = applicant_id


class UnknownStatusError(LoanIntakeError):
    """Raised in strict mode when a status code is not in the catalog."""

    status_code = 422

    def __init__(self, status_id: int):
        super().__init__(f"Unknown status code {status_id}")
        self.status_id = status_id
