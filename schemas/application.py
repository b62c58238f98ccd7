from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from models.application import MAX_ROW_ID
from models.status import StatusCode

# Integers the store can hold
INT64_BOUNDS = {"ge": -MAX_ROW_ID - 1, "le": MAX_ROW_ID}


class ApplicationSubmit(BaseModel):
    """Submission body. Amount, term and payment are taken as given."""

    applicant_id: str = Field(..., alias="applicantId", max_length=64)
    salary: Optional[Decimal] = Field(None, max_digits=10, decimal_places=2)
    loan_amount: Decimal = Field(..., alias="loanAmount", max_digits=10, decimal_places=2)
    term_months: int = Field(..., alias="termMonths", **INT64_BOUNDS)
    credit_score: Optional[int] = Field(None, alias="creditScore", **INT64_BOUNDS)
    status_id: int = Field(StatusCode.PENDING.value, alias="statusId", **INT64_BOUNDS)
    monthly_payment: Optional[Decimal] = Field(None, alias="monthlyPayment", max_digits=10, decimal_places=2)

    model_config = {"populate_by_name": True}


class StatusUpdate(BaseModel):
    status_id: int = Field(..., alias="statusId", **INT64_BOUNDS)

    model_config = {"populate_by_name": True}


class ApplicationSummary(BaseModel):
    id: int
    applicant_id: str
    salary: Optional[Decimal] = None
    loan_amount: Decimal
    term_months: int
    credit_score: Optional[int] = None
    status_id: int
    monthly_payment: Optional[Decimal] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ApplicationDetail(ApplicationSummary):
    """Application joined with its applicant.

    salary / credit_score are the snapshots taken at submission;
    applicant_salary / applicant_credit_score are the applicant's current values.
    """

    status_name: Optional[str] = None
    applicant_name: str
    applicant_phone: Optional[str] = None
    applicant_email: Optional[str] = None
    applicant_salary: Optional[Decimal] = None
    applicant_credit_score: Optional[int] = None
    applicant_national_id: Optional[str] = None
    applicant_gender: Optional[str] = None
    applicant_address: Optional[str] = None
    applicant_created_at: Optional[datetime] = None
