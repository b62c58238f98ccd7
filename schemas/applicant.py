from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from schemas.application import INT64_BOUNDS


class ApplicantFields(BaseModel):
    phone: Optional[str] = Field(None, max_length=32)
    email: Optional[str] = Field(None, max_length=256)
    salary: Optional[Decimal] = Field(None, max_digits=10, decimal_places=2)
    credit_score: Optional[int] = Field(None, alias="creditScore", **INT64_BOUNDS)
    national_id: Optional[str] = Field(None, alias="nationalId", max_length=64)
    gender: Optional[str] = Field(None, min_length=1, max_length=1)
    address: Optional[str] = None

    model_config = {"populate_by_name": True}


class ApplicantCreate(ApplicantFields):
    id: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., max_length=256)


class ApplicantUpdate(ApplicantFields):
    """Corrections to an applicant; only fields present in the body are applied."""

    name: Optional[str] = Field(None, max_length=256)

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("name cannot be cleared")
        return v


class ApplicantResponse(BaseModel):
    id: str
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    salary: Optional[Decimal] = None
    credit_score: Optional[int] = None
    national_id: Optional[str] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
