from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from exceptions import ApplicantNotFoundError, DuplicateApplicantError
from models import Applicant

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = (
    "name",
    "phone",
    "email",
    "salary",
    "credit_score",
    "national_id",
    "gender",
    "address",
)


async def create_applicant(session: AsyncSession, applicant_id: str, **fields: Any) -> Applicant:
    """Onboard a new applicant. The id is caller supplied and must be unused."""
    unknown = set(fields) - set(MUTABLE_FIELDS)
    if unknown:
        raise TypeError(f"Unknown applicant fields: {', '.join(sorted(unknown))}")
    applicant = Applicant(id=applicant_id, **fields)
    session.add(applicant)
    try:
        await session.flush()
    except IntegrityError as e:
        await session.rollback()
        logger.info("Duplicate applicant id %s", applicant_id)
        raise DuplicateApplicantError(applicant_id) from e
    await session.refresh(applicant)
    logger.info("Created applicant %s", applicant_id)
    return applicant


async def get_applicant(session: AsyncSession, applicant_id: str) -> Applicant:
    result = await session.execute(select(Applicant).where(Applicant.id == applicant_id))
    applicant = result.scalar_one_or_none()
    if not applicant:
        raise ApplicantNotFoundError(applicant_id)
    return applicant


async def update_applicant(session: AsyncSession, applicant_id: str, changes: dict[str, Any]) -> Applicant:
    """Correct mutable applicant fields. Id and created_at never change."""
    applicant = await get_applicant(session, applicant_id)
    for key, value in changes.items():
        if key not in MUTABLE_FIELDS:
            raise TypeError(f"Applicant field {key!r} cannot be changed")
        setattr(applicant, key, value)
    await session.flush()
    return applicant
