"""
Loan application intake, status transitions and the application detail view.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from exceptions import ReferentialIntegrityError, UnknownStatusError
from models import Applicant, ApplicationStatus, LoanApplication
from models.application import MAX_ROW_ID
from schemas.application import ApplicationDetail, ApplicationSummary
from services.status_catalog import StatusCatalog

logger = logging.getLogger(__name__)


def _is_storable_id(application_id: int) -> bool:
    # Ids past the 64-bit range overflow the driver; no row can carry them
    return 0 <= application_id <= MAX_ROW_ID


async def submit_application(
    session: AsyncSession,
    applicant_id: str,
    salary: Optional[Decimal],
    loan_amount: Decimal,
    term_months: int,
    credit_score: Optional[int],
    status_id: int,
    monthly_payment: Optional[Decimal],
    catalog: Optional[StatusCatalog] = None,
) -> int:
    """
    Persist a new loan application and return its id.

    Amount, term and payment are stored as given; nothing is recomputed.
    The applicant must exist, which the foreign key enforces. When a catalog
    is given the initial status must be in it.
    """
    missing = [
        name
        for name, value in (
            ("applicant_id", applicant_id),
            ("loan_amount", loan_amount),
            ("term_months", term_months),
            ("status_id", status_id),
        )
        if value is None
    ]
    if missing:
        raise ValueError(f"Missing required application fields: {', '.join(missing)}")
    if catalog is not None and status_id not in catalog:
        raise UnknownStatusError(status_id)
    app = LoanApplication(
        applicant_id=applicant_id,
        salary=salary,
        loan_amount=loan_amount,
        term_months=term_months,
        credit_score=credit_score,
        status_id=int(status_id),
        monthly_payment=monthly_payment,
    )
    session.add(app)
    try:
        await session.flush()
    except IntegrityError as e:
        await session.rollback()
        logger.warning("Rejected application for unknown applicant %s", applicant_id)
        raise ReferentialIntegrityError(f"Applicant {applicant_id} does not exist") from e
    logger.info("Submitted application %s for applicant %s", app.id, applicant_id)
    return app.id


async def set_application_status(
    session: AsyncSession,
    application_id: int,
    status_id: int,
    catalog: Optional[StatusCatalog] = None,
) -> int:
    """
    Overwrite an application's status; returns the number of rows updated.

    A missing application is not an error here (0 is returned). Transitions
    are not checked. When a catalog is given the code must be in it.
    """
    if catalog is not None and status_id not in catalog:
        raise UnknownStatusError(status_id)
    if not _is_storable_id(application_id):
        logger.info("Status update for out-of-range application id %s matched no rows", application_id)
        return 0
    result = await session.execute(
        update(LoanApplication)
        .where(LoanApplication.id == application_id)
        .values(status_id=int(status_id))
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        logger.info("Status update for application %s matched no rows", application_id)
    else:
        logger.info("Application %s moved to status %s", application_id, status_id)
    return result.rowcount


_DETAIL_COLUMNS = (
    LoanApplication.id,
    LoanApplication.applicant_id,
    LoanApplication.salary,
    LoanApplication.loan_amount,
    LoanApplication.term_months,
    LoanApplication.credit_score,
    LoanApplication.status_id,
    ApplicationStatus.status_name,
    LoanApplication.monthly_payment,
    LoanApplication.created_at,
    Applicant.name.label("applicant_name"),
    Applicant.phone.label("applicant_phone"),
    Applicant.email.label("applicant_email"),
    Applicant.salary.label("applicant_salary"),
    Applicant.credit_score.label("applicant_credit_score"),
    Applicant.national_id.label("applicant_national_id"),
    Applicant.gender.label("applicant_gender"),
    Applicant.address.label("applicant_address"),
    Applicant.created_at.label("applicant_created_at"),
)


async def get_application_detail(session: AsyncSession, application_id: int) -> Optional[ApplicationDetail]:
    """
    Join an application with its applicant.

    Inner join: a missing application or a dangling applicant reference yields None.
    """
    if not _is_storable_id(application_id):
        return None
    result = await session.execute(
        select(*_DETAIL_COLUMNS)
        .select_from(LoanApplication)
        .join(Applicant, LoanApplication.applicant_id == Applicant.id)
        .outerjoin(ApplicationStatus, LoanApplication.status_id == ApplicationStatus.status_id)
        .where(LoanApplication.id == application_id)
    )
    row = result.mappings().one_or_none()
    if row is None:
        return None
    return ApplicationDetail.model_validate(dict(row))


async def list_applications_for_applicant(session: AsyncSession, applicant_id: str) -> list[ApplicationSummary]:
    result = await session.execute(
        select(LoanApplication)
        .where(LoanApplication.applicant_id == applicant_id)
        .order_by(LoanApplication.id)
    )
    return [ApplicationSummary.model_validate(a) for a in result.scalars().all()]
