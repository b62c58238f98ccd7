from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import audited_error, audited_response, get_status_catalog, get_transaction_id
from config import settings
from database import get_db
from exceptions import ApplicationNotFoundError, LoanIntakeError
from schemas.application import ApplicationSubmit, StatusUpdate
from services import applications as applications_service
from services.status_catalog import StatusCatalog

router = APIRouter(prefix="/api/applications", tags=["applications"])

LOG_SUBMIT = "SUBMIT_APPLICATION"
LOG_DETAIL = "GET_APPLICATION_DETAIL"
LOG_SET_STATUS = "SET_APPLICATION_STATUS"


@router.post("", status_code=201)
async def submit_application(
    body: ApplicationSubmit,
    db: AsyncSession = Depends(get_db),
    transaction_id: str = Depends(get_transaction_id),
    catalog: StatusCatalog = Depends(get_status_catalog),
):
    request_payload = body.model_dump(mode="json", by_alias=True)
    try:
        application_id = await applications_service.submit_application(
            db,
            applicant_id=body.applicant_id,
            salary=body.salary,
            loan_amount=body.loan_amount,
            term_months=body.term_months,
            credit_score=body.credit_score,
            status_id=body.status_id,
            monthly_payment=body.monthly_payment,
            catalog=catalog if settings.strict_status_codes else None,
        )
    except LoanIntakeError as e:
        return await audited_error(db, transaction_id, LOG_SUBMIT, request_payload, e)
    return await audited_response(db, transaction_id, LOG_SUBMIT, request_payload, {"id": application_id}, status_code=201)


@router.get("/{application_id}")
async def get_application(
    application_id: int,
    db: AsyncSession = Depends(get_db),
    transaction_id: str = Depends(get_transaction_id),
):
    request_payload = {"applicationId": application_id}
    detail = await applications_service.get_application_detail(db, application_id)
    if detail is None:
        return await audited_error(db, transaction_id, LOG_DETAIL, request_payload, ApplicationNotFoundError(application_id))
    return await audited_response(db, transaction_id, LOG_DETAIL, request_payload, detail.model_dump(mode="json"))


@router.put("/{application_id}/status")
async def set_application_status(
    application_id: int,
    body: StatusUpdate,
    db: AsyncSession = Depends(get_db),
    transaction_id: str = Depends(get_transaction_id),
    catalog: StatusCatalog = Depends(get_status_catalog),
):
    request_payload = {"applicationId": application_id, **body.model_dump(mode="json", by_alias=True)}
    try:
        updated = await applications_service.set_application_status(
            db,
            application_id,
            body.status_id,
            catalog=catalog if settings.strict_status_codes else None,
        )
        if not updated:
            raise ApplicationNotFoundError(application_id)
    except LoanIntakeError as e:
        return await audited_error(db, transaction_id, LOG_SET_STATUS, request_payload, e)
    return await audited_response(
        db,
        transaction_id,
        LOG_SET_STATUS,
        request_payload,
        {"id": application_id, "status_id": body.status_id, "status_name": catalog.name_of(body.status_id)},
    )
