from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import audited_error, audited_response, get_transaction_id
from database import get_db
from exceptions import LoanIntakeError
from schemas.applicant import ApplicantCreate, ApplicantResponse, ApplicantUpdate
from services import applicants as applicants_service
from services.applications import list_applications_for_applicant

router = APIRouter(prefix="/api/applicants", tags=["applicants"])

LOG_CREATE = "CREATE_APPLICANT"
LOG_GET = "GET_APPLICANT"
LOG_UPDATE = "UPDATE_APPLICANT"
LOG_LIST_APPLICATIONS = "LIST_APPLICATIONS"


def _applicant_to_response(applicant) -> dict:
    return ApplicantResponse.model_validate(applicant).model_dump(mode="json")


@router.post("", status_code=201)
async def create_applicant(
    body: ApplicantCreate,
    db: AsyncSession = Depends(get_db),
    transaction_id: str = Depends(get_transaction_id),
):
    request_payload = body.model_dump(mode="json", by_alias=True)
    fields = body.model_dump(exclude={"id"})
    try:
        applicant = await applicants_service.create_applicant(db, body.id, **fields)
    except LoanIntakeError as e:
        return await audited_error(db, transaction_id, LOG_CREATE, request_payload, e)
    return await audited_response(
        db, transaction_id, LOG_CREATE, request_payload, _applicant_to_response(applicant), status_code=201
    )


@router.get("/{applicant_id}")
async def get_applicant(
    applicant_id: str,
    db: AsyncSession = Depends(get_db),
    transaction_id: str = Depends(get_transaction_id),
):
    request_payload = {"applicantId": applicant_id}
    try:
        applicant = await applicants_service.get_applicant(db, applicant_id)
    except LoanIntakeError as e:
        return await audited_error(db, transaction_id, LOG_GET, request_payload, e)
    return await audited_response(db, transaction_id, LOG_GET, request_payload, _applicant_to_response(applicant))


@router.patch("/{applicant_id}")
async def update_applicant(
    applicant_id: str,
    body: ApplicantUpdate,
    db: AsyncSession = Depends(get_db),
    transaction_id: str = Depends(get_transaction_id),
):
    request_payload = {"applicantId": applicant_id, **body.model_dump(mode="json", by_alias=True, exclude_unset=True)}
    try:
        applicant = await applicants_service.update_applicant(db, applicant_id, body.model_dump(exclude_unset=True))
    except LoanIntakeError as e:
        return await audited_error(db, transaction_id, LOG_UPDATE, request_payload, e)
    return await audited_response(db, transaction_id, LOG_UPDATE, request_payload, _applicant_to_response(applicant))


@router.get("/{applicant_id}/applications")
async def list_applications(
    applicant_id: str,
    db: AsyncSession = Depends(get_db),
    transaction_id: str = Depends(get_transaction_id),
):
    request_payload = {"applicantId": applicant_id}
    try:
        await applicants_service.get_applicant(db, applicant_id)
    except LoanIntakeError as e:
        return await audited_error(db, transaction_id, LOG_LIST_APPLICATIONS, request_payload, e)
    apps = await list_applications_for_applicant(db, applicant_id)
    return await audited_response(
        db,
        transaction_id,
        LOG_LIST_APPLICATIONS,
        request_payload,
        [a.model_dump(mode="json") for a in apps],
    )
