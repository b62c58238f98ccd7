from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from schemas.audit import AuditEntryCreate, AuditEntryResponse
from services.audit import list_audit_entries, record_audit
from utils.case import dict_keys_to_camel

router = APIRouter(prefix="/api/audit", tags=["audit"])


@router.post("", status_code=201)
async def create_audit_entry(body: AuditEntryCreate, db: AsyncSession = Depends(get_db)):
    entry = await record_audit(
        db,
        transaction_id=body.transaction_id,
        request_payload=body.request_payload,
        response_payload=body.response_payload,
        log_type=body.log_type,
    )
    return {"id": entry.id}


@router.get("")
async def list_entries(
    transaction_id: Optional[str] = Query(None, alias="transactionId"),
    log_type: Optional[str] = Query(None, alias="logType"),
    db: AsyncSession = Depends(get_db),
):
    entries = await list_audit_entries(db, transaction_id=transaction_id, log_type=log_type)
    return [
        dict_keys_to_camel(AuditEntryResponse.model_validate(e).model_dump(mode="json"))
        for e in entries
    ]
