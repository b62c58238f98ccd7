from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models import AuditLogEntry

logger = logging.getLogger(__name__)


async def record_audit(
    session: AsyncSession,
    transaction_id: str,
    request_payload: Optional[str],
    response_payload: Optional[str],
    log_type: str,
) -> AuditLogEntry:
    """Append one audit entry. Payloads are stored verbatim."""
    entry = AuditLogEntry(
        transaction_id=transaction_id,
        request_payload=request_payload,
        response_payload=response_payload,
        log_type=log_type,
    )
    session.add(entry)
    await session.flush()
    logger.debug("Audit %s recorded for transaction %s", log_type, transaction_id)
    return entry


async def list_audit_entries(
    session: AsyncSession,
    transaction_id: Optional[str] = None,
    log_type: Optional[str] = None,
) -> list[AuditLogEntry]:
    stmt = select(AuditLogEntry).order_by(AuditLogEntry.id)
    if transaction_id is not None:
        stmt = stmt.where(AuditLogEntry.transaction_id == transaction_id)
    if log_type is not None:
        stmt = stmt.where(AuditLogEntry.log_type == log_type)
    result = await session.execute(stmt)
    return list(result.scalars().all())
