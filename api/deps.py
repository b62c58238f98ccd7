"""
Request plumbing shared by the routers: transaction ids and the audit trail.

Every externally visible call records exactly one audit entry holding the
JSON request and response bodies, error responses included.
"""
from __future__ import annotations

import json
import uuid
from typing import Any, Optional

from fastapi import Header, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from exceptions import LoanIntakeError
from services.audit import record_audit
from services.status_catalog import StatusCatalog
from utils.case import dict_keys_to_camel

TRANSACTION_HEADER = "X-Transaction-Id"


def get_transaction_id(x_transaction_id: Optional[str] = Header(None)) -> str:
    return x_transaction_id or uuid.uuid4().hex


def get_status_catalog(request: Request) -> StatusCatalog:
    return request.app.state.status_catalog


def _dumps(payload: Any) -> Optional[str]:
    if payload is None:
        return None
    return json.dumps(jsonable_encoder(payload), sort_keys=True)


async def audited_response(
    db: AsyncSession,
    transaction_id: str,
    log_type: str,
    request_payload: Any,
    body: Any,
    status_code: int = 200,
) -> JSONResponse:
    """Record the exchange, then return ``body`` (camelCased) as the response."""
    content = jsonable_encoder(dict_keys_to_camel(body))
    await record_audit(db, transaction_id, _dumps(request_payload), _dumps(content), log_type)
    return JSONResponse(
        status_code=status_code,
        content=content,
        headers={TRANSACTION_HEADER: transaction_id},
    )


async def audited_error(
    db: AsyncSession,
    transaction_id: str,
    log_type: str,
    request_payload: Any,
    error: LoanIntakeError,
) -> JSONResponse:
    return await audited_response(
        db, transaction_id, log_type, request_payload, {"detail": str(error)}, status_code=error.status_code
    )
