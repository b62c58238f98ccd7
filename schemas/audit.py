from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class AuditEntryCreate(BaseModel):
    transaction_id: str = Field(..., alias="transactionId", min_length=1, max_length=128)
    request_payload: Optional[str] = Field(None, alias="requestPayload")
    response_payload: Optional[str] = Field(None, alias="responsePayload")
    log_type: str = Field(..., alias="logType", min_length=1, max_length=64)

    model_config = {"populate_by_name": True}


class AuditEntryResponse(BaseModel):
    id: int
    transaction_id: str
    request_payload: Optional[str] = None
    response_payload: Optional[str] = None
    log_type: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
