from sqlalchemy import Column, DateTime, Integer, String, Text, func

from database import Base


class AuditLogEntry(Base):
    """Append-only record of one request/response exchange."""

    __tablename__ = "audit_log_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Correlation key; one transaction may log several entries
    transaction_id = Column(String(128), nullable=False, index=True)
    request_payload = Column(Text, nullable=True)
    response_payload = Column(Text, nullable=True)
    log_type = Column(String(64), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __mapper_args__ = {"eager_defaults": True}
