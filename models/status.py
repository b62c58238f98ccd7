import enum

from sqlalchemy import Column, Integer, String, event

from database import Base


class StatusCode(enum.IntEnum):
    """Codes seeded into the catalog. The catalog itself may hold more."""

    PENDING = 1
    VALIDATED = 2
    REJECTED = 5


SEED_STATUSES = [
    {"status_id": StatusCode.PENDING.value, "status_name": "Pending"},
    {"status_id": StatusCode.VALIDATED.value, "status_name": "Validated"},
    {"status_id": StatusCode.REJECTED.value, "status_name": "Rejected"},
]


class ApplicationStatus(Base):
    __tablename__ = "application_statuses"

    status_id = Column(Integer, primary_key=True, autoincrement=False)
    status_name = Column(String(64), nullable=False, unique=True)


@event.listens_for(ApplicationStatus.__table__, "after_create")
def _seed_statuses(target, connection, **kw):
    connection.execute(target.insert(), SEED_STATUSES)
