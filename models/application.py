from sqlalchemy import DDL, Column, DateTime, ForeignKey, Integer, Numeric, Sequence, String, event, func
from sqlalchemy.orm import relationship

from database import Base

FIRST_APPLICATION_ID = 1000
# Largest value a 64-bit integer column holds
MAX_ROW_ID = 2**63 - 1


class LoanApplication(Base):
    __tablename__ = "loan_applications"
    __table_args__ = {
        "sqlite_autoincrement": True,
        "mysql_auto_increment": str(FIRST_APPLICATION_ID),
    }

    id = Column(
        Integer,
        Sequence("loan_applications_id_seq", start=FIRST_APPLICATION_ID),
        primary_key=True,
        index=True,
    )
    applicant_id = Column(
        String(64),
        ForeignKey("applicants.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    # Snapshots taken at submission; they drift from the applicant's live values
    salary = Column(Numeric(10, 2), nullable=True)
    credit_score = Column(Integer, nullable=True)

    loan_amount = Column(Numeric(10, 2), nullable=False)
    term_months = Column(Integer, nullable=False)
    # No FK: codes outside the catalog are stored as given
    status_id = Column(Integer, nullable=False, index=True)
    monthly_payment = Column(Numeric(10, 2), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __mapper_args__ = {"eager_defaults": True}

    applicant = relationship("Applicant", back_populates="applications")


# PostgreSQL uses the sequence, MySQL the table AUTO_INCREMENT option.
# SQLite ignores both; prime AUTOINCREMENT so the first id handed out is 1000.
event.listen(
    LoanApplication.__table__,
    "after_create",
    DDL(
        "INSERT INTO sqlite_sequence (name, seq) "
        f"VALUES ('loan_applications', {FIRST_APPLICATION_ID - 1})"
    ).execute_if(dialect="sqlite"),
)
