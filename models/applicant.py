from sqlalchemy import Column, DateTime, Integer, Numeric, String, Text, func
from sqlalchemy.orm import relationship

from database import Base


class Applicant(Base):
    __tablename__ = "applicants"

    # Caller-supplied identity, never rewritten
    id = Column(String(64), primary_key=True, index=True)
    name = Column(String(256), nullable=False)
    phone = Column(String(32), nullable=True)
    email = Column(String(256), nullable=True)
    salary = Column(Numeric(10, 2), nullable=True)
    credit_score = Column(Integer, nullable=True)
    national_id = Column(String(64), nullable=True)
    gender = Column(String(1), nullable=True)
    address = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __mapper_args__ = {"eager_defaults": True}

    applications = relationship("LoanApplication", back_populates="applicant", passive_deletes="all")
