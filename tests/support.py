"""Shared fixtures for the service tests: one fresh in-memory database per test."""
import unittest
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from database import enable_sqlite_foreign_keys, init_db
from models import Applicant


def applicant_fields(**overrides):
    data = {
        "name": "Arjun Mehta",
        "phone": "9012345678",
        "email": "arjun.mehta@example.com",
        "salary": Decimal("1000.00"),
        "credit_score": 650,
        "national_id": "ID-310-886-547",
        "gender": "M",
        "address": "88 Linking Road, Mumbai",
    }
    data.update(overrides)
    return data


class DatabaseTestCase(unittest.IsolatedAsyncioTestCase):
    enforce_foreign_keys = True

    async def asyncSetUp(self):
        self.engine = create_async_engine(
            "sqlite+aiosqlite://",
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
        if self.enforce_foreign_keys:
            enable_sqlite_foreign_keys(self.engine)
        await init_db(self.engine)
        self.session_factory = async_sessionmaker(self.engine, class_=AsyncSession, expire_on_commit=False)
        self.session = self.session_factory()

    async def asyncTearDown(self):
        await self.session.close()
        await self.engine.dispose()

    async def add_applicant(self, applicant_id: str = "A1003", **overrides) -> Applicant:
        applicant = Applicant(id=applicant_id, **applicant_fields(**overrides))
        self.session.add(applicant)
        await self.session.commit()
        return applicant
