"""
Seed demo applicants for local development.
Run: python -m scripts.seed_applicants (from the project root).
"""
import asyncio
import os
import sys
from decimal import Decimal

# Add parent so we can import from the project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import select

from database import AsyncSessionLocal, init_db
from models import Applicant


APPLICANTS_DATA = [
    {
        "id": "A1001",
        "name": "Ravi Kumar",
        "phone": "9876543210",
        "email": "ravi.kumar@example.com",
        "salary": Decimal("85000.00"),
        "credit_score": 742,
        "national_id": "ID-554-120-981",
        "gender": "M",
        "address": "14 Park Street, Kolkata",
    },
    {
        "id": "A1002",
        "name": "Priya Sharma",
        "phone": "9123456780",
        "email": "priya.sharma@example.com",
        "salary": Decimal("62000.00"),
        "credit_score": 698,
        "national_id": "ID-771-402-113",
        "gender": "F",
        "address": "2 MG Road, Bengaluru",
    },
    {
        "id": "A1003",
        "name": "Arjun Mehta",
        "phone": "9012345678",
        "email": "arjun.mehta@example.com",
        "salary": Decimal("1000.00"),
        "credit_score": 650,
        "national_id": "ID-310-886-547",
        "gender": "M",
        "address": "88 Linking Road, Mumbai",
    },
]


async def seed():
    await init_db()
    async with AsyncSessionLocal() as session:
        for data in APPLICANTS_DATA:
            existing = await session.execute(select(Applicant).where(Applicant.id == data["id"]))
            if existing.scalar_one_or_none():
                print(f"Applicant {data['id']} already exists, skipping")
                continue
            session.add(Applicant(**data))
            print(f"Seeded applicant: {data['name']}")
        await session.commit()
    print("Seed complete.")


if __name__ == "__main__":
    asyncio.run(seed())
