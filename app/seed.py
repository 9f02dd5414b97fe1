"""초기 데이터 시드 스크립트 — 테이블 생성 및 샘플 회사 등록.

Seed script — Creates the tables and a few sample companies.

Usage:
    python -m app.seed

Creates:
    - companies, jobs, applications 테이블 (Tables from the ORM metadata)
    - 샘플 회사 (Sample companies, skipped when any company exists)
"""

import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.database import Base, engine
from app.models import Company

SAMPLE_COMPANIES: list[dict[str, object]] = [
    {"handle": "acme", "name": "Acme Corp", "num_employees": 120, "description": "Anvils and rockets."},
    {"handle": "globex", "name": "Globex", "num_employees": 2500, "description": "Global exports."},
]


async def create_schema(bind: AsyncEngine) -> None:
    """ORM 메타데이터로 모든 테이블을 생성합니다 (Create all tables; idempotent)."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed(bind: AsyncEngine = engine) -> int:
    """데이터베이스를 초기 데이터로 시드합니다.

    Seed the database: create tables, then insert the sample companies.
    Idempotent: 이미 회사가 있으면 건너뜁니다 (Skips if any company exists).

    Returns:
        int: 새로 추가된 회사 수 (Number of companies inserted)
    """
    await create_schema(bind)

    factory = async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)
    async with factory() as db:
        result = await db.execute(select(Company).limit(1))
        if result.scalar_one_or_none():
            print("Already seeded. Skipping.")
            return 0

        db.add_all([Company(**data) for data in SAMPLE_COMPANIES])
        await db.commit()
        print(f"Seeded {len(SAMPLE_COMPANIES)} companies")
        return len(SAMPLE_COMPANIES)


if __name__ == "__main__":
    asyncio.run(seed())
