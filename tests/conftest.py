"""테스트 인프라 — 임시 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Temporary on-disk SQLite database (aiosqlite), session,
and httpx client fixtures. Each test gets a fresh database file under
``tmp_path``; the schema comes from the ORM metadata via ``create_schema``.
"""

import sqlite3
from collections.abc import AsyncGenerator
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.database import get_db
from app.main import app
from app.models import Company
from app.seed import create_schema
from app.utils.jwt import create_access_token

# asyncpg는 NUMERIC에 Decimal을 바인딩; SQLite 드라이버는 문자열로 저장
# asyncpg binds NUMERIC as Decimal; the SQLite driver needs it as text
sqlite3.register_adapter(Decimal, str)


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite 외래 키 강제 — SQLite leaves foreign keys off by default."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 스키마를 생성합니다."""
    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    event.listen(eng.sync_engine, "connect", _enable_foreign_keys)
    await create_schema(eng)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def companies(db: AsyncSession) -> list[Company]:
    """테스트 회사 2개를 생성합니다 (acme, globex)."""
    rows = [
        Company(handle="acme", name="Acme Corp", num_employees=10),
        Company(handle="globex", name="Globex", num_employees=500),
    ]
    db.add_all(rows)
    await db.commit()
    return rows


def make_token(username: str, is_admin: bool = False) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token({"sub": username, "is_admin": is_admin})


@pytest.fixture
def admin_token() -> str:
    return make_token("admin", is_admin=True)


@pytest.fixture
def user_token() -> str:
    return make_token("u1")


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
