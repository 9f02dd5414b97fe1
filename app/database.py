"""데이터베이스 엔진, 세션 및 쿼리 실행 모듈.

Database engine, session and query execution module.
Sets up the async SQLAlchemy engine, session factory and ORM base class,
and exposes ``execute_query`` — the single entry point repositories use to
run positional-placeholder SQL (``$1 .. $n``) against the store.
"""

import logging
import re
from collections.abc import AsyncGenerator, Sequence
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import settings

logger = logging.getLogger(__name__)

# $1, $2 ... 위치 플레이스홀더 — Positional placeholder pattern
_PLACEHOLDER = re.compile(r"\$(\d+)")

# 비동기 데이터베이스 엔진 — Async database engine (asyncpg driver)
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
    pool_size=5,
    max_overflow=10,
)

# 비동기 세션 팩토리 — Async session factory
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models (used for DDL only;
    reads and writes go through ``execute_query``).
    """

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """비동기 데이터베이스 세션을 생성하고 요청 종료 시 닫습니다.

    FastAPI dependency that yields an async database session.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()


def bind_positional(sql: str, values: Sequence[Any]) -> tuple[str, dict[str, Any]]:
    """``$n`` 플레이스홀더를 SQLAlchemy 이름 바인드로 변환합니다.

    Rewrite ``$n`` placeholders as ``:p<n>`` named binds and build the
    matching parameter dict. Every placeholder must have a value and every
    value must be referenced, otherwise the SQL and its binds have drifted.

    Raises:
        ValueError: 플레이스홀더와 값 개수 불일치 (Placeholder/value mismatch)
    """
    indexes: set[int] = {int(n) for n in _PLACEHOLDER.findall(sql)}
    if indexes != set(range(1, len(values) + 1)):
        raise ValueError(
            f"SQL placeholders {sorted(indexes)} do not match {len(values)} bound values"
        )
    params: dict[str, Any] = {f"p{i}": value for i, value in enumerate(values, start=1)}
    return _PLACEHOLDER.sub(r":p\1", sql), params


async def execute_query(
    db: AsyncSession,
    sql: str,
    values: Sequence[Any] = (),
) -> list[dict[str, Any]]:
    """위치 플레이스홀더 SQL을 실행하고 행 목록을 반환합니다.

    Execute ``sql`` with ``values`` bound to ``$1 .. $n`` in order.
    Values are never interpolated into the SQL text.

    Args:
        db: 비동기 데이터베이스 세션 (Async database session)
        sql: ``$n`` 플레이스홀더를 포함한 SQL (SQL with positional placeholders)
        values: 플레이스홀더에 순서대로 바인딩될 값 (Values bound in order)

    Returns:
        list[dict[str, Any]]: 컬럼명→값 매핑 목록, 결과 행이 없는 문장은 빈 목록
                              (Row mappings; empty for statements returning no rows)
    """
    statement, params = bind_positional(sql, values)
    logger.debug("SQL %s | %d bound value(s)", " ".join(sql.split()), len(params))
    result = await db.execute(text(statement), params)
    if not result.returns_rows:
        return []
    return [dict(row) for row in result.mappings().all()]
