"""지원 내역 레포지토리 — applications 테이블 쿼리.

Application Repository — Queries for the applications table
(which jobs a username has applied to).
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.repositories.base import SqlRepository
from app.repositories.job_repository import job_repository


class ApplicationRepository(SqlRepository):
    """applications 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    table = "applications"
    label = "application"
    columns = ("username", "job_id")
    order_by = "job_id"

    async def apply(self, db: AsyncSession, username: str, job_id: int) -> dict[str, Any]:
        """사용자의 공고 지원을 기록합니다.

        Record that ``username`` applied to ``job_id``.

        Raises:
            NotFoundError: 공고가 없음 (No such job)
            DuplicateError: 이미 지원함 (Already applied)
        """
        await job_repository.get(db, job_id)
        rows = await self._query(
            db,
            f"""INSERT INTO applications (username, job_id)
                VALUES ($1, $2)
                RETURNING {self.returning}""",
            [username, job_id],
        )
        return rows[0]

    async def job_ids_for_user(self, db: AsyncSession, username: str) -> list[int]:
        """사용자가 지원한 공고 ID 목록 — job ids ordered ascending."""
        rows = await self._query(
            db,
            f"SELECT job_id FROM applications WHERE username = $1 ORDER BY {self.order_by}",
            [username],
        )
        return [row["job_id"] for row in rows]


# 싱글턴 인스턴스 — Singleton instance
application_repository: ApplicationRepository = ApplicationRepository()
