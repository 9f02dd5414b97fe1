"""채용 공고 레포지토리 — jobs 테이블 CRUD 및 필터 조회.

Job Repository — CRUD and filtered listing for the jobs table.
"""

from collections.abc import Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.repositories.base import SqlRepository
from app.utils.exceptions import BadRequestError
from app.utils.sql import LIKE_ESCAPE, FilterRule, contains_pattern, resolve_column

# 목록 필터 — 이 순서대로 술어와 플레이스홀더가 생성됨
# List filters; predicates and placeholders are emitted in this order
JOB_FILTERS: tuple[FilterRule, ...] = (
    FilterRule("title", "lower(title)", "LIKE", contains_pattern, LIKE_ESCAPE),
    FilterRule("minSalary", "salary", ">="),
    FilterRule("hasEquity", "equity > 0"),
)

# 외부(camelCase) 필드명 → 컬럼명 — External field name → column name
JOB_COLUMN_NAMES: dict[str, str] = {
    "companyHandle": "company_handle",
}

_REQUIRED: tuple[str, ...] = ("title", "company_handle")
_INSERTABLE: tuple[str, ...] = ("title", "salary", "equity", "company_handle")


class JobRepository(SqlRepository):
    """jobs 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    table = "jobs"
    label = "job"
    columns = ("id", "title", "salary", "equity", "company_handle")
    order_by = "title, id"
    column_names = JOB_COLUMN_NAMES
    filter_rules = JOB_FILTERS
    updatable = frozenset({"title", "salary", "equity"})
    not_null = frozenset(_REQUIRED)

    async def create(self, db: AsyncSession, data: Mapping[str, Any]) -> dict[str, Any]:
        """새 채용 공고를 생성합니다.

        Insert a job and return the stored row including its generated id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: ``title``, ``company_handle`` 필수, ``salary``, ``equity`` 선택
                  (Required title and company handle; optional salary and equity)

        Returns:
            dict[str, Any]: ``{id, title, salary, equity, company_handle}``

        Raises:
            BadRequestError: 필수 필드 누락 또는 알 수 없는 필드 (Missing or unknown field)
            DuplicateError: 같은 회사에 같은 제목 또는 존재하지 않는 회사 (Constraint violation)
        """
        row: dict[str, Any] = {resolve_column(k, self.column_names): v for k, v in data.items()}

        unknown = sorted(set(row) - set(_INSERTABLE))
        if unknown:
            raise BadRequestError(f"Unknown job field(s): {', '.join(unknown)}")
        missing = [name for name in _REQUIRED if row.get(name) is None]
        if missing:
            raise BadRequestError(f"Missing job field(s): {', '.join(missing)}")

        rows = await self._query(
            db,
            f"""INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {self.returning}""",
            [row.get(name) for name in _INSERTABLE],
        )
        return rows[0]


# 싱글턴 인스턴스 — Singleton instance
job_repository: JobRepository = JobRepository()
