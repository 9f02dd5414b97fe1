"""기본 SQL 레포지토리 — 모든 레포지토리의 부모 클래스.

Base SQL Repository — Parent class for table repositories.
Provides list/get/partial-update/delete by id on top of parameterized SQL
built by ``app.utils.sql``. Repositories hold no state beyond their
class-level table description, so one singleton instance serves every
request; the session is passed into each call.

Usage:
    class JobRepository(SqlRepository):
        table = "jobs"
        label = "job"
        columns = ("id", "title", "salary", "equity", "company_handle")
        order_by = "title, id"
"""

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import execute_query
from app.utils.exceptions import BadRequestError, DuplicateError, NotFoundError
from app.utils.sql import (
    FilterRule,
    build_filter_fragment,
    build_set_fragment,
    next_placeholder,
    resolve_column,
)


class SqlRepository:
    """테이블 하나에 대한 파라미터화 SQL CRUD 레포지토리.

    Parameterized-SQL CRUD repository for a single table.

    Attributes:
        table: 테이블 이름 (Table name)
        label: 오류 메시지용 리소스 이름 (Resource name used in error messages)
        columns: RETURNING/SELECT 대상 컬럼 (Columns selected and returned)
        id_column: 식별자 컬럼 (Identifier column)
        order_by: 목록 정렬 기준 (Stable ORDER BY for lists)
        column_names: 외부 필드명 → 컬럼명 변환표 (External name → column table)
        filter_rules: 목록 필터 규칙, 고정 순서 (Recognised filters in emission order)
        updatable: 부분 업데이트 허용 컬럼 (Columns a partial update may touch)
        not_null: NULL을 허용하지 않는 컬럼 (Columns that may not be set to NULL)
    """

    table: str = ""
    label: str = "record"
    columns: Sequence[str] = ()
    id_column: str = "id"
    order_by: str = "id"
    column_names: Mapping[str, str] = MappingProxyType({})
    filter_rules: Sequence[FilterRule] = ()
    updatable: frozenset[str] = frozenset()
    not_null: frozenset[str] = frozenset()

    @property
    def returning(self) -> str:
        return ", ".join(self.columns)

    def _not_found(self, record_id: Any) -> NotFoundError:
        return NotFoundError(f"No {self.label}: {record_id}")

    async def _query(
        self,
        db: AsyncSession,
        sql: str,
        values: Sequence[Any] = (),
    ) -> list[dict[str, Any]]:
        """SQL을 실행하고 제약 조건 위반을 도메인 예외로 변환합니다.

        Run ``sql`` through the store and translate integrity violations
        into ``DuplicateError``. The failed transaction is rolled back so the
        session stays usable.
        """
        try:
            return await execute_query(db, sql, values)
        except IntegrityError as exc:
            await db.rollback()
            raise DuplicateError(f"Duplicate or invalid {self.label}") from exc

    async def find_all(
        self,
        db: AsyncSession,
        filters: Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """필터 조건에 맞는 모든 행을 정렬하여 조회합니다.

        List rows matching ``filters``, always ordered by ``order_by``.
        Unrecognised filter keys are ignored; when no recognised key is
        present the base query runs without a ``WHERE`` clause.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 필터 명세 (Filter specification, optional)

        Returns:
            list[dict[str, Any]]: 조회된 행 목록, 없으면 빈 목록 (Matching rows; may be empty)
        """
        fragment = build_filter_fragment(filters, self.filter_rules)
        sql = f"SELECT {self.returning} FROM {self.table}"
        if fragment:
            sql += f" WHERE {fragment.clause}"
        sql += f" ORDER BY {self.order_by}"
        return await self._query(db, sql, fragment.values)

    async def get(self, db: AsyncSession, record_id: Any) -> dict[str, Any]:
        """ID로 단일 행을 조회합니다.

        Raises:
            NotFoundError: 해당 ID의 행이 없음 (No row has this id)
        """
        rows = await self._query(
            db,
            f"SELECT {self.returning} FROM {self.table} WHERE {self.id_column} = $1",
            [record_id],
        )
        if not rows:
            raise self._not_found(record_id)
        return rows[0]

    async def update(
        self,
        db: AsyncSession,
        record_id: Any,
        data: Mapping[str, Any],
    ) -> dict[str, Any]:
        """전달된 필드만 변경하는 부분 업데이트.

        Partial update: only the supplied fields change. The id is bound
        after every SET value, at placeholder ``len(values) + 1``.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 대상 행 ID (Target row id)
            data: 변경할 필드와 값 (Fields to change; external or column names)

        Returns:
            dict[str, Any]: 변경된 전체 행 (The full updated row)

        Raises:
            BadRequestError: 빈 데이터, 변경 불가 필드 또는 필수 필드의 NULL
                (Empty data, a non-updatable field, or NULL for a required column)
            NotFoundError: 해당 ID의 행이 없음 (No row has this id)
        """
        fragment = build_set_fragment(data, self.column_names)
        rejected = sorted(
            name for name in data if resolve_column(name, self.column_names) not in self.updatable
        )
        if rejected:
            raise BadRequestError(f"Cannot update {self.label} field(s): {', '.join(rejected)}")
        nulls = sorted(
            name for name, value in data.items()
            if value is None and resolve_column(name, self.column_names) in self.not_null
        )
        if nulls:
            raise BadRequestError(f"{self.label.capitalize()} field(s) cannot be null: {', '.join(nulls)}")

        sql = (
            f"UPDATE {self.table} SET {fragment.clause} "
            f"WHERE {self.id_column} = {next_placeholder(fragment.values)} "
            f"RETURNING {self.returning}"
        )
        rows = await self._query(db, sql, [*fragment.values, record_id])
        if not rows:
            raise self._not_found(record_id)
        return rows[0]

    async def remove(self, db: AsyncSession, record_id: Any) -> None:
        """ID로 행을 삭제합니다.

        Raises:
            NotFoundError: 삭제된 행이 없음 (Zero rows were deleted)
        """
        rows = await self._query(
            db,
            f"DELETE FROM {self.table} WHERE {self.id_column} = $1 RETURNING {self.id_column}",
            [record_id],
        )
        if not rows:
            raise self._not_found(record_id)
