"""채용 공고 서비스 — 스키마와 레포지토리 사이의 변환.

Job Service — Converts request schemas into repository data and
repository rows into response schemas. All persistence rules
(filters, partial updates, not-found handling) live in the repositories.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.repositories.application_repository import application_repository
from app.repositories.job_repository import job_repository
from app.schemas.job import (
    ApplicationResponse,
    JobCreate,
    JobFilter,
    JobResponse,
    JobUpdate,
    UserJobsResponse,
)


class JobService:
    """채용 공고 및 지원 관련 비즈니스 로직을 처리하는 서비스."""

    def _to_response(self, row: dict[str, Any]) -> JobResponse:
        return JobResponse(**row)

    async def list_jobs(
        self,
        db: AsyncSession,
        filters: JobFilter | None = None,
    ) -> list[JobResponse]:
        """필터 조건에 맞는 공고 목록을 제목순으로 조회합니다.

        List jobs ordered by title; filters are passed on with their
        external (camelCase) names.
        """
        criteria: dict[str, Any] | None = None
        if filters is not None:
            criteria = filters.model_dump(by_alias=True, exclude_none=True)
        rows = await job_repository.find_all(db, criteria)
        return [self._to_response(row) for row in rows]

    async def get_job(self, db: AsyncSession, job_id: int) -> JobResponse:
        return self._to_response(await job_repository.get(db, job_id))

    async def create_job(self, db: AsyncSession, data: JobCreate) -> JobResponse:
        row = await job_repository.create(db, data.model_dump())
        return self._to_response(row)

    async def update_job(
        self,
        db: AsyncSession,
        job_id: int,
        data: JobUpdate,
    ) -> JobResponse:
        """공고를 부분 업데이트합니다. 요청에 포함된 필드만 변경.

        Partially update a job with the fields present in the request.
        An empty body is rejected with 400 by the SET-clause builder.
        """
        changes: dict[str, Any] = data.model_dump(exclude_unset=True)
        row = await job_repository.update(db, job_id, changes)
        return self._to_response(row)

    async def delete_job(self, db: AsyncSession, job_id: int) -> None:
        await job_repository.remove(db, job_id)

    async def apply_to_job(
        self,
        db: AsyncSession,
        username: str,
        job_id: int,
    ) -> ApplicationResponse:
        row = await application_repository.apply(db, username, job_id)
        return ApplicationResponse(applied=row["job_id"])

    async def list_user_jobs(self, db: AsyncSession, username: str) -> UserJobsResponse:
        job_ids = await application_repository.job_ids_for_user(db, username)
        return UserJobsResponse(username=username, jobs=job_ids)


# 싱글턴 인스턴스 — Singleton instance
job_service: JobService = JobService()
