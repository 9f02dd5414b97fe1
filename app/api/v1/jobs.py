"""채용 공고 라우터 — 공고 CRUD 엔드포인트.

Job Router — CRUD endpoints for job postings.

Permission Matrix:
    - 목록/상세 조회: 누구나 (Anyone)
    - 등록/수정/삭제: 관리자만 (Administrators only)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import CurrentUser, require_admin
from app.database import get_db
from app.schemas.job import JobCreate, JobFilter, JobResponse, JobUpdate
from app.services.job_service import job_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[JobResponse])
async def list_jobs(
    db: Annotated[AsyncSession, Depends(get_db)],
    title: Annotated[str | None, Query()] = None,
    min_salary: Annotated[int | None, Query(alias="minSalary", ge=0)] = None,
    has_equity: Annotated[bool | None, Query(alias="hasEquity")] = None,
) -> list[JobResponse]:
    """공고 목록을 제목순으로 조회합니다. title, minSalary, hasEquity로 필터링.

    List jobs ordered by title, optionally filtered.
    """
    filters = JobFilter(title=title, min_salary=min_salary, has_equity=has_equity)
    return await job_service.list_jobs(db, filters)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(
    job_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> JobResponse:
    return await job_service.get_job(db, job_id)


@router.post("", response_model=JobResponse, status_code=201)
async def create_job(
    data: JobCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(require_admin)],
) -> JobResponse:
    """새 공고를 생성합니다. 관리자만 가능.

    Create a job. Administrators only.
    """
    result: JobResponse = await job_service.create_job(db, data)
    await db.commit()
    return result


@router.patch("/{job_id}", response_model=JobResponse)
async def update_job(
    job_id: int,
    data: JobUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(require_admin)],
) -> JobResponse:
    """공고를 부분 수정합니다. 관리자만 가능.

    Partially update a job. Administrators only.
    """
    result: JobResponse = await job_service.update_job(db, job_id, data)
    await db.commit()
    return result


@router.delete("/{job_id}", status_code=204)
async def delete_job(
    job_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(require_admin)],
) -> None:
    """공고를 삭제합니다. 관리자만 가능."""
    await job_service.delete_job(db, job_id)
    await db.commit()
