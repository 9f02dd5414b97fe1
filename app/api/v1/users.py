"""사용자 지원 라우터 — 사용자별 공고 지원 엔드포인트.

User Application Router — a user applies to jobs and lists the jobs
applied to. Every route is limited to that user or an administrator.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import CurrentUser, require_correct_user_or_admin
from app.database import get_db
from app.schemas.job import ApplicationResponse, UserJobsResponse
from app.services.job_service import job_service

router: APIRouter = APIRouter()


@router.get("/{username}/jobs", response_model=UserJobsResponse)
async def list_user_jobs(
    username: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(require_correct_user_or_admin)],
) -> UserJobsResponse:
    """사용자가 지원한 공고 ID 목록을 조회합니다."""
    return await job_service.list_user_jobs(db, username)


@router.post("/{username}/jobs/{job_id}", response_model=ApplicationResponse, status_code=201)
async def apply_to_job(
    username: str,
    job_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(require_correct_user_or_admin)],
) -> ApplicationResponse:
    """공고에 지원합니다. 본인 또는 관리자만 가능.

    Apply ``username`` to a job. Same user or administrator only.
    """
    result: ApplicationResponse = await job_service.apply_to_job(db, username, job_id)
    await db.commit()
    return result
