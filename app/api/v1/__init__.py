"""v1 API 라우터 패키지 — 공고 및 사용자 지원 엔드포인트 통합.

v1 API Router package — Aggregates the job and user-application
endpoints into a single router for inclusion in the FastAPI application.

Included routers:
    - jobs: 채용 공고 조회(공개) 및 관리(관리자) (Public job reads, admin job writes)
    - users: 사용자별 공고 지원 (Per-user job applications)
"""

from fastapi import APIRouter

from app.api.v1.jobs import router as jobs_router
from app.api.v1.users import router as users_router

api_router: APIRouter = APIRouter()

api_router.include_router(jobs_router, prefix="/jobs", tags=["Jobs"])
api_router.include_router(users_router, prefix="/users", tags=["Users"])
