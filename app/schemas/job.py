"""채용 공고 및 지원 관련 Pydantic 요청/응답 스키마 정의.

Job posting and application Pydantic request/response schema definitions.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


# === 채용 공고 (Job) 스키마 ===

class JobCreate(BaseModel):
    """채용 공고 생성 요청 스키마.

    Attributes:
        title: 공고 제목 (Job title)
        salary: 연봉 (Yearly salary, optional, >= 0)
        equity: 지분 비율 (Equity fraction 0..1, optional)
        company_handle: 소유 회사 핸들 (Owning company handle)
    """

    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: Decimal | None = Field(default=None, ge=0, le=1)
    company_handle: str = Field(min_length=1, max_length=25)


class JobUpdate(BaseModel):
    """채용 공고 수정 요청 스키마 (부분 업데이트).

    Only fields present in the request body are updated; the company a job
    belongs to cannot change.
    """

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: Decimal | None = Field(default=None, ge=0, le=1)


class JobFilter(BaseModel):
    """채용 공고 목록 필터 — 쿼리 파라미터 (Query-string filters for listing jobs).

    Attributes:
        title: 제목 부분 일치, 대소문자 무시 (Case-insensitive title substring)
        min_salary: 최소 연봉 (Minimum salary, ``minSalary``)
        has_equity: 지분이 0보다 큰 공고만 (Only jobs with equity > 0, ``hasEquity``)
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    min_salary: int | None = Field(default=None, alias="minSalary", ge=0)
    has_equity: bool | None = Field(default=None, alias="hasEquity")


class JobResponse(BaseModel):
    """채용 공고 응답 스키마."""

    id: int
    title: str
    salary: int | None = None
    equity: Decimal | None = None
    company_handle: str


# === 지원 (Application) 스키마 ===

class ApplicationResponse(BaseModel):
    """지원 완료 응답 — ``{"applied": job_id}``."""

    applied: int


class UserJobsResponse(BaseModel):
    """사용자의 지원 공고 ID 목록 응답."""

    username: str
    jobs: list[int]
