"""회사, 채용 공고, 지원 관련 SQLAlchemy ORM 모델 정의.

Company, job posting and application SQLAlchemy ORM model definitions.
These models define the schema (DDL); the repositories read and write the
tables with parameterized SQL through ``app.database.execute_query``.

Tables:
    - companies: 채용 회사 (Hiring companies, keyed by handle)
    - jobs: 채용 공고 (Job postings owned by a company)
    - applications: 사용자별 지원 내역 (Job applications per username)
"""

from decimal import Decimal

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Numeric, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Company(Base):
    """회사 모델 — 채용 공고를 소유하는 엔티티.

    Attributes:
        handle: 회사 고유 핸들 (Unique company handle, primary key)
        name: 회사 이름 (Company name, unique)
        description: 회사 소개 (Free-text description)
        num_employees: 직원 수 (Head count)
        logo_url: 로고 URL (Logo URL)
    """

    __tablename__ = "companies"

    handle: Mapped[str] = mapped_column(String(25), primary_key=True)
    name: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    num_employees: Mapped[int | None] = mapped_column(Integer, nullable=True)
    logo_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="ck_company_num_employees"),
    )


class Job(Base):
    """채용 공고 모델.

    Job posting model. ``id`` is assigned by the store on insert.

    Attributes:
        id: 자동 증가 식별자 (Store-assigned identifier)
        title: 공고 제목 (Job title)
        salary: 연봉, 없을 수 있음 (Yearly salary, optional)
        equity: 지분 비율 0~1, 없을 수 있음 (Equity fraction between 0 and 1, optional)
        company_handle: 소유 회사 FK (Owning company handle)

    Constraints:
        uq_job_title_company: 회사 내 공고 제목 고유 (Unique title per company)
    """

    __tablename__ = "jobs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    salary: Mapped[int | None] = mapped_column(Integer, nullable=True)
    # 지분 — NUMERIC, 0 이상 1 이하 (Equity fraction, 0 <= equity <= 1)
    equity: Mapped[Decimal | None] = mapped_column(Numeric, nullable=True)
    company_handle: Mapped[str] = mapped_column(
        String(25), ForeignKey("companies.handle", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("title", "company_handle", name="uq_job_title_company"),
        CheckConstraint("salary >= 0", name="ck_job_salary"),
        CheckConstraint("equity <= 1.0", name="ck_job_equity"),
    )


class Application(Base):
    """지원 내역 — 사용자 이름과 공고의 다대다 매핑.

    Application of a user (by username) to a job.
    """

    __tablename__ = "applications"

    username: Mapped[str] = mapped_column(String(25), primary_key=True)
    job_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("jobs.id", ondelete="CASCADE"), primary_key=True
    )
