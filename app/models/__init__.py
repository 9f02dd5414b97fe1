"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every table with ``Base.metadata``,
which ``create_all`` (seed script, tests) relies on.

Modules:
    job: 회사, 채용 공고, 지원 내역 (Company, Job, Application)
"""

from app.models.job import Application, Company, Job

__all__ = ["Application", "Company", "Job"]
