"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Pre-configured HTTPException subclasses raised by the SQL builders,
repositories and auth dependencies, and propagated unchanged to FastAPI.

Usage:
    from app.utils.exceptions import NotFoundError, DuplicateError
    raise NotFoundError("No job: 42")
    raise DuplicateError("Duplicate or invalid job")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 대상 행이 없을 때 사용.

    Raised when get/update/delete matched zero rows.
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 유니크/제약 조건 위반 시 사용.

    Raised when the store rejects a write with a uniqueness or
    other integrity constraint violation (e.g. the same title twice for
    one company, or an unknown company handle).
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 또는 권한 검사 실패 시 사용.

    Raised for missing/invalid/expired tokens and when the caller is
    neither an admin nor the user the resource belongs to.
    """

    def __init__(self, detail: str = "Unauthorized") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 인자(빈 업데이트, 알 수 없는 필드 등).

    Raised for invalid arguments caught before any store interaction
    (e.g. an empty partial update or a non-updatable field).
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
