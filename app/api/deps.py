"""FastAPI 의존성 주입 모듈 — 인증 및 권한 검사.

FastAPI dependency injection module — Authentication and authorization.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. decode_token()이 JWT를 검증하고 페이로드를 반환
       (decode_token verifies JWT and returns payload)
    3. 페이로드의 "sub", "is_admin" 클레임으로 CurrentUser 구성
       (CurrentUser is built from the "sub" and "is_admin" claims)

Authorization:
    - require_admin: 관리자만 허용 (Administrators only)
    - require_correct_user_or_admin: 관리자 또는 경로의 {username} 본인
      (Administrators, or the user named by the {username} path parameter)
    실패 시 모두 401 Unauthorized (Every failure is 401 Unauthorized)
"""

from typing import Annotated

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel

from app.utils.exceptions import UnauthorizedError
from app.utils.jwt import decode_token

# auto_error=False: 헤더 누락도 401로 통일 (Missing header also maps to 401)
security: HTTPBearer = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    """토큰에서 추출한 호출자 정보 (Caller identity taken from the token)."""

    username: str
    is_admin: bool = False


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> CurrentUser:
    """JWT 토큰에서 현재 인증된 사용자를 추출합니다.

    Decode the bearer token and return the caller.

    Raises:
        UnauthorizedError: 토큰 누락, 만료, 위조 또는 잘못된 유형
                           (Missing, expired, forged or non-access token)
    """
    if credentials is None:
        raise UnauthorizedError("Authentication required")
    try:
        payload: dict = decode_token(credentials.credentials)
    except jwt.InvalidTokenError:
        raise UnauthorizedError("Invalid or expired token")

    # 토큰 타입 검증 — Reject tokens that are not access tokens
    if payload.get("type") != "access":
        raise UnauthorizedError("Invalid token type")
    username = payload.get("sub")
    if not isinstance(username, str) or not username:
        raise UnauthorizedError("Invalid token")

    return CurrentUser(username=username, is_admin=payload.get("is_admin") is True)


def is_correct_user_or_admin(caller: CurrentUser | None, username: str) -> bool:
    """호출자가 관리자이거나 대상 사용자 본인인지 판단합니다.

    Authorization predicate: the caller may act on resources owned by
    ``username`` when it is an administrator or is that user.
    """
    if caller is None:
        return False
    return caller.is_admin or caller.username == username


def ensure_correct_user_or_admin(caller: CurrentUser | None, username: str) -> None:
    """권한 검사 실패 시 401을 발생시킵니다 (Raise 401 unless authorized)."""
    if not is_correct_user_or_admin(caller, username):
        raise UnauthorizedError()


async def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """관리자 전용 의존성 — Administrator-only dependency."""
    if not current_user.is_admin:
        raise UnauthorizedError()
    return current_user


async def require_correct_user_or_admin(
    username: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """경로의 {username} 본인 또는 관리자만 허용하는 의존성.

    Dependency guarding ``/users/{username}/...`` routes.
    """
    ensure_correct_user_or_admin(current_user, username)
    return current_user
