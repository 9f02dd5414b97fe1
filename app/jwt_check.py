"""JWT 설정 점검 스크립트 — 토큰 서명 후 즉시 검증.

JWT smoke test — signs a sample payload with the configured secret,
verifies it, and prints both. Use it to confirm JWT_SECRET_KEY and
JWT_ALGORITHM are usable before starting the API.

Usage:
    python -m app.jwt_check
    jobboard-jwt-check
"""

import sys
from typing import Any

import jwt

from app.utils.jwt import create_access_token, decode_token

SAMPLE_PAYLOAD: dict[str, Any] = {"sub": "testuser", "user_id": 123}


def main() -> int:
    """샘플 토큰을 서명·검증하고 결과를 출력합니다. 실패 시 1 반환."""
    try:
        token: str = create_access_token(SAMPLE_PAYLOAD)
        print("Signed Token:", token)

        decoded: dict[str, Any] = decode_token(token)
        print("Decoded Payload:", decoded)
    except jwt.PyJWTError as exc:
        print("JWT Error:", exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
