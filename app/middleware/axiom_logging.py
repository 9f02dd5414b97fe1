"""API 요청 로깅 미들웨어 — Axiom 또는 표준 logging.

Request logging middleware.
Builds one structured event per request (method, path, params, masked body,
status code, duration, error detail) and ingests it into Axiom when
AXIOM_API_TOKEN and AXIOM_DATASET are set; otherwise the event is written
to the ``app.requests`` logger.
Sensitive fields (password, token, secret, ...) are masked.
"""

import json
import logging
import re
import time
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from axiom_py import Client as AxiomClient

from app.config import settings

request_logger = logging.getLogger("app.requests")

# 마스킹 대상 필드 패턴 — Fields to mask in request bodies and query strings
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

_MAX_DEPTH = 5
_MAX_ITEMS = 20
_MAX_DETAIL = 500


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive fields in dicts/lists."""
    if depth > _MAX_DEPTH:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(str(k)) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:_MAX_ITEMS]]
    return data


def _error_detail(body: bytes) -> str:
    try:
        detail = json.loads(body).get("detail", "")
    except (json.JSONDecodeError, UnicodeDecodeError, AttributeError):
        return body.decode("utf-8", errors="replace")[:_MAX_DETAIL]
    if not isinstance(detail, str):
        detail = json.dumps(detail, default=str)
    return detail[:_MAX_DETAIL]


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 로깅하는 미들웨어.

    Middleware that logs every API request and response, to Axiom when
    configured and to the ``app.requests`` logger otherwise.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        event: dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
            "status_code": 500,
        }
        if request.query_params:
            event["query_params"] = mask_sensitive(dict(request.query_params))

        # Request body 읽기 — Read JSON body for methods that carry one
        if request.method in ("POST", "PUT", "PATCH"):
            body_bytes = await request.body()
            if body_bytes:
                try:
                    event["request_body"] = mask_sensitive(json.loads(body_bytes))
                except (json.JSONDecodeError, UnicodeDecodeError):
                    event["request_body"] = "(non-json body)"

        try:
            response = await call_next(request)
            event["status_code"] = response.status_code

            # 에러 응답시 body에서 사유 추출 후 응답 재구성
            # Extract the error detail, then re-wrap the consumed body
            if response.status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                event["error"] = _error_detail(resp_body)
                response = Response(
                    content=resp_body,
                    status_code=response.status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
            self._emit(event)

        return response

    def _emit(self, event: dict[str, Any]) -> None:
        """이벤트 전송 — 로깅 실패가 요청 처리에 영향주지 않음.

        Ship one event; failures are reported on the stdlib logger only.
        """
        if self._client is None:
            level = logging.WARNING if event["status_code"] >= 500 else logging.INFO
            request_logger.log(level, "%s %s %s", event["method"], event["path"], event["status_code"], extra={"event": event})
            return
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception:
            request_logger.exception("Axiom ingest failed for %s %s", event["method"], event["path"])
