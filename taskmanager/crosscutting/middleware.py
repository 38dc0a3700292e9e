"""
===============================================================================
MÓDULO: Middlewares HTTP (correlación + límite de body)
===============================================================================

RequestContextMiddleware:
  - Acepta el X-Request-Id entrante (si es razonable) o genera uno.
  - Carga request_id/method/path en contextvars para los logs.
  - Emite una línea de log por request con status y latencia.

BodyLimitMiddleware (ASGI puro):
  - 413 problem+json si el body supera max_bytes, ya sea por Content-Length
    o contando los chunks recibidos.

Colaboradores:
  - taskmanager/context.py
  - crosscutting/error_responses.py (payload RFC7807)
  - crosscutting/logger.py
===============================================================================
"""

from __future__ import annotations

import json
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ..context import clear_context, set_request_context
from .error_responses import PROBLEM_JSON_MEDIA_TYPE, ErrorCode, ErrorDetail
from .logger import logger

REQUEST_ID_HEADER = "X-Request-Id"
_MAX_REQUEST_ID_CHARS = 128
_UNLOGGED_PATHS = frozenset({"/healthz", "/api/healthz"})


def _pick_request_id(incoming: str | None) -> str:
    value = (incoming or "").strip()
    if value and len(value) <= _MAX_REQUEST_ID_CHARS and value.isprintable():
        return value
    return str(uuid.uuid4())


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = _pick_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id
        set_request_context(
            request_id=request_id, method=request.method, path=request.url.path
        )

        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            if request.url.path not in _UNLOGGED_PATHS:
                logger.info(
                    "request",
                    extra={
                        "status_code": status_code,
                        "latency_ms": round((time.perf_counter() - started) * 1000, 2),
                    },
                )
            clear_context()


class _BodyTooLarge(Exception):
    pass


class BodyLimitMiddleware:
    """Rechaza requests con body mayor a `max_bytes` (413)."""

    def __init__(self, app, max_bytes: int | None = None):
        self.app = app
        if max_bytes is None:
            from .config import get_settings

            max_bytes = get_settings().max_body_bytes
        self.max_bytes = max_bytes

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers") or [])
        declared = headers.get(b"content-length", b"").decode() or ""
        if declared.isdigit() and int(declared) > self.max_bytes:
            await self._reject(scope, send, headers)
            return

        received = 0
        response_started = False

        async def counting_receive():
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body") or b"")
                if received > self.max_bytes:
                    raise _BodyTooLarge()
            return message

        async def tracking_send(message):
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, counting_receive, tracking_send)
        except _BodyTooLarge:
            if response_started:
                raise
            await self._reject(scope, send, headers)

    async def _reject(self, scope, send, headers: dict[bytes, bytes]) -> None:
        request_id = _pick_request_id(
            headers.get(REQUEST_ID_HEADER.lower().encode(), b"").decode()
        )
        logger.warning(
            "body demasiado grande",
            extra={"path": scope.get("path", ""), "max_bytes": self.max_bytes},
        )
        body = ErrorDetail(
            type="about:blank/payload_too_large",
            title="Payload Too Large",
            status=413,
            detail=f"El body supera el máximo permitido ({self.max_bytes} bytes).",
            code=ErrorCode.PAYLOAD_TOO_LARGE,
            instance=scope.get("path", ""),
            errors=[{"request_id": request_id}],
        ).model_dump(mode="json", exclude_none=True)

        await send(
            {
                "type": "http.response.start",
                "status": 413,
                "headers": [
                    (b"content-type", PROBLEM_JSON_MEDIA_TYPE.encode()),
                    (b"x-request-id", request_id.encode()),
                ],
            }
        )
        await send(
            {
                "type": "http.response.body",
                "body": json.dumps(body, ensure_ascii=False).encode("utf-8"),
            }
        )
