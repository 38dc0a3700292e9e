"""
===============================================================================
MÓDULO: Security headers (OWASP)
===============================================================================

Responsabilidades:
  - Agregar headers defensivos a todas las respuestas de la API
  - Marcar respuestas autenticadas como no cacheables (contienen datos por usuario)
  - HSTS solo en producción y sobre HTTPS

Colaboradores:
  - crosscutting.config
===============================================================================
"""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

# R: La API solo sirve JSON; el SPA se sirve por separado.
_API_CSP = "default-src 'none'; frame-ancestors 'none'"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Agrega headers OWASP; Cache-Control no-store si el request trae Authorization."""

    def __init__(self, app, is_production: bool | None = None):
        super().__init__(app)
        if is_production is None:
            from .config import get_settings

            is_production = get_settings().is_production()
        self._is_production = is_production

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        if not request.url.path.endswith(("/docs", "/redoc")):
            response.headers["Content-Security-Policy"] = _API_CSP

        if "authorization" in request.headers:
            response.headers["Cache-Control"] = "no-store"

        if self._is_production:
            proto = (
                request.headers.get("x-forwarded-proto") or request.url.scheme or ""
            ).lower()
            if proto == "https":
                response.headers["Strict-Transport-Security"] = (
                    "max-age=31536000; includeSubDomains"
                )

        return response
