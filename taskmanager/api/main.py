"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Build the FastAPI application (metadata, middleware, routers, handlers)
  - Initialize the DB pool and seed default users in the lifespan
  - Expose the health check endpoint

Collaborators:
  - CORSMiddleware, RequestContextMiddleware, BodyLimitMiddleware,
    SecurityHeadersMiddleware
  - interfaces.api.http.routes.router: /tasks, /users
  - api.auth_routes.router: /auth/*
  - api.versioning: same routes under /api

Notes:
  - Middleware order matters (last added runs first):
    RequestContext -> SecurityHeaders -> BodyLimit -> CORS -> routes
  - In test/ci the container uses in-memory repositories and no pool is opened
  - Settings are validated on first get_settings(); missing JWT_* is fatal
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ..application.seed_users import ensure_seed_users
from ..container import get_password_hasher, get_user_repository
from ..crosscutting.config import get_settings
from ..crosscutting.logger import logger
from ..crosscutting.middleware import BodyLimitMiddleware, RequestContextMiddleware
from ..crosscutting.security import SecurityHeadersMiddleware
from ..infrastructure.db.pool import close_pool, init_pool, ping
from ..interfaces.api.http.routes import router
from .auth_routes import router as auth_router
from .exception_handlers import register_exception_handlers
from .versioning import include_versioned_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle: pool + seed users."""
    settings = get_settings()
    use_pool = not settings.is_test()

    if use_pool:
        init_pool(
            database_url=settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
            statement_timeout_ms=settings.db_statement_timeout_ms,
        )

    try:
        try:
            ensure_seed_users(
                settings,
                user_repo=get_user_repository(),
                password_hasher=get_password_hasher().hash,
            )
        except Exception as e:
            logger.error("Startup falló", extra={"error": str(e)})
            raise

        logger.info(
            "Task Manager API starting up",
            extra={
                "app_env": settings.app_env,
                "jwt_expiry_minutes": settings.jwt_expiry_minutes,
                "db_pool_min": settings.db_pool_min_size,
                "db_pool_max": settings.db_pool_max_size,
                "persistence": "postgres" if use_pool else "in_memory",
            },
        )

        yield

    finally:
        if use_pool:
            close_pool()
        logger.info("Task Manager API shutting down")


def create_app() -> FastAPI:
    """Construye la app (factory: los tests pueden crear instancias frescas)."""
    settings = get_settings()

    app = FastAPI(
        title="Task Manager API",
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "auth", "description": "Registro, login e identidad (JWT)"},
            {"name": "tasks", "description": "Tareas (owner o Admin)"},
            {"name": "users", "description": "Usuarios (solo Admin)"},
        ],
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins_list(),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Request-Id"],
    )
    app.add_middleware(BodyLimitMiddleware, max_bytes=settings.max_body_bytes)
    app.add_middleware(
        SecurityHeadersMiddleware, is_production=settings.is_production()
    )
    app.add_middleware(RequestContextMiddleware)

    app.include_router(auth_router)
    app.include_router(router)
    include_versioned_routes(app)

    register_exception_handlers(app)

    @app.get("/healthz", tags=["health"])
    @app.get("/api/healthz", include_in_schema=False)
    def healthz(request: Request):
        """
        Liveness + DB check.

        Returns:
            ok: True si la persistencia responde
            db: "connected" | "disconnected" | "in_memory"
            request_id: correlación del request
        """
        if get_settings().is_test():
            db_status = "in_memory"
        else:
            db_status = "connected" if ping() else "disconnected"

        return {
            "ok": db_status != "disconnected",
            "db": db_status,
            "request_id": getattr(request.state, "request_id", None),
        }

    return app


app = create_app()
