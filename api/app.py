import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from api.core.config import Settings, get_settings
from api.core.logging_config import setup_logging
from api.repositories.base import UserRepository, build_user_repository
from api.routers import users as users_router
from api.services.user_service import UserService

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Baseline headers for a JSON-only API.

    Bodies carry user records, so nothing may be cached or framed, and no
    content may be loaded from a response rendered by a browser.
    """

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("Content-Security-Policy", "default-src 'none'; frame-ancestors 'none'")
        response.headers.setdefault("Cache-Control", "no-store")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def _prepare_sql_store() -> None:
    from api.db.create_tables import create_all

    create_all()


def create_app(
    repository: Optional[UserRepository] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Factory compatível com uvicorn (--factory) e com os testes."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    if repository is None:
        if settings.storage_backend == "sql":
            _prepare_sql_store()
        repository = build_user_repository(settings)
    logger.info("users API iniciando (env=%s, repositorio=%s)", settings.app_env, type(repository).__name__)

    app = FastAPI(title="Users API")
    app.state.user_service = UserService(repository)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(settings.cors_origins),
            allow_credentials=True,
            allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")

    app.include_router(users_router.router)
    return app
