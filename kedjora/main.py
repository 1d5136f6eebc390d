"""FastAPI application factory. No business logic; only wiring and middleware.

Run with:

  uvicorn kedjora.main:create_app --factory
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import timedelta

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from kedjora.api import router as api_router
from kedjora.core.config import Settings, get_settings
from kedjora.core.database import build_engine, build_session_factory
from kedjora.core.sessions import SessionCodec
from kedjora.web import admin as admin_pages
from kedjora.web import auth as auth_pages
from kedjora.web.guard import RouteGuardMiddleware

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )


def build_session_codec(settings: Settings) -> SessionCodec:
    """Raises MisconfiguredSigningSecret when the secret is unusable."""
    return SessionCodec(
        settings.SESSION_SECRET.get_secret_value(),
        algorithm=settings.SESSION_ALGORITHM,
        max_age=timedelta(days=settings.SESSION_MAX_AGE_DAYS),
        cookie_name=settings.SESSION_COOKIE_NAME,
    )


async def database_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Database error",
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(status_code=500, content={"detail": "Database error"})


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """
    Build the application. Settings, engine, session factory and session codec
    are created once here and shared through app.state.
    """
    if settings is None:
        settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    codec = build_session_codec(settings)
    if engine is None:
        engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

    app = FastAPI(
        title=f"{settings.SITE_NAME} API",
        version="0.1.0",
        docs_url="/docs" if settings.APP_ENV == "dev" else None,
        redoc_url="/redoc" if settings.APP_ENV == "dev" else None,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.session_codec = codec

    app.add_middleware(RouteGuardMiddleware, codec=codec)
    if settings.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_exception_handler(SQLAlchemyError, database_error_handler)

    app.include_router(api_router, prefix=settings.API_PREFIX)
    app.include_router(auth_pages.router, prefix="/auth", include_in_schema=False)
    app.include_router(admin_pages.router, prefix="/admin", include_in_schema=False)

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": f"{settings.SITE_NAME} API"}

    logger.info("Application configured", extra={"environment": settings.APP_ENV})
    return app
