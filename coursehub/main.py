"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from coursehub.api import router
from coursehub.api.error_handlers import register_error_handlers
from coursehub.container import Container, build_container
from coursehub.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )


def create_app(settings: Settings | None = None, container: Container | None = None) -> FastAPI:
    """Build the app around a container; a fresh one is built from settings if not given."""
    if container is None:
        container = build_container(settings or get_settings())
    settings = container.settings

    app = FastAPI(
        title="CourseHub API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.DEBUG,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS if settings.APP_ENV == "dev" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(router)
    return app


def _build_default_app() -> FastAPI:
    load_dotenv()
    settings = get_settings()
    configure_logging(settings)
    app = create_app(settings)
    logger.info("CourseHub API ready (env=%s, admin=%s)", settings.APP_ENV, settings.ADMIN_EMAIL)
    return app


# uvicorn coursehub.main:app
app = _build_default_app()
