"""FastAPI application factory.

Learn: App factory pattern — create_app() returns a configured FastAPI
instance. Lifespan manages startup/shutdown (tables, engine disposal).
Middleware, CORS, error handlers, and routers all registered here.

The Database handle is created per app and stored on app.state, so a
test can call create_app(Settings(database_url=...)) and get a fully
isolated instance.
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from postboard import __version__
from postboard.api import api_router
from postboard.api.error_handlers import register_error_handlers
from postboard.config import Settings, settings as default_settings
from postboard.db.engine import Database
from postboard.logging_config import configure_logging
from postboard.middleware.request_id import RequestIdMiddleware
from postboard.middleware.security import SecurityHeadersMiddleware

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle.

    Learn: Anything before `yield` runs at startup, after `yield` runs at shutdown.
    """
    settings: Settings = app.state.settings
    db: Database = app.state.db
    logger.info(
        "postboard.starting",
        version=__version__,
        environment=settings.environment,
        port=settings.port,
    )

    if settings.auto_create_tables:
        await db.create_all()
        logger.info("postboard.tables_ready")

    yield

    logger.info("postboard.shutdown")
    await db.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build and return the FastAPI application."""
    settings = settings or default_settings
    configure_logging(settings.log_level, json_logs=settings.json_logs)

    app = FastAPI(
        title="Postboard",
        description="Accounts, posts, comments, and likes behind a JSON API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = Database(settings.database_url, echo=settings.debug)

    # ── Middleware stack ──────────────────────────────────────
    # Note: Starlette middleware executes in reverse order of registration.
    # Request flow: CORS → Security → RequestId → handler
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router)

    return app


# Default app instance (used by uvicorn: postboard.main:app)
app = create_app()
