# accounts_api/main.py

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from accounts_api.core.config import Settings, settings as default_settings
from accounts_api.api.v1.api import api_router
from accounts_api.db.init_db import init_db
from accounts_api.db.session import create_db_engine, create_session_factory

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
        stream=sys.stdout,
    )


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings)

    # Tokens cannot be signed without a secret; refuse to start
    if not settings.jwt_secret:
        raise RuntimeError("JWT_SECRET is not set")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.create_tables:
            init_db(app.state.engine)
        logger.info("%s %s started", settings.PROJECT_NAME, settings.VERSION)
        yield
        app.state.engine.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = create_db_engine(settings.database_url)
    app.state.session_factory = create_session_factory(app.state.engine)

    # ---------- CORS ----------
    if settings.backend_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin).rstrip("/") for origin in settings.backend_cors_origins],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    return app


app = create_application()
