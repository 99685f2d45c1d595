# articles_api/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from articles_api.api.v1.api import api_router
from articles_api.core.config import Settings, get_settings
from articles_api.core.errors import register_exception_handlers
from articles_api.core.logging_config import configure_logging
from articles_api.db.init_db import init_db
from articles_api.db.session import build_engine, build_session_factory

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db(bind=app.state.engine)
    logger.info("Starting %s %s", app.title, app.version)
    yield
    app.state.engine.dispose()
    logger.info("Shutting down %s", app.title)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ---------- DATABASE ----------
    app.state.engine = build_engine(settings.database_url)
    app.state.session_factory = build_session_factory(app.state.engine)

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- ERRORS ----------
    register_exception_handlers(app)

    # ---------- ROUTERS ----------
    @app.get("/", include_in_schema=False)
    def read_root():
        return {"message": f"{settings.PROJECT_NAME} is running"}

    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_application()
