# report_api/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from report_api.api.v1.api import api_router
from report_api.core.config import Settings, settings as default_settings
from report_api.core.errors import StoreQueryFailed
from report_api.core.logging import configure_logging
from report_api.db.init_db import init_db
from report_api.db.session import build_engine, build_sessionmaker

logger = logging.getLogger(__name__)


def create_application(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level, settings.log_format)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # ---------- STORE ----------
        # One engine per application; each request borrows a session from it.
        engine = build_engine(settings.database_url, echo=settings.database_echo)
        init_db(engine)
        app.state.engine = engine
        app.state.session_factory = build_sessionmaker(engine)
        logger.info("Report store ready (%s)", engine.url.render_as_string(hide_password=True))
        try:
            yield
        finally:
            engine.dispose()
            logger.info("Report store disposed")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- ERRORS ----------
    @app.exception_handler(StoreQueryFailed)
    async def store_query_failed_handler(request: Request, exc: StoreQueryFailed) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={"error": exc.message, "report": exc.report},
        )

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_application()
