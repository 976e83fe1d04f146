from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from backend.app.config import ApiSettings, get_settings
from backend.app.routers import health, reports
from nen_report.data_sources import load_report_config
from nen_report.database import create_db_engine, create_session_factory, init_db
from nen_report.logging_utils import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(settings: ApiSettings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level)
        engine = create_db_engine(settings.db_url)
        init_db(engine)
        app.state.session_factory = create_session_factory(engine)
        app.state.report_config = load_report_config(
            settings.report_config_path,
            output_dir=settings.reports_dir,
            strict_scores=settings.strict_scores or None,
        )
        logger.info("Report output directory: %s", app.state.report_config.output_dir)
        try:
            yield
        finally:
            engine.dispose()

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(reports.router)
    return app


app = create_app()
