"""Back-office service: FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from backoffice.adapters.ledger_storage.local_storage import LocalLedgerStorage
from backoffice.adapters.persistence.database import engine
from backoffice.application.use_cases.generate_reports import ReportService
from backoffice.config import settings
from backoffice.infrastructure.api.routes_health import router as health_router
from backoffice.infrastructure.api.routes_reports import router as reports_router
from backoffice.infrastructure.api.routes_tickets import router as tickets_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        async with engine.begin():
            pass  # Connection pool warmed up
        logger.info("Database connection established")
    except Exception as e:
        logger.warning("Database not available on startup: %s", e)

    # Report runs outlive requests, so their state lives on the app
    app.state.report_service = ReportService(
        LocalLedgerStorage(settings.ledger_input_dir, settings.report_output_dir)
    )
    yield
    await app.state.report_service.drain()
    await engine.dispose()


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s | %(message)s",
    )

    app = FastAPI(
        title="Back-office service",
        description="Ticket assignment for company administration and ledger reports",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(tickets_router, prefix="/api")
    app.include_router(reports_router, prefix="/api")

    return app


app = create_app()
