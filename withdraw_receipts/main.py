"""
Withdraw Receipts FastAPI Application
Main entry point for the application
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from fastapi.staticfiles import StaticFiles
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from withdraw_receipts import __version__
from withdraw_receipts.api.admin_api import router as admin_api_router
from withdraw_receipts.api.handlers import register_exception_handlers
from withdraw_receipts.api.health import router as health_router
from withdraw_receipts.api.log import router as log_router
from withdraw_receipts.api.pages import router as pages_router
from withdraw_receipts.api.withdrawals_api import router as withdrawals_api_router
from withdraw_receipts.core.config import Settings, settings as default_settings
from withdraw_receipts.core.logging_config import setup_logging
from withdraw_receipts.core.metrics import ACTIVE_CONNECTIONS, REQUEST_COUNT, REQUEST_DURATION
from withdraw_receipts.repos.withdrawal_repo import RecordStore
from withdraw_receipts.services.receipts import ReceiptService

logger = logging.getLogger("withdraw_receipts.access")


def route_template(request: Request) -> str:
    """Path template of the matched route, so ids in the path do not become metric labels."""
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return path if path else "unmatched"


def create_app(settings: Optional[Settings] = None, store: Optional[RecordStore] = None) -> FastAPI:
    """
    Build the application with its own record store.

    Records live only as long as the store; a restart starts empty.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Withdrawal request intake, receipts and admin listing",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.settings = settings
    app.state.receipt_service = ReceiptService(store if store is not None else RecordStore())

    @app.on_event("startup")
    async def startup_event():
        logger.info(f"{settings.app_name} started ({settings.app_env})")
        if not settings.admin_key:
            logger.warning("ADMIN_KEY is not set; the admin listing will reject every request")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Access log and metrics
    @app.middleware("http")
    async def metrics_middleware(request: Request, call_next):
        start_time = time.time()
        ACTIVE_CONNECTIONS.inc()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration = time.time() - start_time
            ACTIVE_CONNECTIONS.dec()
            endpoint = route_template(request)
            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=endpoint,
                status=status_code
            ).inc()
            REQUEST_DURATION.labels(
                method=request.method,
                endpoint=endpoint
            ).observe(duration)
            logger.info(f"{request.method} {request.url.path} {status_code} - {duration * 1000:.1f} ms")

    @app.get("/metrics", include_in_schema=False)
    async def metrics():
        """Prometheus metrics endpoint"""
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    register_exception_handlers(app)

    app.include_router(health_router, tags=["health"])
    app.include_router(withdrawals_api_router)
    app.include_router(admin_api_router)
    app.include_router(log_router)
    app.include_router(pages_router)

    if settings.static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

    return app


app = create_app()
