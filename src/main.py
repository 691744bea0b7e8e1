"""
MoMo Gateway - Main Application Entry Point

A thin HTTP façade over the MTN MoMo Collection API: request-to-pay,
payment status, account balance and provider callbacks.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from src import __version__
from src.core.config import settings
from src.core.dependencies import get_provider_credentials
from src.core.logging import setup_logging
from src.core.metrics import get_metrics, get_metrics_content_type
from src.presentation.api import api_router
from src.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    register_exception_handlers,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Sets up logging and loads the provider credentials once at startup.
    """
    setup_logging()
    credentials = get_provider_credentials()

    logger = structlog.get_logger(__name__)
    logger.info(
        "application_started",
        app_name=settings.app_name,
        version=__version__,
        momo_base_url=credentials.base_url,
        target_environment=credentials.target_environment,
    )

    yield

    logger.info("application_stopped")


app = FastAPI(
    title="MoMo Gateway",
    description="MTN MoMo Collection API Gateway",
    version=__version__,
    debug=settings.debug,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

register_exception_handlers(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
