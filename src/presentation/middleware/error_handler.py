"""Exception handlers mapping gateway errors to HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from src.domain.exceptions import (
    DomainException,
    PaymentValidationException,
    ProviderException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)

MISSING_FIELDS_MESSAGE = (
    "Missing required fields: amount, currency, externalId, payer.partyId"
)
ROUTE_NOT_FOUND_MESSAGE = "Route not found"
INTERNAL_ERROR_MESSAGE = "Something went wrong!"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Validation problems answer 400, provider failures 500 with the
    provider payload in ``details``, unknown routes 404.
    """

    @app.exception_handler(PaymentValidationException)
    async def payment_validation_handler(
        request: Request,
        exc: PaymentValidationException,
    ) -> JSONResponse:
        """Handle requests missing required fields."""
        logger.warning(
            "payment_validation_failed",
            request_id=get_request_id(),
            missing_fields=exc.missing_fields,
        )
        return JSONResponse(
            status_code=exc.http_status,
            content={"error": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle bodies that could not be parsed into the request schema."""
        logger.warning(
            "request_body_invalid",
            request_id=get_request_id(),
            path=request.url.path,
            errors=[
                {"loc": list(err.get("loc", ())), "type": err.get("type")}
                for err in exc.errors()
            ],
        )
        return JSONResponse(
            status_code=400,
            content={"error": MISSING_FIELDS_MESSAGE},
        )

    @app.exception_handler(ProviderException)
    async def provider_error_handler(
        request: Request,
        exc: ProviderException,
    ) -> JSONResponse:
        """Handle failed MoMo API calls."""
        logger.error(
            "provider_error",
            request_id=get_request_id(),
            code=exc.code,
            upstream_status=exc.status_code,
            details=exc.details,
        )
        return JSONResponse(
            status_code=exc.http_status,
            content={"error": exc.message, "details": exc.details},
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle any other gateway exception."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return JSONResponse(
            status_code=exc.http_status,
            content={"error": exc.message},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Treat unknown paths and unsupported methods as unknown routes."""
        if exc.status_code in (404, 405):
            logger.info(
                "route_not_found",
                request_id=get_request_id(),
                method=request.method,
                path=request.url.path,
            )
            return JSONResponse(
                status_code=404,
                content={"error": ROUTE_NOT_FOUND_MESSAGE},
            )

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions without leaking details."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )
