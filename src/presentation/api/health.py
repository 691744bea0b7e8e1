"""Service status endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

health_router = APIRouter()


class RootResponse(BaseModel):
    message: str = "MoMo Payments Backend API"
    status: str = "running"


class HealthResponse(BaseModel):
    status: str = "healthy"
    timestamp: str


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@health_router.get(
    "/",
    response_model=RootResponse,
    summary="Service Banner",
)
async def root() -> RootResponse:
    return RootResponse()


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status of the service.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", timestamp=_utc_timestamp())
