"""Health check endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel

from src.athlete_analytics.core.config import get_settings
from src.athlete_analytics.schemas.common import ApiResponse

router = APIRouter(tags=["health"])


class HealthData(BaseModel):
    status: str
    timestamp: datetime
    environment: str
    version: str


@router.get("/health", response_model=ApiResponse[HealthData])
async def health() -> ApiResponse[HealthData]:
    settings = get_settings()
    return ApiResponse(
        data=HealthData(
            status="healthy",
            timestamp=datetime.now(UTC),
            environment=settings.app_env,
            version=settings.api_version,
        ),
        message="Service is running",
    )
