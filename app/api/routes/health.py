from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.dependencies import get_database
from app.db.database import Database
from app.models.health.responses import HealthResponse
from app.settings import settings

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(
    database: Annotated[Database, Depends(get_database)],
) -> HealthResponse:
    return HealthResponse(
        status="healthy" if database.is_initialized else "starting",
        version=settings.app_version,
        database_ready=database.is_initialized,
        timestamp=datetime.now(timezone.utc),
    )
