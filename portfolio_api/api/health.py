"""Health check endpoint with optional database connectivity check."""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from portfolio_api.api.deps import DbDep, get_settings_dep
from portfolio_api.core.config import Settings
from portfolio_api.core.database import check_db_connected
from portfolio_api.schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def get_health(db: DbDep, settings: Annotated[Settings, Depends(get_settings_dep)]) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring; no authentication.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"
    return HealthResponse(
        environment=settings.APP_ENV,
        timestamp=datetime.now(UTC),
        database=db_status,
    )
