"""Pydantic schemas for health check responses."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response body for the health check endpoint."""

    success: Literal[True] = True
    message: str = "Server is running"
    environment: str = Field(description="Current app environment (e.g. development, production)")
    timestamp: datetime = Field(description="Server time (UTC) when the check ran")
    database: Literal["connected", "disconnected"] | None = Field(
        default=None,
        description="Database connectivity status when check is performed",
    )
