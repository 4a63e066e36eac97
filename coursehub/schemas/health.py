"""Pydantic schemas for health check responses."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response body for the health check endpoint."""

    success: bool = True
    status: Literal["ok"] = Field(default="ok", description="Service status")
    message: str = Field(default="Server is running")
    environment: str = Field(description="Current app environment (e.g. dev, prod)")
    timestamp: datetime
