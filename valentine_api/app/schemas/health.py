"""Pydantic model for the liveness check."""

from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    """Body of ``GET /health``."""

    status: str = Field(..., examples=["ok"])
    service: str = Field(..., examples=["valentine-backend"])
