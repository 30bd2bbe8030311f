"""Health check API schemas."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")
    cache: Literal["up", "down", "disabled"] = Field(
        default="disabled", description="Employee cache backend state"
    )
