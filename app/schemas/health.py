"""Pydantic schemas for health check responses."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response body for the health check endpoint."""

    status: str = Field(default="OK", description="Service status")
    message: str = Field(description="Human-readable service description")
