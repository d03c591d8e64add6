"""Pydantic schema for the health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Service status, environment name, and database reachability."""

    status: Literal["ok"] = "ok"
    environment: str = Field(description="Current app environment (dev or prod)")
    database: Literal["connected", "disconnected"]
