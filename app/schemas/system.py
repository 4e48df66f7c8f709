"""System Schemas — response models for the welcome and health endpoints.

Invariants:
    - HealthStatus.status is always "OK"
    - HealthStatus.uptime is non-negative float seconds
"""

from typing import Literal

from pydantic import BaseModel, Field


class WelcomeMessage(BaseModel):
    """Greeting returned by GET /api."""
    message: str


class HealthStatus(BaseModel):
    """Liveness payload — process is up, with seconds since start."""
    status: Literal["OK"] = "OK"
    uptime: float = Field(ge=0)


class ReadinessStatus(BaseModel):
    """Readiness payload — per-dependency check results."""
    status: Literal["ready"] = "ready"
    checks: dict[str, str]
