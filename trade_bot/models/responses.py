from typing import Any, Dict

from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    """Response model for health check endpoint"""

    status: str = Field(..., description="Liveness status, always 'healthy'")
    job_id: str = Field(..., description="Identifier of this health check run")
    timestamp: float = Field(..., description="Unix timestamp of the health check")
    checks: Dict[str, Dict[str, Any]] = Field(
        ..., description="Informational component checks"
    )
