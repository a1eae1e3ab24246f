"""Health check response models."""

from typing import ClassVar

from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    environment: str | None = None
    message: str = "API is healthy"
    users: int = 0

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "status": "ok",
                "version": "1.0.0",
                "environment": "development",
                "message": "API is healthy",
                "users": 2,
            }
        }
