"""Request and response models."""

from user_registry.models.health import HealthCheckResponse
from user_registry.models.user import (
    MessageResponse,
    User,
    UserCreate,
    UserUpdate,
    ValidationErrorItem,
    ValidationErrorResponse,
)

__all__ = [
    "HealthCheckResponse",
    "MessageResponse",
    "User",
    "UserCreate",
    "UserUpdate",
    "ValidationErrorItem",
    "ValidationErrorResponse",
]
