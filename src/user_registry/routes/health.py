"""Health check routes."""

from fastapi import APIRouter, Depends

from user_registry.config import Settings, get_settings
from user_registry.models.health import HealthCheckResponse
from user_registry.services import get_user_store
from user_registry.services.user_store import UserStore

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    settings: Settings = Depends(get_settings),
    store: UserStore = Depends(get_user_store),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status, version and the number of stored users
    """
    return HealthCheckResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
        users=store.count_users(),
    )
