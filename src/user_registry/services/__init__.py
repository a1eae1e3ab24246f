"""Service initialization and dependency injection."""

import logging

from user_registry.services.user_store import InMemoryUserStore, UserStore

logger = logging.getLogger(__name__)

# Service instances cache
_services_cache: dict[str, UserStore] = {}


def get_user_store() -> UserStore:
    """Get the process-wide user store.

    The store is created empty on first use and lives until the process exits.

    Returns:
        UserStore instance
    """
    if "user_store" not in _services_cache:
        _services_cache["user_store"] = InMemoryUserStore()
        logger.info("Initialized InMemoryUserStore")

    return _services_cache["user_store"]


__all__ = ["InMemoryUserStore", "UserStore", "get_user_store"]
