"""In-memory user store for the User Registry API."""

import logging
import threading
from abc import ABC, abstractmethod

from user_registry.exceptions import UserNotFoundError
from user_registry.models.user import User, UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserStore(ABC):
    """Abstract interface for user storage."""

    @abstractmethod
    def create_user(self, data: UserCreate) -> User:
        """Store a new user and return it with its assigned id."""

    @abstractmethod
    def get_user(self, user_id: int) -> User:
        """Get a user by id.

        Raises:
            UserNotFoundError: If no user has this id
        """

    @abstractmethod
    def list_users(self) -> list[User]:
        """List all users in insertion order."""

    @abstractmethod
    def count_users(self) -> int:
        """Number of stored users."""

    @abstractmethod
    def update_user(self, user_id: int, data: UserUpdate) -> User:
        """Replace name and email of an existing user.

        Raises:
            UserNotFoundError: If no user has this id
        """

    @abstractmethod
    def delete_user(self, user_id: int) -> None:
        """Remove a user.

        Raises:
            UserNotFoundError: If no user has this id
        """


class InMemoryUserStore(UserStore):
    """Process-lifetime user collection.

    Users are kept in a list in insertion order and located by linear scan.
    Ids come from a counter that only moves forward, so an id is never handed
    out twice by the same store even after deletions. A lock serializes every
    operation.
    """

    def __init__(self) -> None:
        self._users: list[User] = []
        self._last_id = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return self.count_users()

    def count_users(self) -> int:
        with self._lock:
            return len(self._users)

    def create_user(self, data: UserCreate) -> User:
        with self._lock:
            self._last_id += 1
            user = User(id=self._last_id, name=data.name, email=data.email)
            self._users.append(user)
        logger.info("Created user %s", user.id)
        return user.model_copy()

    def get_user(self, user_id: int) -> User:
        with self._lock:
            return self._find(user_id).model_copy()

    def list_users(self) -> list[User]:
        with self._lock:
            return [user.model_copy() for user in self._users]

    def update_user(self, user_id: int, data: UserUpdate) -> User:
        with self._lock:
            user = self._find(user_id)
            user.name = data.name
            user.email = data.email
            updated = user.model_copy()
        logger.info("Updated user %s", user_id)
        return updated

    def delete_user(self, user_id: int) -> None:
        with self._lock:
            index = self._index_of(user_id)
            del self._users[index]
        logger.info("Deleted user %s", user_id)

    def _index_of(self, user_id: int) -> int:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        raise UserNotFoundError(user_id)

    def _find(self, user_id: int) -> User:
        return self._users[self._index_of(user_id)]
