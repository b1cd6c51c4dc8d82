"""In-process user store, the default backend."""
from __future__ import annotations

import logging
import threading
from typing import Dict, Iterable, Optional

from api.domain.users import User
from api.repositories.base import UserRepository

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    def __init__(self, users: Iterable[User] = ()) -> None:
        # dicts keep insertion order, which is the listing order
        self._users: Dict[int, User] = {}
        self._lock = threading.Lock()
        for user in users:
            self.save(user)

    def list(self) -> list[User]:
        with self._lock:
            return list(self._users.values())

    def find_one(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def save(self, user: User) -> bool:
        with self._lock:
            if user.id in self._users:
                logger.debug("id %s ja cadastrado; insercao ignorada", user.id)
                return False
            self._users[user.id] = user
            return True

    def delete(self, user_id: int) -> bool:
        with self._lock:
            return self._users.pop(user_id, None) is not None
