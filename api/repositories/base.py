"""Repository interface shared by every user store."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from api.core.config import Settings
from api.domain.users import User


class UserRepository(ABC):
    """Storage contract consumed by UserService."""

    @abstractmethod
    def list(self) -> list[User]:
        """All stored users in insertion order; empty list when none."""

    @abstractmethod
    def find_one(self, user_id: int) -> Optional[User]:
        """The user with ``user_id`` or None."""

    @abstractmethod
    def save(self, user: User) -> bool:
        """Insert ``user``; False (and no write) when the id is already taken."""

    @abstractmethod
    def delete(self, user_id: int) -> bool:
        """Remove the user; False when no user had that id."""


def build_user_repository(settings: Settings) -> UserRepository:
    backend = settings.storage_backend
    if backend == "memory":
        from api.repositories.memory_repository import InMemoryUserRepository

        return InMemoryUserRepository()
    if backend == "sql":
        from api.repositories.sql_repository import SQLUserRepository

        return SQLUserRepository()
    raise RuntimeError(f"STORAGE_BACKEND desconhecido: {backend!r} (use 'memory' ou 'sql')")
