"""
Persistence adapters for user records.

Services depend on the ``UserRepository`` interface; the concrete store
(in-memory or SQL) is picked by ``build_user_repository`` from Settings.
"""

from api.repositories.base import UserRepository, build_user_repository

__all__ = ["UserRepository", "build_user_repository"]
