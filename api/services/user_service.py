"""
User use cases: list, fetch, create and delete.

Each method returns a ServiceResult carrying the HTTP status and the envelope
fields, so routers only render it. Business failures are results, never
exceptions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from api.domain.users import UserResponse, parse_user, parse_user_id
from api.repositories.base import UserRepository

logger = logging.getLogger(__name__)

MSG_NOT_FOUND = "Usuário não encontrado"
MSG_CREATED = "Usuário criado com sucesso"
MSG_CREATE_FAILED = "Falha ao criar o usuário"
MSG_DELETED = "Usuário excluído com sucesso"
MSG_DELETE_FAILED = "Falha ao remover o usuário"


@dataclass(frozen=True)
class ServiceResult:
    status_code: int
    success: bool
    data: Any
    reason: Optional[str] = None


class UserService:
    """Maps repository outcomes to status codes and envelope payloads."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    def list_users(self) -> ServiceResult:
        users = self.repository.list()
        return ServiceResult(200, True, [UserResponse.from_user(u).to_dict() for u in users])

    def get_user(self, raw_id: str) -> ServiceResult:
        user_id = parse_user_id(raw_id)
        user = self.repository.find_one(user_id) if user_id is not None else None
        if user is None:
            return ServiceResult(404, False, MSG_NOT_FOUND, reason="not_found")
        return ServiceResult(200, True, UserResponse.from_user(user).to_dict())

    def create_user(self, payload: Any) -> ServiceResult:
        user, reason = parse_user(payload)
        if user is not None:
            if self.repository.save(user):
                logger.info("usuario %s criado", user.id)
                return ServiceResult(201, True, MSG_CREATED)
            reason = "duplicate_id"
        # duplicate ids and invalid payloads share the same response
        logger.warning("falha ao criar usuario: %s", reason)
        return ServiceResult(500, False, MSG_CREATE_FAILED, reason=reason)

    def delete_user(self, raw_id: str) -> ServiceResult:
        user_id = parse_user_id(raw_id)
        if user_id is not None and self.repository.delete(user_id):
            logger.info("usuario %s removido", user_id)
            return ServiceResult(200, True, MSG_DELETED)
        logger.warning("falha ao remover usuario %r", raw_id)
        return ServiceResult(500, False, MSG_DELETE_FAILED, reason="delete_failed")
