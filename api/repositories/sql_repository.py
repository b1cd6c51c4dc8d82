"""User store backed by SQLAlchemy."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from api.db.models import UserRecord
from api.db.session import get_session
from api.domain.users import User
from api.repositories.base import UserRepository

logger = logging.getLogger(__name__)


def _to_user(entity: UserRecord) -> User:
    return User(id=int(entity.id), name=entity.name, age=int(entity.age))


class SQLUserRepository(UserRepository):
    """CRUD helpers wrapping the SQLAlchemy session."""

    def list(self) -> list[User]:
        with get_session() as session:
            rows = session.execute(select(UserRecord).order_by(UserRecord.seq)).scalars().all()
            return [_to_user(row) for row in rows]

    def find_one(self, user_id: int) -> Optional[User]:
        with get_session() as session:
            stmt = select(UserRecord).where(UserRecord.id == user_id)
            entity = session.execute(stmt).scalar_one_or_none()
            return _to_user(entity) if entity else None

    def save(self, user: User) -> bool:
        with get_session() as session:
            exists = session.execute(
                select(UserRecord.seq).where(UserRecord.id == user.id).limit(1)
            ).first()
            if exists is not None:
                return False
            session.add(UserRecord(id=user.id, name=user.name, age=user.age))
            try:
                session.commit()
            except IntegrityError:
                # concurrent insert won the unique constraint
                session.rollback()
                logger.debug("IntegrityError ao inserir id %s", user.id)
                return False
            return True

    def delete(self, user_id: int) -> bool:
        with get_session() as session:
            result = session.execute(delete(UserRecord).where(UserRecord.id == user_id))
            session.commit()
            return (result.rowcount or 0) > 0
