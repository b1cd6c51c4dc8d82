"""User record, response projection and payload parsing."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

ADULT_AGE = 18

# ids and ages are stored as signed 64-bit integers
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

ID_SEGMENT = re.compile(r"-?\d+", re.ASCII)


def is_of_age(age: int) -> bool:
    """Return True when ``age`` is at least the age of majority."""
    return age >= ADULT_AGE


@dataclass(frozen=True)
class User:
    id: int
    name: str
    age: int

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "age": self.age}


@dataclass(frozen=True)
class UserResponse:
    """A User projected with the derived ``isOfAge`` flag."""

    id: int
    name: str
    age: int
    is_of_age: bool

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(id=user.id, name=user.name, age=user.age, is_of_age=is_of_age(user.age))

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "age": self.age, "isOfAge": self.is_of_age}


def _is_int(value: Any) -> bool:
    # bool is a subclass of int; JSON true/false must not pass as ids or ages
    return isinstance(value, int) and not isinstance(value, bool) and INT64_MIN <= value <= INT64_MAX


def parse_user(payload: Any) -> Tuple[Optional[User], Optional[str]]:
    """
    Build a User from a decoded JSON body.

    Returns (user, None) when acceptable, or (None, reason) otherwise.
    """
    if not isinstance(payload, Mapping):
        return None, "payload_not_object"
    user_id = payload.get("id")
    name = payload.get("name")
    age = payload.get("age")
    if not _is_int(user_id):
        return None, "invalid_id"
    if not isinstance(name, str) or not name.strip():
        return None, "invalid_name"
    if not _is_int(age) or age < 0:
        return None, "invalid_age"
    return User(id=user_id, name=name.strip(), age=age), None


def parse_user_id(raw: str | None) -> Optional[int]:
    """Coerce a path segment into an integer id, or None when it is not one."""
    value = (raw or "").strip()
    if not ID_SEGMENT.fullmatch(value):
        return None
    user_id = int(value)
    if not INT64_MIN <= user_id <= INT64_MAX:
        return None
    return user_id
