from __future__ import annotations

import sys
from pathlib import Path

# Garante que o pacote api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.domain.users import User  # noqa: E402
from api.repositories.memory_repository import InMemoryUserRepository  # noqa: E402


def test_empty_store_lists_nothing():
    repo = InMemoryUserRepository()
    assert repo.list() == []
    assert repo.find_one(1) is None


def test_save_keeps_insertion_order_and_rejects_duplicates():
    repo = InMemoryUserRepository()
    assert repo.save(User(id=3, name="Carlos", age=30)) is True
    assert repo.save(User(id=1, name="Alice", age=25)) is True

    assert repo.save(User(id=3, name="Outro", age=10)) is False

    assert [u.id for u in repo.list()] == [3, 1]
    assert repo.find_one(3) == User(id=3, name="Carlos", age=30)


def test_delete_reports_whether_user_existed():
    repo = InMemoryUserRepository([User(id=1, name="Alice", age=25)])

    assert repo.delete(1) is True
    assert repo.delete(1) is False
    assert repo.find_one(1) is None
    assert repo.list() == []
