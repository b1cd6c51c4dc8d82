"""
Smoke tests for the SQL user store against a temporary SQLite database.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garante que o pacote api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.app import create_app  # noqa: E402
from api.core import config as core_config  # noqa: E402
from api.db.create_tables import create_all, drop_all  # noqa: E402
from api.db import session as db_session  # noqa: E402
from api.domain.users import User  # noqa: E402
from api.repositories.sql_repository import SQLUserRepository  # noqa: E402


def _reset_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Configura um SQLite temporário e reseta caches de settings/engine."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("STORAGE_BACKEND", "sql")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    _reset_caches()

    engine = db_session.get_engine()
    create_all(engine)

    yield db_file

    drop_all(engine)
    engine.dispose()
    _reset_caches()


def test_save_find_and_list_in_insertion_order(temp_db):
    repo = SQLUserRepository()
    assert repo.list() == []

    assert repo.save(User(id=20, name="Bruno Costa", age=17)) is True
    assert repo.save(User(id=10, name="Alice Silva", age=25)) is True

    assert repo.find_one(10) == User(id=10, name="Alice Silva", age=25)
    assert repo.find_one(99) is None
    assert [u.id for u in repo.list()] == [20, 10]


def test_duplicate_id_is_rejected_without_overwrite(temp_db):
    repo = SQLUserRepository()
    repo.save(User(id=800, name="Oscar Dutra", age=35))

    assert repo.save(User(id=800, name="Outro Nome", age=12)) is False
    assert repo.find_one(800) == User(id=800, name="Oscar Dutra", age=35)
    assert len(repo.list()) == 1


def test_delete_reports_whether_user_existed(temp_db):
    repo = SQLUserRepository()
    repo.save(User(id=1300, name="Marta", age=50))

    assert repo.delete(1300) is True
    assert repo.delete(1300) is False
    assert repo.find_one(1300) is None


def test_app_with_sql_backend_end_to_end(temp_db):
    with TestClient(create_app()) as client:
        created = client.post("/users", json={"id": 1, "name": "Alice Silva", "age": 25})
        duplicate = client.post("/users", json={"id": 1, "name": "Alice Silva", "age": 25})
        fetched = client.get("/users/1")
        deleted = client.delete("/users/1")
        missing = client.get("/users/1")

    assert created.status_code == 201
    assert duplicate.status_code == 500
    assert fetched.json() == {
        "success": True,
        "data": {"id": 1, "name": "Alice Silva", "age": 25, "isOfAge": True},
    }
    assert deleted.status_code == 200
    assert missing.status_code == 404


def test_ids_beyond_64_bits_get_the_envelope_on_sql_backend(temp_db):
    huge = "99999999999999999999"
    with TestClient(create_app()) as client:
        fetched = client.get(f"/users/{huge}")
        created = client.post("/users", json={"id": 2**70, "name": "Alice Silva", "age": 25})
        too_old = client.post("/users", json={"id": 3, "name": "Bruno Costa", "age": 2**70})
        deleted = client.delete(f"/users/{huge}")

    assert fetched.status_code == 404
    assert fetched.json() == {"success": False, "data": "Usuário não encontrado"}
    assert created.status_code == 500
    assert created.json() == {"success": False, "data": "Falha ao criar o usuário"}
    assert too_old.status_code == 500
    assert too_old.json() == {"success": False, "data": "Falha ao criar o usuário"}
    assert deleted.status_code == 500
    assert deleted.json() == {"success": False, "data": "Falha ao remover o usuário"}
    assert SQLUserRepository().list() == []


def test_int64_boundary_ids_round_trip(temp_db):
    repo = SQLUserRepository()
    with TestClient(create_app()) as client:
        created = client.post("/users", json={"id": 2**63 - 1, "name": "Limite", "age": 40})
        fetched = client.get(f"/users/{2**63 - 1}")

    assert created.status_code == 201
    assert fetched.json()["data"]["id"] == 2**63 - 1
    assert repo.find_one(2**63 - 1) == User(id=2**63 - 1, name="Limite", age=40)
