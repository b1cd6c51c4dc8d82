"""
Create (or drop) the users table.

Uso:
  DATABASE_URL=sqlite:///users.db python -m api.db.create_tables [--drop]
"""
from __future__ import annotations

import argparse
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers UserRecord on Base.metadata


def create_all(engine: Optional[Engine] = None) -> None:
    """Create missing tables; existing rows are left untouched."""
    Base.metadata.create_all(bind=engine or get_engine())


def drop_all(engine: Optional[Engine] = None) -> None:
    Base.metadata.drop_all(bind=engine or get_engine())


def main() -> None:
    ap = argparse.ArgumentParser(description="Criar a tabela de usuarios no DATABASE_URL")
    ap.add_argument("--drop", action="store_true", help="apaga a tabela antes de recriar")
    args = ap.parse_args()
    if args.drop:
        drop_all()
    create_all()
    print(f"Tabela '{models.UserRecord.__tablename__}' pronta.")


if __name__ == "__main__":
    try:
        main()
    except SQLAlchemyError as exc:
        raise SystemExit(f"Falha ao criar tabelas: {exc}") from exc
