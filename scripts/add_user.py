#!/usr/bin/env python3
"""
Cadastrar um usuario diretamente no banco SQL (DATABASE_URL).

Uso:
  python scripts/add_user.py --id 1 --name "Alice Silva" --age 25
"""
from __future__ import annotations

import argparse
import sys

from api.db.create_tables import create_all
from api.domain.users import UserResponse, parse_user
from api.repositories.sql_repository import SQLUserRepository


def main() -> None:
    ap = argparse.ArgumentParser(description="Cadastrar usuario no banco SQL")
    ap.add_argument("--id", type=int, required=True, help="ID unico do usuario")
    ap.add_argument("--name", required=True, help="Nome completo")
    ap.add_argument("--age", type=int, required=True, help="Idade em anos")
    args = ap.parse_args()

    user, reason = parse_user({"id": args.id, "name": args.name, "age": args.age})
    if user is None:
        raise SystemExit(f"Dados invalidos ({reason})")

    create_all()
    repo = SQLUserRepository()
    if not repo.save(user):
        raise SystemExit(f"ID '{user.id}' ja existe no banco")
    view = UserResponse.from_user(user)
    print("OK: usuario cadastrado")
    print(f"  ID: {view.id}")
    print(f"  Nome: {view.name}")
    print(f"  Idade: {view.age} ({'maior' if view.is_of_age else 'menor'} de idade)")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
