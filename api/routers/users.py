from __future__ import annotations

import json

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.core.responses import envelope
from api.services.user_service import ServiceResult, UserService

router = APIRouter(prefix="/users", tags=["users"])


def _get_user_service(request: Request) -> UserService:
    svc = getattr(getattr(request.app, "state", None), "user_service", None)
    if not svc:
        raise RuntimeError("UserService nao configurado")
    return svc


def _render(result: ServiceResult) -> JSONResponse:
    return envelope(result.success, result.data, status_code=result.status_code)


@router.get("")
def list_users(request: Request):
    return _render(_get_user_service(request).list_users())


@router.get("/{user_id}")
def get_user(user_id: str, request: Request):
    return _render(_get_user_service(request).get_user(user_id))


@router.post("")
async def create_user(request: Request):
    # body is validated by the service so malformed input gets the envelope, not a 422
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        payload = None
    return _render(_get_user_service(request).create_user(payload))


@router.delete("/{user_id}")
def delete_user(user_id: str, request: Request):
    return _render(_get_user_service(request).delete_user(user_id))
