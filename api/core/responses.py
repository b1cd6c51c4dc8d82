"""Uniform ``{success, data}`` response envelope."""

from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def envelope(success: bool, data: Any, status_code: int = 200) -> JSONResponse:
    """Wrap ``data`` in the envelope every endpoint returns."""
    return JSONResponse(
        status_code=status_code,
        content={"success": bool(success), "data": jsonable_encoder(data)},
    )
