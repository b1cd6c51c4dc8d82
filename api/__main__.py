"""Serve the users API with uvicorn: ``python -m api``."""
from __future__ import annotations

import uvicorn

from api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "dev",
    )


if __name__ == "__main__":
    main()
