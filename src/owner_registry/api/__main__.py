"""
owner_registry.api.__main__

Entrypoint for running the service via `python -m owner_registry.api`
(also installed as the `owner-registry-api` console script).
"""

from __future__ import annotations

import uvicorn

from owner_registry.api.app import create_app
from owner_registry.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
        log_config=None,  # records flow into the structlog handler on the root logger
        access_log=False,  # RequestContextMiddleware logs `request_completed`
    )


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# In containers, prefer running this module directly over the uvicorn CLI so the
# structlog handler is installed before uvicorn emits its first record.
