from __future__ import annotations

import logging

import uvicorn

from .settings import get_settings, setup_logging

logger = logging.getLogger("letschat_relay")


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Server listening on port %s", settings.port)
    uvicorn.run(
        "letschat_relay.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
