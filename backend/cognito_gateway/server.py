"""Local development listener (the non-Lambda runtime)."""
from __future__ import annotations

import logging

import uvicorn

from cognito_gateway.core.config import settings

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if settings.is_lambda:
        logger.error("RUNTIME_MODE=lambda; the Lambda entry point serves requests, not a local listener.")
        return 1

    logger.info("App started on http://localhost:%s", settings.PORT)
    uvicorn.run(
        "cognito_gateway.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
