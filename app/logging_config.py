# app/logging_config.py

import logging
import time

from fastapi import Request

from app.config import LOG_FORMAT, LOG_LEVEL

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format=LOG_FORMAT,
    )


async def log_requests(request: Request, call_next):
    """
    Log every request as "METHOD path -> status (elapsed ms)".
    """
    start = time.perf_counter()
    response = await call_next(request)
    elapsed = time.perf_counter() - start

    response.headers["X-Process-Time"] = f"{elapsed:.6f}"
    logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed * 1000,
    )
    return response
