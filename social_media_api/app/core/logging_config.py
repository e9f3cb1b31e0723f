"""
Logging configuration and request logging middleware.

``setup_logging`` configures the root logger with a console handler and
an optional file handler.  ``request_logging_middleware`` writes one line
per HTTP request with its method, path, status and latency.
"""

import logging
import time
import uuid
from pathlib import Path
from typing import Callable, List, Optional

from fastapi import Request, Response


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

request_logger = logging.getLogger("social_media_api.requests")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console (and optional file) handlers to the root logger.

    Does nothing when the root logger already has handlers, so calling
    ``create_app`` more than once does not duplicate output.  Unknown
    level names fall back to INFO.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)


async def request_logging_middleware(request: Request, call_next: Callable) -> Response:
    request_id = str(uuid.uuid4())
    start = time.perf_counter()
    request.state.request_id = request_id

    try:
        response = await call_next(request)
    except Exception:
        latency_ms = (time.perf_counter() - start) * 1000.0
        request_logger.error(
            "%s %s -> 500 (%.2f ms) request_id=%s",
            request.method,
            request.url.path,
            latency_ms,
            request_id,
        )
        raise

    latency_ms = (time.perf_counter() - start) * 1000.0
    request_logger.info(
        "%s %s -> %s (%.2f ms) request_id=%s",
        request.method,
        request.url.path,
        response.status_code,
        latency_ms,
        request_id,
    )
    response.headers["X-Request-ID"] = request_id
    return response
