"""Structured logging for request execution.

Events carry their context in ``extra``. URLs are always logged with the
API key redacted. The library installs no handlers; enable the
``congressgov`` logger to see these events.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_request_retry(
    *,
    method: str,
    url: str,
    attempt: int,
    delay: float,
    status: int | None = None,
    error_type: str | None = None,
) -> None:
    """Log a scheduled retry.

    Args:
        method: HTTP method
        url: Redacted request URL
        attempt: Attempt number (1-indexed) that just failed
        delay: Seconds until the next attempt
        status: Transient HTTP status, if a response was received
        error_type: Transport error class name, if no response was received
    """
    logger.debug(
        "request_retry",
        extra={
            "method": method,
            "url": url,
            "attempt": attempt,
            "delay_s": round(delay, 3),
            "status": status,
            "error_type": error_type,
        },
    )


def log_request_failed(
    *,
    method: str,
    url: str,
    attempts: int,
    status: int | None = None,
    error_type: str | None = None,
    request_id: str | None = None,
) -> None:
    """Log a terminal failure just before it is raised to the caller."""
    logger.warning(
        "request_failed",
        extra={
            "method": method,
            "url": url,
            "attempts": attempts,
            "status": status,
            "error_type": error_type,
            "request_id": request_id,
        },
    )


def log_request_cancelled(*, method: str, url: str, attempt: int) -> None:
    """Log an operation abandoned because its token fired."""
    logger.debug(
        "request_cancelled",
        extra={"method": method, "url": url, "attempt": attempt},
    )
