"""Logging configuration for the Solana gateway."""

import logging
import sys
import time
import uuid
from typing import Optional

import structlog

# Default log format
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

REQUEST_ID_HEADER = b"x-request-id"


def configure_logging(log_level: str = "INFO", log_format: Optional[str] = None) -> None:
    """Configure global logging settings.

    Standard library logging does the output; structlog is layered on top so
    boundary code can log key/value events through the same handlers.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log format string
    """
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    if log_format is None:
        log_format = DEFAULT_LOG_FORMAT

    # Configure root logger
    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        stream=sys.stdout,
        force=True
    )

    # Set third-party loggers to a higher level to reduce noise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger
    """
    return logging.getLogger(name)


class RequestIdMiddleware:
    """ASGI middleware that tags each request with an ID and logs its outcome."""

    def __init__(self, app):
        """Initialize middleware.

        Args:
            app: ASGI application
        """
        self.app = app
        self.logger = structlog.get_logger("solana_gateway.requests")

    async def __call__(self, scope, receive, send):
        """Process request with added request ID.

        Args:
            scope: ASGI scope
            receive: ASGI receive function
            send: ASGI send function
        """
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = None
        for header, value in scope.get("headers", []):
            if header == REQUEST_ID_HEADER:
                request_id = value.decode("latin-1")
                break
        if not request_id:
            request_id = str(uuid.uuid4())

        scope.setdefault("state", {})["request_id"] = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        method = scope.get("method", "unknown")
        path = scope.get("path", "unknown")
        start_time = time.perf_counter()

        async def wrapped_send(message):
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((REQUEST_ID_HEADER, request_id.encode("latin-1")))
                message["headers"] = headers

                duration_ms = (time.perf_counter() - start_time) * 1000
                self.logger.info(
                    "request completed",
                    method=method,
                    path=path,
                    status=message.get("status", 0),
                    duration_ms=round(duration_ms, 2)
                )

            await send(message)

        try:
            await self.app(scope, receive, wrapped_send)
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
