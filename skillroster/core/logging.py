"""
Structured logging using structlog on top of stdlib logging.

Every line emitted while a request is in flight carries its ``request_id``,
and once the caller has authenticated, their ``user_id``. Credentials never
reach the output: values under password/token keys are masked.
"""
import logging
import sys
import time
import uuid
from typing import Any, MutableMapping

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from skillroster.core.config import settings

SENSITIVE_KEYS = frozenset({"password", "password_hash", "token", "authorization"})


def mask_credentials(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """structlog processor replacing credential values with a placeholder."""
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = "***"
    return event_dict


def setup_logging() -> None:
    """Route structlog through the root logger. Called from the app lifespan."""
    renderer = (
        structlog.dev.ConsoleRenderer()
        if settings.environment == "development"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            mask_credentials,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if settings.debug else logging.INFO)

    # request_completed replaces uvicorn's access line
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.WARNING)
    if not settings.db_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a named structlog logger."""
    return structlog.get_logger(name)


def bind_user(user_id: str) -> None:
    """Attach the authenticated user to every later log line of this request."""
    structlog.contextvars.bind_contextvars(user_id=user_id)


logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an ID and log one ``request_completed`` line for it.

    The ID comes from the ``X-Request-ID`` header when the client sends one and
    is echoed back on the response.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start_time = time.time()
        response = await call_next(request)

        # The endpoint runs in its own task, so its contextvars are gone by now
        user = getattr(request.state, "current_user", None)
        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=int((time.time() - start_time) * 1000),
            user_id=str(user.id) if user is not None else None,
        )

        response.headers["X-Request-ID"] = request_id
        return response
