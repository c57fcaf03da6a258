"""Request-scoped logging context.

The localization middleware binds the correlation id and the negotiated
culture pair for the duration of each request, so every event logged while
handling it carries them.
"""

import uuid
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog

CORRELATION_ID_KEY = "correlation_id"


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    culture: Optional[str] = None,
    ui_culture: Optional[str] = None,
    **extra: Any,
) -> Iterator[str]:
    """Bind request fields to the structlog context variables.

    Named fields that are None are not bound. The invariant culture ("") is
    a real value and is bound. Values bound by an enclosing block are
    restored on exit.

    Args:
        correlation_id: Request identifier; a UUID4 is generated when absent.
        request_path: Path of the request.
        request_method: HTTP method.
        culture: Negotiated culture.
        ui_culture: Negotiated UI culture.
        **extra: Further fields, bound as given.

    Yields:
        The correlation id in effect.

    Example:
        with bind_request_context(request_path="/en/Home", culture="en"):
            logger.info("request_culture_negotiated")
    """
    fields = {
        "request_path": request_path,
        "request_method": request_method,
        "culture": culture,
        "ui_culture": ui_culture,
    }
    values = {key: value for key, value in fields.items() if value is not None}
    values[CORRELATION_ID_KEY] = correlation_id or str(uuid.uuid4())
    values.update(extra)

    tokens = structlog.contextvars.bind_contextvars(**values)
    try:
        yield values[CORRELATION_ID_KEY]
    finally:
        structlog.contextvars.reset_contextvars(**tokens)


def get_correlation_id() -> Optional[str]:
    return structlog.contextvars.get_contextvars().get(CORRELATION_ID_KEY)


def set_correlation_id(correlation_id: str) -> None:
    structlog.contextvars.bind_contextvars(**{CORRELATION_ID_KEY: correlation_id})


def clear_request_context() -> None:
    """Drop every bound field, including those bound outside a block."""
    structlog.contextvars.clear_contextvars()
