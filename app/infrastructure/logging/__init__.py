"""Structured logging (structlog).

Public API:
    - configure_logging(): configure structlog once at startup
    - get_module_logger(): logger bound to the calling module
    - bind_request_context(): request fields for every event in a block
    - get_correlation_id() / set_correlation_id() / clear_request_context()

Processors:
    - add_service_info(), redact_sensitive_values(), clip_request_values()
"""

from infrastructure.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
    set_correlation_id,
)
from infrastructure.logging.processors import (
    SENSITIVE_KEY_FRAGMENTS,
    add_service_info,
    clip_request_values,
    redact_sensitive_values,
)
from infrastructure.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "clear_request_context",
    "get_correlation_id",
    "set_correlation_id",
    "SENSITIVE_KEY_FRAGMENTS",
    "add_service_info",
    "clip_request_values",
    "redact_sensitive_values",
]
