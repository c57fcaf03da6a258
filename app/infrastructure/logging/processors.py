"""structlog processors shared by the development and production pipelines.

Every factory returns a processor: a callable taking
``(logger, method_name, event_dict)`` and returning the event dict.
"""

from typing import Any, Callable, Iterable, MutableMapping, Optional

EventDict = MutableMapping[str, Any]
Processor = Callable[[Any, str, EventDict], EventDict]

REDACTED = "***REDACTED***"

# Key fragments whose values are redacted
SENSITIVE_KEY_FRAGMENTS = frozenset(
    {
        "password",
        "secret",
        "token",
        "api_key",
        "apikey",
        "authorization",
        "credential",
        "private_key",
        "session_id",
        "set_cookie",
        "jwt",
        "bearer",
    }
)


def add_service_info(
    name: str, version: str = "unknown", environment: Optional[str] = None
) -> Processor:
    """Stamp every event with the service name, version and environment.

    Args:
        name: Service name.
        version: Deployed version, usually the git SHA.
        environment: Environment name; omitted from events when None.
    """
    stamp = {"app_name": name, "app_version": version}
    if environment is not None:
        stamp["environment"] = environment

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.update(stamp)
        return event_dict

    return processor


def redact_sensitive_values(
    extra_fragments: Iterable[str] = (), replacement: str = REDACTED
) -> Processor:
    """Replace values whose key contains a sensitive fragment.

    Matching ignores case. ``None`` values are kept so that "not set" stays
    visible in the output.
    """
    fragments = tuple(
        SENSITIVE_KEY_FRAGMENTS.union(fragment.lower() for fragment in extra_fragments)
    )

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in event_dict.items():
            if value is None:
                continue
            lowered = key.lower()
            if any(fragment in lowered for fragment in fragments):
                event_dict[key] = replacement
        return event_dict

    return processor


def clip_request_values(max_length: int = 256, max_items: int = 10) -> Processor:
    """Bound the size of client-controlled values.

    Request paths and header derived values (Accept-Language candidates,
    cookie contents) end up in negotiation events, so long strings are cut
    at ``max_length`` characters and long candidate sequences at
    ``max_items`` entries.
    """

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = f"{value[:max_length]}...[{len(value)} chars]"
            elif isinstance(value, (list, tuple)) and len(value) > max_items:
                event_dict[key] = [*value[:max_items], f"...[{len(value)} items]"]
        return event_dict

    return processor
