"""Request culture provider registry.

Providers register under a short name with ``register_culture_provider``
and are instantiated, in configured order, by ``create_culture_providers``.
Built-in providers live in the submodules of this package and are imported
on first use by ``discover_culture_providers``.

Example:
    @register_culture_provider("header")
    class HeaderRequestCultureProvider(RequestCultureProvider):
        def determine_provider_culture_result(self, request):
            ...
"""

import importlib
import pkgutil
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Type

import structlog

from infrastructure.localization.providers.base import RequestCultureProvider

if TYPE_CHECKING:
    from infrastructure.configuration import LocalizationSettings

logger = structlog.get_logger()

_discovered: Dict[str, Type[RequestCultureProvider]] = {}


def register_culture_provider(name: str):
    """Register a request culture provider class under ``name``.

    Args:
        name: Unique identifier used in REQUEST_CULTURE_PROVIDERS

    Returns:
        Decorator function

    Raises:
        TypeError: If applied to something other than a RequestCultureProvider
            subclass
        RuntimeError: If the name is already taken
    """

    def decorator(obj):
        if not isinstance(obj, type):
            raise TypeError(
                "register_culture_provider decorator must be applied to a class"
            )

        if not issubclass(obj, RequestCultureProvider):
            raise TypeError(
                f"Culture provider must subclass RequestCultureProvider: {name}, got {obj}"
            )

        if name in _discovered:
            raise RuntimeError(f"Culture provider already registered with name: {name}")

        obj.provider_name = name
        _discovered[name] = obj
        logger.debug(
            "culture_provider_discovered", provider=name, class_name=obj.__name__
        )
        return obj

    return decorator


def discover_culture_providers() -> List[str]:
    """Import every built-in provider module so its classes register.

    Returns:
        Names of all registered providers.
    """
    for module_info in pkgutil.iter_modules(__path__):
        if module_info.name == "base":
            continue
        importlib.import_module(f"{__name__}.{module_info.name}")
    return get_registered_provider_names()


def get_registered_provider_names() -> List[str]:
    return sorted(_discovered)


def get_culture_provider_class(name: str) -> Optional[Type[RequestCultureProvider]]:
    """Return the provider class registered under ``name``, if any."""
    if name not in _discovered:
        discover_culture_providers()
    return _discovered.get(name)


def create_culture_providers(
    names: Sequence[str],
    settings: Optional["LocalizationSettings"] = None,
) -> List[RequestCultureProvider]:
    """Instantiate providers in the given order.

    Args:
        names: Registered provider names, in priority order.
        settings: Localization settings passed to each provider's
            ``from_settings``; providers use their defaults when omitted.

    Returns:
        Provider instances in the same order as ``names``.

    Raises:
        ValueError: If a name is unknown or listed twice.
    """
    providers: List[RequestCultureProvider] = []
    seen = set()
    for name in names:
        if name in seen:
            raise ValueError(f"Culture provider listed more than once: {name}")
        seen.add(name)

        provider_class = get_culture_provider_class(name)
        if provider_class is None:
            raise ValueError(
                f"Unknown culture provider: {name}. "
                f"Registered providers: {', '.join(get_registered_provider_names())}"
            )
        if settings is None:
            providers.append(provider_class())
        else:
            providers.append(provider_class.from_settings(settings))

    logger.info("culture_providers_created", providers=list(names))
    return providers


__all__ = [
    "RequestCultureProvider",
    "register_culture_provider",
    "discover_culture_providers",
    "get_registered_provider_names",
    "get_culture_provider_class",
    "create_culture_providers",
]
