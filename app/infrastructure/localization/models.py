"""Data structures for request culture negotiation.

Culture names are plain strings. The empty string is the invariant culture
and is a valid value; ``None`` always means "no value".
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from infrastructure.localization.providers.base import RequestCultureProvider


def _as_name_tuple(names: Optional[Iterable[str]]) -> Optional[Tuple[str, ...]]:
    if names is None:
        return None
    if isinstance(names, str):
        return (names,)
    return tuple(names)


@dataclass(frozen=True)
class RequestCulture:
    """A culture / UI culture pair.

    Used both for candidates proposed by providers and for the resolved
    decision of a request. When ``ui_culture`` is omitted it equals
    ``culture``.

    Attributes:
        culture: Culture governing formatting of dates, numbers, etc.
        ui_culture: Culture governing which translated text is displayed.
    """

    culture: str
    ui_culture: Optional[str] = None

    def __post_init__(self):
        if self.culture is None:
            raise ValueError("culture must not be None")
        if self.ui_culture is None:
            object.__setattr__(self, "ui_culture", self.culture)


@dataclass(frozen=True)
class ProviderCultureResult:
    """Candidate culture names proposed by a provider, in priority order.

    Attributes:
        cultures: Candidate culture names.
        ui_cultures: Candidate UI culture names. Defaults to ``cultures``.
    """

    cultures: Tuple[str, ...]
    ui_cultures: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        cultures = _as_name_tuple(self.cultures) or ()
        ui_cultures = _as_name_tuple(self.ui_cultures)
        object.__setattr__(self, "cultures", cultures)
        object.__setattr__(
            self, "ui_cultures", cultures if ui_cultures is None else ui_cultures
        )


@dataclass(frozen=True)
class RequestCultureFeature:
    """Outcome of negotiation for a single request.

    Attributes:
        request_culture: The resolved culture pair.
        provider: The provider that produced it, or None when the configured
            default was used because no provider matched.
    """

    request_culture: RequestCulture
    provider: Optional["RequestCultureProvider"] = None

    @property
    def provider_name(self) -> Optional[str]:
        if self.provider is None:
            return None
        return self.provider.provider_name


@dataclass(frozen=True)
class LocalizationOptions:
    """Process-wide request localization configuration.

    Built once at startup and read-only afterwards. A supported list of
    ``None`` disables matching for that axis.

    Attributes:
        default_request_culture: Pair used when no provider matches.
        supported_cultures: Ordered supported culture names.
        supported_ui_cultures: Ordered supported UI culture names.
        fallback_to_parent_cultures: Try parent cultures when unmatched.
        fallback_to_parent_ui_cultures: Try parent UI cultures when unmatched.
        apply_current_culture_to_response_headers: Write Content-Language.
        request_culture_providers: Providers consulted in order.

    Raises:
        ValueError: If a supported list holds the same name twice
            (case-insensitive).
    """

    default_request_culture: RequestCulture
    supported_cultures: Optional[Tuple[str, ...]] = None
    supported_ui_cultures: Optional[Tuple[str, ...]] = None
    fallback_to_parent_cultures: bool = True
    fallback_to_parent_ui_cultures: bool = True
    apply_current_culture_to_response_headers: bool = False
    request_culture_providers: Tuple["RequestCultureProvider", ...] = field(
        default_factory=tuple
    )

    def __post_init__(self):
        for attr in ("supported_cultures", "supported_ui_cultures"):
            names = _as_name_tuple(getattr(self, attr))
            if names is not None:
                _ensure_unique(names, attr)
            object.__setattr__(self, attr, names)
        object.__setattr__(
            self, "request_culture_providers", tuple(self.request_culture_providers)
        )

    @property
    def provider_names(self) -> Tuple[str, ...]:
        return tuple(p.provider_name for p in self.request_culture_providers)


def _ensure_unique(names: Sequence[str], attr: str) -> None:
    seen = set()
    for name in names:
        folded = name.casefold()
        if folded in seen:
            raise ValueError(f"Duplicate culture {name!r} in {attr}")
        seen.add(folded)
