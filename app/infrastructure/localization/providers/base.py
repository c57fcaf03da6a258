"""Request culture provider abstract class."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from starlette.requests import Request

from infrastructure.localization.models import ProviderCultureResult

if TYPE_CHECKING:
    from infrastructure.configuration import LocalizationSettings


class RequestCultureProvider(ABC):
    """Abstract Base Class for request culture providers.

    A provider inspects immutable request data and proposes candidate
    culture names. It must not modify the request or any shared state.
    """

    # Set by register_culture_provider
    provider_name: str = "custom"

    @classmethod
    def from_settings(cls, settings: "LocalizationSettings") -> "RequestCultureProvider":
        """Build the provider from localization settings.

        Providers without settings of their own use their defaults.
        """
        return cls()

    @abstractmethod
    def determine_provider_culture_result(
        self, request: Request
    ) -> Optional[ProviderCultureResult]:
        """Propose candidate cultures for a request.

        Args:
            request: The incoming request.

        Returns:
            Candidate culture names in priority order, or None when the
            request carries no signal this provider understands.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.provider_name!r}>"
