"""Settings for the culture negotiation service.

``Settings`` aggregates one group per concern: ``settings.localization``
(culture negotiation) and ``settings.server`` (CORS, rate limits). Obtain
the process-wide instance through ``infrastructure.services.get_settings``.
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.features.localization import LocalizationSettings
from infrastructure.configuration.infrastructure.server import ServerSettings

__all__ = ["Settings", "LocalizationSettings", "ServerSettings"]
