"""Server infrastructure settings."""

from typing import List

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        BACKEND_URL: Backend API base URL (default: http://127.0.0.1:8000)
        ALLOWED_ORIGINS: Comma separated CORS origins (default: *)
        RATE_LIMIT_SYSTEM: Rate limit applied to the system endpoints
        RATE_LIMIT_ENABLED: Turn request rate limiting on or off

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        origins = settings.server.allowed_origins
        ```
    """

    BACKEND_URL: str = Field(default="http://127.0.0.1:8000", alias="BACKEND_URL")
    ALLOWED_ORIGINS: str = Field(default="*", alias="ALLOWED_ORIGINS")
    RATE_LIMIT_SYSTEM: str = Field(default="50/minute", alias="RATE_LIMIT_SYSTEM")
    RATE_LIMIT_ENABLED: bool = Field(default=True, alias="RATE_LIMIT_ENABLED")

    @property
    def allowed_origins(self) -> List[str]:
        """CORS origins as a list; ``*`` allows any origin."""
        if self.ALLOWED_ORIGINS.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]
