"""
Base settings class for environment configuration.

Uses Pydantic Settings for automatic environment variable loading.
Extend this class for application-specific settings.

Example:
    from common.config import BaseAppSettings

    class Settings(BaseAppSettings):
        # App-specific settings
        MOCK_API_PORT: int = 5002

    settings = Settings()
    print(settings.API_BASE_URL)
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """
    Base settings class with common configuration options.

    Automatically loads values from environment variables.
    Extend this class for application-specific settings.
    """

    # ==========================================================================
    # Backend API Settings
    # ==========================================================================
    API_BASE_URL: str = "http://localhost:8000"
    API_TIMEOUT_SECONDS: float = 30.0

    # ==========================================================================
    # Authentication Settings
    # ==========================================================================
    # Bearer token handed over by the login flow (optional, mostly for scripts)
    ACCESS_TOKEN: Optional[str] = None

    # ==========================================================================
    # Logging Settings
    # ==========================================================================
    LOG_LEVEL: str = "INFO"

    # ==========================================================================
    # Environment
    # ==========================================================================
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production

    # ==========================================================================
    # Pydantic Settings Configuration
    # ==========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",  # Allow app-specific settings
        case_sensitive=True,
    )

    def get_api_base_url(self) -> str:
        """API base URL without a trailing slash."""
        return self.API_BASE_URL.rstrip("/")

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT.lower() == "production"

    def validate_required(self) -> None:
        """
        Validate that required settings are configured.

        Raises:
            ValueError: If required settings are missing
        """
        errors = []

        if not self.API_BASE_URL.startswith(("http://", "https://")):
            errors.append("API_BASE_URL must start with http:// or https://")

        if self.API_TIMEOUT_SECONDS <= 0:
            errors.append("API_TIMEOUT_SECONDS must be positive")

        if self.is_production() and self.API_BASE_URL.startswith("http://"):
            errors.append("API_BASE_URL must use https in production")

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))
