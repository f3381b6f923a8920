"""
Dashboard application settings.

Extends the base settings with dashboard-specific configuration.
"""

import logging
from typing import Optional

from common.config import BaseAppSettings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseAppSettings):
    """Dashboard-specific settings."""

    # ==========================================================================
    # Mock Backend (local development)
    # ==========================================================================
    MOCK_API_HOST: str = "0.0.0.0"
    MOCK_API_PORT: int = 5002

    # Comma-separated origins or "*"
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:3001"

    def get_cors_origins(self) -> list:
        """Parse CORS_ORIGINS into a list."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for scripts and the mock server."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO),
        format=LOG_FORMAT,
    )


# Global settings instance
settings = Settings()
