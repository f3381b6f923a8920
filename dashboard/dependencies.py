"""
Factories wiring settings, credentials, repository and controllers.
"""

from functools import lru_cache
from typing import Optional

from common.auth import CredentialProvider, StaticTokenProvider
from dashboard.config import settings
from dashboard.schemas.subprofile import Profile
from dashboard.subprofiles.controller import SubProfileController
from dashboard.subprofiles.repository import SubProfileRepository


@lru_cache()
def get_credential_provider() -> StaticTokenProvider:
    """Process-wide token holder, seeded from ACCESS_TOKEN if set."""
    return StaticTokenProvider(settings.ACCESS_TOKEN)


def get_subprofile_repository(
    credentials: Optional[CredentialProvider] = None,
) -> SubProfileRepository:
    """
    Repository pointed at the configured API.

    Raises:
        ValueError: If the API settings are unusable
    """
    settings.validate_required()
    return SubProfileRepository(
        credentials or get_credential_provider(),
        base_url=settings.get_api_base_url(),
        timeout=settings.API_TIMEOUT_SECONDS,
    )


def get_subprofile_controller(
    profile: Profile,
    repository: Optional[SubProfileRepository] = None,
) -> SubProfileController:
    """A fresh controller owning the sub-profiles of ``profile``."""
    return SubProfileController(profile, repository or get_subprofile_repository())
