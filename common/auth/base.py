"""
Abstract credential provider interface.

Defines the contract the HTTP layer uses to obtain the bearer token it
attaches to each request. The core never reads tokens from ambient
storage; a provider is injected at construction instead.

Example:
    from common.auth import CredentialProvider, StaticTokenProvider

    def get_credentials(settings) -> CredentialProvider:
        return StaticTokenProvider(settings.ACCESS_TOKEN)
"""

from abc import ABC, abstractmethod
from typing import Optional


class CredentialProvider(ABC):
    """
    Abstract credential provider.

    Implement this interface for different token sources.
    All methods are async to support both sync and async implementations.
    """

    @abstractmethod
    async def get_token(self) -> Optional[str]:
        """
        Get the current bearer token.

        Returns:
            The access token, or None when the user is not logged in
        """
        pass

    async def get_auth_headers(self) -> dict:
        """
        Build the Authorization header for the current token.

        Returns:
            Header dict, empty when no token is available
        """
        token = await self.get_token()
        if not token:
            return {}
        return {"Authorization": f"Bearer {token}"}
