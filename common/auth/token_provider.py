"""
In-memory credential provider.

Holds the access token handed over by the login flow. Where the token
is persisted between sessions is the caller's concern.
"""

import logging
from typing import Optional

from common.auth.base import CredentialProvider

logger = logging.getLogger(__name__)


class StaticTokenProvider(CredentialProvider):
    """Credential provider backed by a single in-memory token."""

    def __init__(self, token: Optional[str] = None):
        self._token = token or None

    async def get_token(self) -> Optional[str]:
        return self._token

    def set_token(self, token: Optional[str]) -> None:
        """Replace the stored token (e.g. after login or refresh)."""
        self._token = token or None
        logger.debug("Access token updated")

    def clear_token(self) -> None:
        """Forget the stored token (e.g. on logout)."""
        self._token = None
        logger.debug("Access token cleared")
