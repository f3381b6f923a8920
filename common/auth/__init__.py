"""
Authentication module - Pluggable credential providers.
"""

from common.auth.base import CredentialProvider
from common.auth.token_provider import StaticTokenProvider

__all__ = ["CredentialProvider", "StaticTokenProvider"]
