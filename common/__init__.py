"""
Common library for reusable infrastructure components.

This package provides generic modules that can be used across
multiple projects:

- auth: Pluggable credential providers for bearer-token requests
- utils: Standard responses and exceptions
- config: Base settings class
"""

from common.auth import CredentialProvider, StaticTokenProvider
from common.utils import (
    success_response,
    error_response,
    extract_error_message,
    APIException,
    AuthRequiredException,
    AccessDeniedException,
    NotFoundException,
    ValidationFailedException,
)
from common.config import BaseAppSettings

__all__ = [
    # Auth
    "CredentialProvider",
    "StaticTokenProvider",
    # Utils
    "success_response",
    "error_response",
    "extract_error_message",
    "APIException",
    "AuthRequiredException",
    "AccessDeniedException",
    "NotFoundException",
    "ValidationFailedException",
    # Config
    "BaseAppSettings",
]
