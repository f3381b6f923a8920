"""
Utilities module - Common helpers for API responses and exceptions.
"""

from common.utils.responses import (
    success_response,
    error_response,
    extract_error_message,
)
from common.utils.exceptions import (
    APIException,
    AuthRequiredException,
    AccessDeniedException,
    NotFoundException,
    ValidationFailedException,
)

__all__ = [
    "success_response",
    "error_response",
    "extract_error_message",
    "APIException",
    "AuthRequiredException",
    "AccessDeniedException",
    "NotFoundException",
    "ValidationFailedException",
]
