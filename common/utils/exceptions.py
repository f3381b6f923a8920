"""
API client exceptions with error codes.

Every failure raised by the HTTP layer is normalized to one of these
classes so calling code has a single error shape to handle.

Example:
    from common.utils import APIException, NotFoundException

    try:
        sub_profile = await repository.get(42)
    except NotFoundException:
        ...
    except APIException as e:
        print(e.status_code, e.message)
"""

from typing import Optional, Any, Dict


class APIException(Exception):
    """
    Base API exception with error code support.

    Raised for any non-2xx response, transport failure or unreadable body
    that has no more specific subclass.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[str] = "API_ERROR",
        details: Optional[Any] = None,
    ):
        """
        Create an API exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status code, None for transport/parse failures
            code: Machine-readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error the way the standard error envelope does."""
        error: Dict[str, Any] = {"message": self.message}

        if self.code:
            error["code"] = self.code

        if self.details is not None:
            error["details"] = self.details

        return error


class AuthRequiredException(APIException):
    """401 Unauthorized - Missing or invalid authentication."""

    def __init__(
        self,
        message: str = "Authentication required. Please log in again.",
        code: str = "AUTH_REQUIRED",
        details: Optional[Any] = None,
    ):
        super().__init__(message, 401, code, details)


class AccessDeniedException(APIException):
    """403 Forbidden - Valid auth but insufficient permissions."""

    def __init__(
        self,
        message: str = "Access denied.",
        code: str = "ACCESS_DENIED",
        details: Optional[Any] = None,
    ):
        super().__init__(message, 403, code, details)


class NotFoundException(APIException):
    """404 Not Found - Resource doesn't exist."""

    def __init__(
        self,
        message: str = "Not found",
        code: str = "NOT_FOUND",
        details: Optional[Any] = None,
    ):
        super().__init__(message, 404, code, details)


class ValidationFailedException(APIException):
    """Local validation failure, raised before any request is sent."""

    def __init__(
        self,
        message: str = "Validation error",
        code: str = "VALIDATION_ERROR",
        errors: Optional[Dict[str, str]] = None,
        details: Optional[Any] = None,
    ):
        self.errors: Dict[str, str] = dict(errors or {})
        detail_info = details
        if self.errors:
            detail_info = {"errors": self.errors, **(details or {})}
        super().__init__(message, None, code, detail_info)
