"""
Standard API response helpers.

Provides consistent response formatting for success and error cases,
and the inverse lookup used by clients to read a server error message.

Example:
    from common.utils import error_response, extract_error_message

    body = error_response("Sub-profile not found", code="SUBPROFILE_NOT_FOUND")
    extract_error_message(body)  # "Sub-profile not found"
"""

from typing import Any, Optional, Dict


def success_response(
    data: Any = None,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create a standard success response.

    Args:
        data: The response data (can be dict, list, or any serializable type)
        message: Optional success message

    Returns:
        Dictionary with success=True and optional data/message
    """
    response: Dict[str, Any] = {"success": True}

    if data is not None:
        response["data"] = data

    if message:
        response["message"] = message

    return response


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Any] = None,
    errors: Optional[list] = None,
) -> Dict[str, Any]:
    """
    Create a standard error response.

    Args:
        message: Human-readable error message
        code: Machine-readable error code (e.g., "SUBPROFILE_NOT_FOUND")
        details: Additional error details
        errors: List of specific errors (for validation errors)

    Returns:
        Dictionary with success=False and error info
    """
    error: Dict[str, Any] = {"message": message}

    if code:
        error["code"] = code

    if details is not None:
        error["details"] = details

    if errors:
        error["errors"] = errors

    return {"success": False, "error": error}


def extract_error_message(body: Any) -> Optional[str]:
    """
    Find the human-readable message in an error body.

    Looks at ``error.message``, then ``detail``, then ``message``.
    FastAPI validation errors put a list of ``{"loc", "msg", "type"}``
    entries in ``detail``; their messages are joined.

    Returns:
        The message, or None when the body carries none
    """
    if not isinstance(body, dict):
        return None

    error = body.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])

    detail = body.get("detail")
    if isinstance(detail, str) and detail:
        return detail
    if isinstance(detail, dict):
        message = extract_error_message(detail)
        if message:
            return message
    if isinstance(detail, list):
        messages = [
            str(item.get("msg"))
            for item in detail
            if isinstance(item, dict) and item.get("msg")
        ]
        if messages:
            return "; ".join(messages)

    if body.get("message"):
        return str(body["message"])

    return None
