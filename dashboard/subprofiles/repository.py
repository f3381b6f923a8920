"""
Sub-profile repository.

Async client for the backend's sub-profile resource. Requests carry the
bearer token from the injected credential provider; every failure is
raised as one of the exceptions in ``common.utils.exceptions``, never as
a raw transport or parse error.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from common.auth import CredentialProvider
from common.utils import (
    APIException,
    AuthRequiredException,
    AccessDeniedException,
    NotFoundException,
    extract_error_message,
)
from dashboard.config import settings
from dashboard.schemas.subprofile import SubProfile
from dashboard.subprofiles.codec import decode_sub_profile

logger = logging.getLogger(__name__)


def normalize_list_payload(data: Any) -> List[Any]:
    """
    Normalize a list response to a plain list.

    The backend answers with a bare array, ``{"sub_profiles": [...]}``,
    ``{"data": [...]}`` or occasionally a single object, checked in that
    order.
    """
    if data is None:
        return []
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        if isinstance(data.get("sub_profiles"), list):
            return data["sub_profiles"]
        if isinstance(data.get("data"), list):
            return data["data"]
        if not data:
            return []
        return [data]
    raise APIException(
        "Invalid response from server: unexpected sub-profile list format",
        code="INVALID_RESPONSE",
    )


class SubProfileRepository:
    """
    Remote CRUD for sub-profiles.

    One instance can serve every profile; the profile id is passed per
    call.
    """

    def __init__(
        self,
        credentials: CredentialProvider,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the repository.

        Args:
            credentials: Source of the bearer token
            base_url: API root, defaults to settings.API_BASE_URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (mock or ASGI app in tests)
        """
        self._credentials = credentials
        self._base_url = (base_url or settings.get_api_base_url()).rstrip("/")
        self._timeout = timeout or settings.API_TIMEOUT_SECONDS
        self._transport = transport

    # =========================================================================
    # Operations
    # =========================================================================

    async def create(self, profile_id: int, payload: Dict[str, Any]) -> SubProfile:
        """
        Create a sub-profile under a profile.

        Args:
            profile_id: Parent profile id
            payload: Request body; nested collections already keyed

        Returns:
            The created sub-profile with server-assigned id, uuid and timestamps
        """
        data = await self._request(
            "POST",
            f"/profiles/{profile_id}/sub-profiles",
            action="create sub-profiles",
            json=payload,
        )
        sub_profile = self._decode(data)
        logger.info(f"Sub-profile {sub_profile.id} created for profile {profile_id}")
        return sub_profile

    async def list(
        self,
        profile_id: int,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> List[SubProfile]:
        """List the sub-profiles of a profile."""
        params = {}
        if page is not None:
            params["page"] = page
        if size is not None:
            params["size"] = size

        data = await self._request(
            "GET",
            f"/profiles/{profile_id}/sub-profiles",
            action="view sub-profiles",
            params=params or None,
        )
        return [self._decode(item) for item in normalize_list_payload(data)]

    async def get(self, sub_profile_id: int) -> SubProfile:
        """Fetch a single sub-profile."""
        data = await self._request(
            "GET",
            f"/sub-profiles/{sub_profile_id}",
            action="view this sub-profile",
            not_found=True,
        )
        return self._decode(data)

    async def update(
        self,
        profile_id: int,
        sub_profile_id: int,
        payload: Dict[str, Any],
    ) -> SubProfile:
        """
        Replace a sub-profile.

        The backend resets omitted fields, so ``payload`` must hold every
        editable field even when unchanged.
        """
        data = await self._request(
            "PUT",
            f"/sub-profiles/{sub_profile_id}",
            action="update this sub-profile",
            json=payload,
            not_found=True,
        )
        logger.info(f"Sub-profile {sub_profile_id} of profile {profile_id} updated")
        return self._decode(data)

    async def partial_update(
        self,
        sub_profile_id: int,
        partial_payload: Dict[str, Any],
    ) -> SubProfile:
        """Change only the supplied keys (used for the active toggle)."""
        data = await self._request(
            "PATCH",
            f"/sub-profiles/{sub_profile_id}",
            action="update this sub-profile",
            json=partial_payload,
            not_found=True,
        )
        return self._decode(data)

    async def delete(self, profile_id: int, sub_profile_id: int) -> None:
        """
        Delete a sub-profile.

        The caller must have confirmed the deletion. A 404 is an error:
        the local list is expected to match the server.
        """
        await self._request(
            "DELETE",
            f"/sub-profiles/{sub_profile_id}",
            action="delete this sub-profile",
            not_found=True,
        )
        logger.info(f"Sub-profile {sub_profile_id} of profile {profile_id} deleted")

    # =========================================================================
    # HTTP helpers
    # =========================================================================

    async def _headers(self) -> Dict[str, str]:
        auth_headers = await self._credentials.get_auth_headers()
        if not auth_headers:
            raise AuthRequiredException(
                message="Authentication token not found. Please log in.",
                code="TOKEN_MISSING",
            )
        return {"Content-Type": "application/json", **auth_headers}

    async def _request(
        self,
        method: str,
        path: str,
        action: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        not_found: bool = False,
    ) -> Any:
        headers = await self._headers()
        url = f"{self._base_url}{path}"

        logger.debug(f"Sub-profile request: {method} {url} params={params}")
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._timeout,
            ) as client:
                response = await client.request(
                    method,
                    url,
                    json=json,
                    params=params,
                    headers=headers,
                )
        except httpx.RequestError as e:
            logger.error(f"Sub-profile API connection error: {method} {url}: {e}")
            raise APIException(
                f"Failed to connect to API: {e}",
                code="CONNECTION_ERROR",
            ) from e

        if not response.is_success:
            raise self._error_for(response, action, not_found)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Unparsable response from {method} {url}")
            raise APIException(
                "Invalid response from server",
                status_code=response.status_code,
                code="INVALID_RESPONSE",
            ) from e

    def _error_for(
        self,
        response: httpx.Response,
        action: str,
        not_found: bool,
    ) -> APIException:
        """Map an error response to the matching exception."""
        status = response.status_code
        logger.warning(f"Sub-profile API error {status} on {response.request.method} {response.request.url}")

        if status == 401:
            return AuthRequiredException()
        if status == 403:
            return AccessDeniedException(
                message=f"Access denied. You do not have permission to {action}."
            )
        if status == 404 and not_found:
            return NotFoundException(
                message="Sub-profile not found.",
                code="SUBPROFILE_NOT_FOUND",
            )

        try:
            body = response.json()
        except ValueError:
            body = None

        message = extract_error_message(body) or (
            f"Failed to {action}: {status} - {response.reason_phrase}"
        )
        return APIException(
            message,
            status_code=status,
            details=body if isinstance(body, dict) else None,
        )

    def _decode(self, data: Any) -> SubProfile:
        try:
            return decode_sub_profile(data)
        except ValidationError as e:
            logger.error(f"Could not decode sub-profile: {e}")
            raise APIException(
                "Invalid response from server: malformed sub-profile",
                code="INVALID_RESPONSE",
                details=e.errors(include_url=False),
            ) from e
