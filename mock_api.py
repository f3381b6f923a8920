"""
Sub-profile Mock API Server

A FastAPI mock server that simulates the sub-profile endpoints of the
video-analytics backend for frontend development and testing, keeping
everything in memory.

Run with: uvicorn mock_api:app --port 5002 --reload
"""

import secrets
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Header, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from common.utils import error_response, success_response
from dashboard.config import settings
from dashboard.schemas.subprofile import SubProfilePatchRequest, SubProfileRequest


# =============================================================================
# APP SETUP
# =============================================================================

app = FastAPI(
    title="Sub-profile Mock API",
    description="Mock API server for dashboard development",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["Content-Type", "Authorization", "Accept", "Origin", "X-Requested-With"],
)


class MockAPIError(Exception):
    """Error answered with the standard error envelope."""

    def __init__(self, status_code: int, message: str, code: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code


@app.exception_handler(MockAPIError)
async def mock_api_error_handler(request: Request, exc: MockAPIError):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.message, code=exc.code),
    )


# =============================================================================
# MOCK STORES
# =============================================================================

mock_tokens: dict[str, dict] = {}

MOCK_USER = {
    "id": "usr_mock123",
    "email": "operator@example.com",
    "isAdmin": False,
}

MOCK_PROFILES: dict[int, dict] = {
    1: {"id": 1, "name": "Harbour Bistro", "business_type": "restaurant"},
    2: {"id": 2, "name": "Northside Depot", "business_type": "logistics"},
}

# Profiles the mock user may read but not change
READ_ONLY_PROFILES = {2}

sub_profiles: dict[int, dict] = {}
_next_id = 1


def generate_token() -> str:
    return f"mock_token_{secrets.token_hex(16)}"


def issue_token(user: Optional[dict] = None) -> str:
    """Register a token for ``user`` (the mock user by default)."""
    token = generate_token()
    mock_tokens[token] = dict(user or MOCK_USER)
    return token


def reset_store() -> None:
    """Drop all sub-profiles and tokens."""
    global _next_id
    sub_profiles.clear()
    mock_tokens.clear()
    _next_id = 1


def get_user_from_token(authorization: Optional[str]) -> Optional[dict]:
    if not authorization:
        return None
    token = authorization.replace("Bearer ", "")
    return mock_tokens.get(token)


def require_auth(authorization: Optional[str] = Header(None)) -> dict:
    user = get_user_from_token(authorization)
    if not user:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user


def require_profile(profile_id: int, write: bool = False) -> dict:
    profile = MOCK_PROFILES.get(profile_id)
    if not profile:
        raise MockAPIError(404, "Profile not found", "PROFILE_NOT_FOUND")
    if write and profile_id in READ_ONLY_PROFILES:
        raise HTTPException(status_code=403, detail="Forbidden")
    return profile


def require_sub_profile(sub_profile_id: int, write: bool = False) -> dict:
    record = sub_profiles.get(sub_profile_id)
    if not record:
        raise MockAPIError(404, "Sub-profile not found", "SUBPROFILE_NOT_FOUND")
    require_profile(record["profile_id"], write=write)
    return record


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def assign_item_ids(collection: Dict[str, Any]) -> Dict[str, Any]:
    """Give every nested item a fresh id, as the real backend does on save."""
    stored = {}
    for key, item in collection.items():
        if isinstance(item, dict):
            item = {**item, "id": f"{key}_{secrets.token_hex(4)}"}
        stored[key] = item
    return stored


# =============================================================================
# REQUEST MODELS
# =============================================================================


class LoginRequest(BaseModel):
    email: str
    password: str


# =============================================================================
# HEALTH CHECK
# =============================================================================


@app.get("/health")
async def health_check():
    return success_response(
        {
            "status": "ok",
            "service": "subprofile-mock-api",
            "timestamp": now_iso(),
        }
    )


# =============================================================================
# AUTH ENDPOINTS
# =============================================================================


@app.post("/auth/login")
async def login(request: LoginRequest):
    token = issue_token({**MOCK_USER, "email": request.email})
    return {"access_token": token, "token_type": "bearer"}


# =============================================================================
# SUB-PROFILE ENDPOINTS
# =============================================================================


@app.post("/profiles/{profile_id}/sub-profiles", status_code=201)
async def create_sub_profile(
    profile_id: int,
    request: SubProfileRequest,
    authorization: Optional[str] = Header(None),
):
    global _next_id
    require_auth(authorization)
    require_profile(profile_id, write=True)

    timestamp = now_iso()
    record = {
        "id": _next_id,
        "uuid": str(uuid.uuid4()),
        "profile_id": profile_id,
        "sub_profile_name": request.sub_profile_name,
        "description": request.description,
        "tags": request.tags,
        "area_type": request.area_type,
        "camera_locations": assign_item_ids(request.camera_locations),
        "monitoring_schedule": assign_item_ids(request.monitoring_schedule),
        "alert_settings": assign_item_ids(request.alert_settings),
        "is_active": True,
        "created_at": timestamp,
        "updated_at": timestamp,
    }
    sub_profiles[_next_id] = record
    _next_id += 1
    return record


@app.get("/profiles/{profile_id}/sub-profiles")
async def list_sub_profiles(
    profile_id: int,
    page: Optional[int] = None,
    size: Optional[int] = None,
    authorization: Optional[str] = Header(None),
):
    require_auth(authorization)
    require_profile(profile_id)

    records = [r for r in sub_profiles.values() if r["profile_id"] == profile_id]
    total = len(records)
    if page is not None and size:
        start = (page - 1) * size
        records = records[start:start + size]

    return {"sub_profiles": records, "total": total, "page": page, "size": size}


@app.get("/sub-profiles/{sub_profile_id}")
async def get_sub_profile(
    sub_profile_id: int, authorization: Optional[str] = Header(None)
):
    require_auth(authorization)
    return require_sub_profile(sub_profile_id)


@app.put("/sub-profiles/{sub_profile_id}")
async def replace_sub_profile(
    sub_profile_id: int,
    request: SubProfileRequest,
    authorization: Optional[str] = Header(None),
):
    require_auth(authorization)
    record = require_sub_profile(sub_profile_id, write=True)

    record.update(
        sub_profile_name=request.sub_profile_name,
        description=request.description,
        tags=request.tags,
        area_type=request.area_type,
        camera_locations=assign_item_ids(request.camera_locations),
        monitoring_schedule=assign_item_ids(request.monitoring_schedule),
        alert_settings=assign_item_ids(request.alert_settings),
        updated_at=now_iso(),
    )
    return record


@app.patch("/sub-profiles/{sub_profile_id}")
async def patch_sub_profile(
    sub_profile_id: int,
    request: SubProfilePatchRequest,
    authorization: Optional[str] = Header(None),
):
    require_auth(authorization)
    record = require_sub_profile(sub_profile_id, write=True)

    changes = request.model_dump(exclude_unset=True)
    for key in ("camera_locations", "monitoring_schedule", "alert_settings"):
        if changes.get(key) is not None:
            changes[key] = assign_item_ids(changes[key])
    record.update(changes, updated_at=now_iso())
    return record


@app.delete("/sub-profiles/{sub_profile_id}", status_code=204)
async def delete_sub_profile(
    sub_profile_id: int, authorization: Optional[str] = Header(None)
):
    require_auth(authorization)
    require_sub_profile(sub_profile_id, write=True)
    del sub_profiles[sub_profile_id]
    return Response(status_code=204)


# =============================================================================
# MAIN
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    from dashboard.config import configure_logging

    configure_logging()
    uvicorn.run(app, host=settings.MOCK_API_HOST, port=settings.MOCK_API_PORT)
