"""
Pydantic models for sub-profiles and their configuration items.

Configuration items travel inside the nested maps exactly as the browser
built them, so their wire keys are camelCase (``cameraType``,
``notificationMethods``). Unknown keys are kept so nothing is lost when an
item goes through the codec.
"""

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


AREA_TYPES = (
    "dining",
    "kitchen",
    "entrance",
    "parking",
    "office",
    "retail",
    "warehouse",
    "outdoor",
    "lobby",
    "other",
)

WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

SCHEDULE_PRIORITIES = ("low", "medium", "high")


def normalize_tags(tags: Union[str, Iterable[str], None]) -> List[str]:
    """
    Normalize user-entered tags.

    Accepts a list or the comma-separated string typed into the tags
    field. Tags are trimmed and case-folded; empty tags and
    case-insensitive duplicates are dropped, first occurrence wins.

    Example:
        >>> normalize_tags(["Security", "security", " monitoring "])
        ['security', 'monitoring']
    """
    if tags is None:
        return []
    if isinstance(tags, str):
        tags = tags.split(",")

    normalized: List[str] = []
    seen = set()
    for tag in tags:
        if tag is None:
            continue
        value = str(tag).strip().casefold()
        if not value or value in seen:
            continue
        seen.add(value)
        normalized.append(value)
    return normalized


# =============================================================================
# Configuration Items
# =============================================================================

class ConfigurationItem(BaseModel):
    """Common base for camera, schedule and alert entries."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    # Assigned by the backend on save, never edited
    id: Optional[Union[int, str]] = None
    name: str = ""


class CameraLocation(ConfigurationItem):
    """A camera installed in the monitored area."""
    location: str = ""
    camera_type: str = ""
    ip_address: Optional[str] = None
    port: Optional[int] = None
    username: Optional[str] = None
    password: Optional[str] = None
    is_active: bool = True


class MonitoringSchedule(ConfigurationItem):
    """A weekly time window during which the area is monitored."""
    days: List[str] = []
    start_time: str = ""
    end_time: str = ""
    timezone: str = "UTC"
    is_active: bool = True
    priority: str = "medium"


class AlertSettings(ConfigurationItem):
    """An alert rule and where its notifications go."""
    type: str = ""
    notification_methods: List[str] = []
    threshold: Optional[float] = None
    enabled: bool = True
    conditions: Optional[Dict[str, Any]] = None


# =============================================================================
# Entities
# =============================================================================

class Profile(BaseModel):
    """Parent business entity; only its id and name matter here."""
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    business_type: Optional[str] = None
    address: Optional[str] = None


class SubProfile(BaseModel):
    """One monitored area, as held in memory by the dashboard."""

    model_config = ConfigDict(frozen=True)

    id: int
    uuid: str = ""
    profile_id: int
    name: str
    description: str = ""
    tags: List[str] = []
    area_type: str = ""
    camera_locations: List[CameraLocation] = []
    monitoring_schedules: List[MonitoringSchedule] = []
    alert_settings: List[AlertSettings] = []
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value: Any) -> List[str]:
        return normalize_tags(value)

    @field_validator("description", mode="before")
    @classmethod
    def _empty_description(cls, value: Any) -> str:
        return value or ""


class SubProfileForm(BaseModel):
    """
    Editable candidate for create and update.

    Values are kept as typed; the validator reports problems instead of
    the model rejecting them, so a half-filled form can still be built.
    """

    name: str = ""
    description: str = ""
    area_type: str = ""
    tags: List[str] = []
    camera_locations: List[CameraLocation] = []
    monitoring_schedules: List[MonitoringSchedule] = []
    alert_settings: List[AlertSettings] = []

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value: Any) -> List[str]:
        return normalize_tags(value)

    @field_validator("name", "description", "area_type", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> str:
        return value or ""


# =============================================================================
# Wire Schemas
# =============================================================================

class SubProfileRequest(BaseModel):
    """POST /profiles/{profile_id}/sub-profiles and PUT /sub-profiles/{id}"""
    sub_profile_name: str
    description: str = ""
    tags: List[str] = []
    area_type: str
    camera_locations: Dict[str, Any] = {}
    monitoring_schedule: Dict[str, Any] = {}
    alert_settings: Dict[str, Any] = {}


class SubProfilePatchRequest(BaseModel):
    """PATCH /sub-profiles/{id} - only supplied keys change."""
    sub_profile_name: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[List[str]] = None
    area_type: Optional[str] = None
    camera_locations: Optional[Dict[str, Any]] = None
    monitoring_schedule: Optional[Dict[str, Any]] = None
    alert_settings: Optional[Dict[str, Any]] = None
    is_active: Optional[bool] = None


class SubProfileResponse(BaseModel):
    """
    Sub-profile as returned by the backend.

    Nested collections are usually maps keyed ``camera_0`` etc. but may
    come back as arrays, so they are left untyped here.
    """

    model_config = ConfigDict(extra="ignore")

    id: int
    uuid: str = ""
    profile_id: int
    sub_profile_name: str
    description: Optional[str] = ""
    tags: Optional[List[str]] = None
    area_type: str = ""
    camera_locations: Any = None
    monitoring_schedule: Any = None
    alert_settings: Any = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
