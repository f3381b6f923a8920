"""
Pydantic schemas for the dashboard.
"""

from dashboard.schemas.subprofile import (
    AREA_TYPES,
    WEEKDAYS,
    SCHEDULE_PRIORITIES,
    normalize_tags,
    ConfigurationItem,
    CameraLocation,
    MonitoringSchedule,
    AlertSettings,
    Profile,
    SubProfile,
    SubProfileForm,
    SubProfileRequest,
    SubProfilePatchRequest,
    SubProfileResponse,
)

__all__ = [
    "AREA_TYPES",
    "WEEKDAYS",
    "SCHEDULE_PRIORITIES",
    "normalize_tags",
    "ConfigurationItem",
    "CameraLocation",
    "MonitoringSchedule",
    "AlertSettings",
    "Profile",
    "SubProfile",
    "SubProfileForm",
    "SubProfileRequest",
    "SubProfilePatchRequest",
    "SubProfileResponse",
]
