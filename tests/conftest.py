"""Shared test fixtures for the sub-profile dashboard core."""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock

from dashboard.schemas.subprofile import (
    AlertSettings,
    CameraLocation,
    MonitoringSchedule,
    Profile,
    SubProfile,
    SubProfileForm,
)
from dashboard.subprofiles.repository import SubProfileRepository


@pytest.fixture
def sample_profile():
    return Profile(id=7, name="Harbour Bistro", business_type="restaurant")


@pytest.fixture
def sample_camera():
    return CameraLocation(
        name="Front Door Cam",
        location="Main entrance",
        camera_type="dome",
        ip_address="192.168.1.20",
        port=554,
    )


@pytest.fixture
def sample_schedule():
    return MonitoringSchedule(
        name="Opening hours",
        days=["monday", "tuesday", "wednesday"],
        start_time="08:00",
        end_time="22:30",
        timezone="Europe/Stockholm",
        priority="high",
    )


@pytest.fixture
def sample_alert():
    return AlertSettings(
        name="After-hours motion",
        type="motion",
        notification_methods=["email", "push"],
        threshold=75,
    )


@pytest.fixture
def valid_form(sample_camera, sample_schedule, sample_alert):
    return SubProfileForm(
        name="Front Door",
        description="Entrance and waiting area",
        area_type="entrance",
        tags=["Security", "security", " monitoring "],
        camera_locations=[sample_camera],
        monitoring_schedules=[sample_schedule],
        alert_settings=[sample_alert],
    )


@pytest.fixture
def wire_sub_profile():
    """A sub-profile object exactly as the backend returns it."""
    return {
        "id": 11,
        "uuid": "6f1c2b9e-3c55-4c8e-9f5a-2d1f7b0c4e21",
        "profile_id": 7,
        "sub_profile_name": "Front Door",
        "description": "Entrance and waiting area",
        "tags": ["security", "monitoring"],
        "area_type": "entrance",
        "camera_locations": {
            "camera_0": {
                "id": "cam-a1",
                "name": "Front Door Cam",
                "location": "Main entrance",
                "cameraType": "dome",
                "ipAddress": "192.168.1.20",
                "port": 554,
                "isActive": True,
            },
        },
        "monitoring_schedule": {
            "schedule_0": {
                "id": "sch-b2",
                "name": "Opening hours",
                "days": ["monday", "tuesday"],
                "startTime": "08:00",
                "endTime": "22:30",
                "timezone": "UTC",
                "isActive": True,
                "priority": "medium",
            },
        },
        "alert_settings": {
            "alert_0": {
                "id": "alt-c3",
                "name": "After-hours motion",
                "type": "motion",
                "notificationMethods": ["email"],
                "threshold": 75,
                "enabled": True,
                "sensitivity": "medium",
            },
        },
        "is_active": True,
        "created_at": "2026-03-01T09:30:00+00:00",
        "updated_at": "2026-03-02T10:00:00+00:00",
    }


def make_sub_profile(sub_profile_id, name, is_active=True, description="", area_type="lobby"):
    now = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)
    return SubProfile(
        id=sub_profile_id,
        uuid=f"uuid-{sub_profile_id}",
        profile_id=7,
        name=name,
        description=description,
        area_type=area_type,
        tags=["cctv"],
        is_active=is_active,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def lobby_sub_profiles():
    return [
        make_sub_profile(1, "Lobby Cam", is_active=True),
        make_sub_profile(2, "Back Office", is_active=False, area_type="office"),
        make_sub_profile(3, "Lobby Desk", is_active=True),
    ]


@pytest.fixture
def mock_repository():
    return AsyncMock(spec=SubProfileRepository)


@pytest.fixture
def sub_profile_factory():
    return make_sub_profile
