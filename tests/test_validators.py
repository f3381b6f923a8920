"""Unit tests for sub-profile form and configuration item validation."""

import pytest

from dashboard.schemas.subprofile import (
    AlertSettings,
    CameraLocation,
    MonitoringSchedule,
    SubProfileForm,
)
from dashboard.subprofiles.validators import (
    ALERTS_SECTION,
    BASIC_SECTION,
    CAMERAS_SECTION,
    SCHEDULES_SECTION,
    ValidationResult,
    validate,
    validate_alert_settings,
    validate_camera_location,
    validate_monitoring_schedule,
    validate_submission,
)


# ─────────────────────────────────────────────────────────────────
# Basic info
# ─────────────────────────────────────────────────────────────────


class TestValidateBasicInfo:
    def test_valid_form_has_no_errors(self, valid_form):
        assert validate(valid_form) == {}

    def test_empty_name_and_area_type(self):
        errors = validate(SubProfileForm(name="", area_type=""))

        assert errors == {
            "name": "Sub-profile name is required",
            "area_type": "Area type is required",
        }

    def test_whitespace_name_is_required_error(self):
        errors = validate(SubProfileForm(name="   ", area_type="lobby"))

        assert errors["name"] == "Sub-profile name is required"

    def test_single_character_name_is_too_short(self):
        errors = validate(SubProfileForm(name="A", area_type="lobby"))

        assert errors["name"] == "Sub-profile name must be at least 2 characters"

    def test_name_length_counted_after_trimming(self):
        errors = validate(SubProfileForm(name=" A ", area_type="lobby"))

        assert errors["name"] == "Sub-profile name must be at least 2 characters"

    def test_two_character_name_is_valid(self):
        assert validate(SubProfileForm(name="Ab", area_type="lobby")) == {}

    def test_description_limit(self):
        at_limit = SubProfileForm(name="Bar", area_type="dining", description="x" * 500)
        over_limit = SubProfileForm(name="Bar", area_type="dining", description="x" * 501)

        assert "description" not in validate(at_limit)
        assert validate(over_limit)["description"] == "Description must be less than 500 characters"

    def test_unknown_area_type(self):
        errors = validate(SubProfileForm(name="Bar", area_type="spaceship"))

        assert errors["area_type"].startswith("Invalid area type. Must be one of:")

    def test_area_type_is_case_insensitive(self):
        assert validate(SubProfileForm(name="Bar", area_type="Kitchen")) == {}

    def test_same_result_on_repeat(self):
        form = SubProfileForm(name="A", area_type="")

        assert validate(form) == validate(form)

    def test_form_is_not_changed(self):
        form = SubProfileForm(name="  A ", description=" d ", area_type=" nowhere ")
        before = form.model_dump()

        validate_submission(form)

        assert form.model_dump() == before


# ─────────────────────────────────────────────────────────────────
# Configuration items
# ─────────────────────────────────────────────────────────────────


class TestValidateCameraLocation:
    def test_valid_camera(self, sample_camera):
        assert validate_camera_location(sample_camera) == []

    def test_missing_required_fields(self):
        messages = validate_camera_location(CameraLocation())

        assert messages == [
            "Camera name is required",
            "Camera location is required",
            "Camera type is required",
        ]

    @pytest.mark.parametrize("ip", ["192.168.1.300", "not-an-ip", "10.0.0"])
    def test_invalid_ip(self, sample_camera, ip):
        camera = sample_camera.model_copy(update={"ip_address": ip})

        assert validate_camera_location(camera) == ["Invalid IP address format"]

    @pytest.mark.parametrize("port", [0, 65536, -1])
    def test_port_out_of_range(self, sample_camera, port):
        camera = sample_camera.model_copy(update={"port": port})

        assert validate_camera_location(camera) == ["Port must be between 1 and 65535"]

    def test_accepts_plain_dict(self):
        camera = {"name": "Door", "location": "Entrance", "cameraType": "dome", "port": 8080}

        assert validate_camera_location(camera) == []

    def test_unreadable_entry_reports_field(self):
        messages = validate_camera_location({"name": "Door", "port": "eighty"})

        assert len(messages) == 1
        assert messages[0].startswith("port:")


class TestValidateMonitoringSchedule:
    def test_valid_schedule(self, sample_schedule):
        assert validate_monitoring_schedule(sample_schedule) == []

    def test_missing_fields(self):
        messages = validate_monitoring_schedule(MonitoringSchedule())

        assert messages == [
            "Schedule name is required",
            "Start time is required",
            "End time is required",
            "At least one day must be selected",
        ]

    def test_bad_time_format(self, sample_schedule):
        schedule = sample_schedule.model_copy(update={"start_time": "8am", "end_time": "24:00"})

        assert validate_monitoring_schedule(schedule) == [
            "Start time must be in HH:MM format",
            "End time must be in HH:MM format",
        ]

    def test_unknown_day(self, sample_schedule):
        schedule = sample_schedule.model_copy(update={"days": ["monday", "funday"]})

        assert validate_monitoring_schedule(schedule) == ["Unknown day(s): funday"]

    def test_bad_priority(self, sample_schedule):
        schedule = sample_schedule.model_copy(update={"priority": "urgent"})

        assert validate_monitoring_schedule(schedule) == [
            "Priority must be one of: low, medium, high"
        ]

    def test_bad_timezone(self, sample_schedule):
        schedule = sample_schedule.model_copy(update={"timezone": "Mars/Olympus"})

        assert validate_monitoring_schedule(schedule) == ["Invalid timezone: Mars/Olympus"]


class TestValidateAlertSettings:
    def test_valid_alert(self, sample_alert):
        assert validate_alert_settings(sample_alert) == []

    def test_missing_fields(self):
        messages = validate_alert_settings(AlertSettings())

        assert messages == [
            "Alert name is required",
            "Alert type is required",
            "At least one notification method is required",
        ]

    def test_negative_threshold(self, sample_alert):
        alert = sample_alert.model_copy(update={"threshold": -1})

        assert validate_alert_settings(alert) == ["Threshold cannot be negative"]

    def test_zero_threshold_allowed(self, sample_alert):
        alert = sample_alert.model_copy(update={"threshold": 0})

        assert validate_alert_settings(alert) == []


# ─────────────────────────────────────────────────────────────────
# Whole submission
# ─────────────────────────────────────────────────────────────────


class TestValidateSubmission:
    def test_valid_form(self, valid_form):
        result = validate_submission(valid_form)

        assert result.is_valid
        assert result.focus_section is None
        assert result.all_errors() == {}

    def test_item_errors_are_indexed(self, valid_form, sample_camera):
        broken = CameraLocation(name="Bar", location="Counter", camera_type="")
        form = valid_form.model_copy(update={"camera_locations": [sample_camera, broken]})

        result = validate_submission(form)

        assert not result.is_valid
        assert result.item_errors == {CAMERAS_SECTION: {1: ["Camera type is required"]}}
        assert result.focus_section == CAMERAS_SECTION
        assert result.all_errors() == {"cameras.1": "Camera type is required"}

    def test_basic_errors_take_focus(self, valid_form):
        broken_alert = AlertSettings(name="Motion", type="motion")
        form = valid_form.model_copy(update={"name": "", "alert_settings": [broken_alert]})

        result = validate_submission(form)

        assert result.focus_section == BASIC_SECTION
        assert ALERTS_SECTION in result.item_errors

    def test_focus_follows_section_order(self, valid_form):
        form = valid_form.model_copy(
            update={
                "monitoring_schedules": [MonitoringSchedule(name="Night")],
                "alert_settings": [AlertSettings(name="Motion")],
            }
        )

        result = validate_submission(form)

        assert result.focus_section == SCHEDULES_SECTION
        assert result.focus_section == "monitoring"
        assert "monitoring.0" in result.all_errors()

    def test_empty_result_is_valid(self):
        assert ValidationResult().is_valid
