"""
Sub-profile form validation.

Checks a candidate sub-profile and its configuration items before
anything is sent to the backend. Validation only inspects the candidate;
it never changes it.
"""

import ipaddress
import re
import zoneinfo
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from dashboard.schemas.subprofile import (
    AREA_TYPES,
    SCHEDULE_PRIORITIES,
    WEEKDAYS,
    AlertSettings,
    CameraLocation,
    MonitoringSchedule,
    SubProfileForm,
)

BASIC_SECTION = "basic"
CAMERAS_SECTION = "cameras"
SCHEDULES_SECTION = "monitoring"
ALERTS_SECTION = "alerts"

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


@dataclass
class ValidationResult:
    """Outcome of validating a whole form."""
    field_errors: Dict[str, str] = field(default_factory=dict)
    # section -> item index -> messages
    item_errors: Dict[str, Dict[int, List[str]]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.field_errors and not self.item_errors

    @property
    def focus_section(self) -> Optional[str]:
        """
        Section the form should switch to.

        Basic-info errors always win, even when only a nested tab looks
        incomplete.
        """
        if self.field_errors:
            return BASIC_SECTION
        for section in (CAMERAS_SECTION, SCHEDULES_SECTION, ALERTS_SECTION):
            if self.item_errors.get(section):
                return section
        return None

    def all_errors(self) -> Dict[str, str]:
        """Flatten everything into one field-keyed dict for display."""
        errors = dict(self.field_errors)
        for section, items in self.item_errors.items():
            for index, messages in items.items():
                errors[f"{section}.{index}"] = "; ".join(messages)
        return errors


class SubProfileValidator:
    """
    Validates sub-profile forms and configuration items.
    """

    MIN_NAME_LENGTH = 2
    MAX_DESCRIPTION_LENGTH = 500

    @classmethod
    def validate(cls, form: SubProfileForm) -> Dict[str, str]:
        """
        Validate the basic-info fields of a form.

        Args:
            form: Candidate sub-profile

        Returns:
            dict of field name -> error message, empty when valid

        Rules:
            - name: required, at least 2 characters after trimming
            - description: optional, at most 500 characters
            - area_type: required, one of AREA_TYPES
        """
        errors: Dict[str, str] = {}

        name = (form.name or "").strip()
        if not name:
            errors["name"] = "Sub-profile name is required"
        elif len(name) < cls.MIN_NAME_LENGTH:
            errors["name"] = (
                f"Sub-profile name must be at least {cls.MIN_NAME_LENGTH} characters"
            )

        if form.description and len(form.description) > cls.MAX_DESCRIPTION_LENGTH:
            errors["description"] = (
                f"Description must be less than {cls.MAX_DESCRIPTION_LENGTH} characters"
            )

        area_type = (form.area_type or "").strip()
        if not area_type:
            errors["area_type"] = "Area type is required"
        elif area_type.lower() not in AREA_TYPES:
            errors["area_type"] = (
                f"Invalid area type. Must be one of: {', '.join(AREA_TYPES)}"
            )

        return errors

    @classmethod
    def validate_camera_location(cls, camera: Any) -> List[str]:
        """Validate one camera entry; returns human-readable messages."""
        camera, errors = _coerce(camera, CameraLocation)
        if camera is None:
            return errors

        if not camera.name.strip():
            errors.append("Camera name is required")
        if not camera.location.strip():
            errors.append("Camera location is required")
        if not camera.camera_type.strip():
            errors.append("Camera type is required")
        if camera.ip_address and not _is_ipv4(camera.ip_address):
            errors.append("Invalid IP address format")
        if camera.port is not None and not 1 <= camera.port <= 65535:
            errors.append("Port must be between 1 and 65535")

        return errors

    @classmethod
    def validate_monitoring_schedule(cls, schedule: Any) -> List[str]:
        """Validate one schedule entry; returns human-readable messages."""
        schedule, errors = _coerce(schedule, MonitoringSchedule)
        if schedule is None:
            return errors

        if not schedule.name.strip():
            errors.append("Schedule name is required")

        if not schedule.start_time.strip():
            errors.append("Start time is required")
        elif not _TIME_PATTERN.match(schedule.start_time.strip()):
            errors.append("Start time must be in HH:MM format")

        if not schedule.end_time.strip():
            errors.append("End time is required")
        elif not _TIME_PATTERN.match(schedule.end_time.strip()):
            errors.append("End time must be in HH:MM format")

        if not schedule.days:
            errors.append("At least one day must be selected")
        else:
            unknown = [day for day in schedule.days if str(day).lower() not in WEEKDAYS]
            if unknown:
                errors.append(f"Unknown day(s): {', '.join(map(str, unknown))}")

        if schedule.priority not in SCHEDULE_PRIORITIES:
            errors.append(
                f"Priority must be one of: {', '.join(SCHEDULE_PRIORITIES)}"
            )

        if schedule.timezone and not _is_timezone(schedule.timezone):
            errors.append(f"Invalid timezone: {schedule.timezone}")

        return errors

    @classmethod
    def validate_alert_settings(cls, alert: Any) -> List[str]:
        """Validate one alert entry; returns human-readable messages."""
        alert, errors = _coerce(alert, AlertSettings)
        if alert is None:
            return errors

        if not alert.name.strip():
            errors.append("Alert name is required")
        if not alert.type.strip():
            errors.append("Alert type is required")
        if not alert.notification_methods:
            errors.append("At least one notification method is required")
        if alert.threshold is not None and alert.threshold < 0:
            errors.append("Threshold cannot be negative")

        return errors

    @classmethod
    def validate_submission(cls, form: SubProfileForm) -> ValidationResult:
        """
        Validate a whole form: basic info plus every nested item.

        The form may only be submitted when the result is valid.
        """
        result = ValidationResult(field_errors=cls.validate(form))

        sections = (
            (CAMERAS_SECTION, form.camera_locations, cls.validate_camera_location),
            (SCHEDULES_SECTION, form.monitoring_schedules, cls.validate_monitoring_schedule),
            (ALERTS_SECTION, form.alert_settings, cls.validate_alert_settings),
        )
        for section, items, validator in sections:
            section_errors = {}
            for index, item in enumerate(items):
                messages = validator(item)
                if messages:
                    section_errors[index] = messages
            if section_errors:
                result.item_errors[section] = section_errors

        return result


def _coerce(item: Any, model: type) -> Tuple[Any, List[str]]:
    """Accept a model or a plain dict; report entries that cannot be read."""
    if isinstance(item, model):
        return item, []
    try:
        return model.model_validate(item), []
    except ValidationError as e:
        return None, [
            f"{'.'.join(str(part) for part in err['loc']) or 'entry'}: {err['msg']}"
            for err in e.errors()
        ]


def _is_ipv4(value: str) -> bool:
    try:
        ipaddress.IPv4Address(value)
        return True
    except ValueError:
        return False


def _is_timezone(value: str) -> bool:
    try:
        zoneinfo.ZoneInfo(value)
        return True
    except Exception:
        return False


validate = SubProfileValidator.validate
validate_camera_location = SubProfileValidator.validate_camera_location
validate_monitoring_schedule = SubProfileValidator.validate_monitoring_schedule
validate_alert_settings = SubProfileValidator.validate_alert_settings
validate_submission = SubProfileValidator.validate_submission
