"""
Conversion between editable item lists and the backend's keyed maps.

The backend stores each nested collection as an object keyed by a
synthetic ``{prefix}_{index}`` key; the dashboard edits ordered lists.
Keys are regenerated from list order on every save and carry no identity:
a map whose keys were reordered or renamed decodes in enumeration order.

Example:
    to_map([{"name": "Door"}], CAMERA_PREFIX)   # {"camera_0": {"name": "Door"}}
    from_map({"camera_0": {"name": "Door"}})    # [{"name": "Door"}]
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Sequence

from pydantic import BaseModel

from dashboard.schemas.subprofile import (
    AlertSettings,
    CameraLocation,
    MonitoringSchedule,
    SubProfile,
    SubProfileForm,
    SubProfileResponse,
)

CAMERA_PREFIX = "camera"
SCHEDULE_PREFIX = "schedule"
ALERT_PREFIX = "alert"


def to_map(items: Sequence[Any], prefix: str) -> Dict[str, Any]:
    """
    Key an ordered list as ``{prefix}_0 .. {prefix}_{n-1}``.

    Items are placed in the map unchanged.
    """
    return {f"{prefix}_{index}": item for index, item in enumerate(items or [])}


def from_map(value: Any) -> List[Any]:
    """
    Turn either collection shape back into an ordered list.

    Lists are returned in their own order, mappings yield their values in
    enumeration order, anything else yields an empty list. Null entries
    are dropped.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        items = list(value)
    elif isinstance(value, Mapping):
        items = list(value.values())
    else:
        return []
    return [item for item in items if item is not None]


def strip_id(item: Any) -> Any:
    """Return a copy of ``item`` without its server-assigned id."""
    if isinstance(item, BaseModel):
        return item.model_copy(update={"id": None}, deep=True)
    if isinstance(item, Mapping):
        return {key: value for key, value in item.items() if key != "id"}
    return item


def editable_items(value: Any) -> List[Any]:
    """Decode a nested collection into a list ready for editing."""
    return [strip_id(item) for item in from_map(value)]


def _dump_item(item: Any) -> Any:
    if isinstance(item, BaseModel):
        return item.model_dump(mode="json", by_alias=True, exclude_none=True, exclude={"id"})
    return strip_id(item)


def build_request_payload(form: SubProfileForm) -> Dict[str, Any]:
    """
    Build the POST/PUT body for a sub-profile form.

    Every editable field is always present: the backend treats a missing
    field on PUT as a reset, not as "unchanged".
    """
    return {
        "sub_profile_name": form.name.strip(),
        "description": form.description.strip(),
        "tags": list(form.tags),
        "area_type": form.area_type.strip(),
        "camera_locations": to_map(
            [_dump_item(item) for item in form.camera_locations], CAMERA_PREFIX
        ),
        "monitoring_schedule": to_map(
            [_dump_item(item) for item in form.monitoring_schedules], SCHEDULE_PREFIX
        ),
        "alert_settings": to_map(
            [_dump_item(item) for item in form.alert_settings], ALERT_PREFIX
        ),
    }


def decode_sub_profile(data: Any) -> SubProfile:
    """
    Decode a backend sub-profile object into the in-memory entity.

    Raises:
        pydantic.ValidationError: If the object does not have the wire shape
    """
    wire = SubProfileResponse.model_validate(data)
    return SubProfile(
        id=wire.id,
        uuid=wire.uuid,
        profile_id=wire.profile_id,
        name=wire.sub_profile_name,
        description=wire.description or "",
        tags=wire.tags or [],
        area_type=wire.area_type,
        camera_locations=[
            CameraLocation.model_validate(item)
            for item in from_map(wire.camera_locations)
        ],
        monitoring_schedules=[
            MonitoringSchedule.model_validate(item)
            for item in from_map(wire.monitoring_schedule)
        ],
        alert_settings=[
            AlertSettings.model_validate(item)
            for item in from_map(wire.alert_settings)
        ],
        is_active=wire.is_active,
        created_at=wire.created_at,
        updated_at=wire.updated_at,
    )


def form_from_sub_profile(sub_profile: SubProfile) -> SubProfileForm:
    """Prefill an edit form from an existing sub-profile, without item ids."""
    return SubProfileForm(
        name=sub_profile.name,
        description=sub_profile.description,
        area_type=sub_profile.area_type,
        tags=list(sub_profile.tags),
        camera_locations=editable_items(sub_profile.camera_locations),
        monitoring_schedules=editable_items(sub_profile.monitoring_schedules),
        alert_settings=editable_items(sub_profile.alert_settings),
    )
