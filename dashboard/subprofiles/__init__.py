"""
Sub-profile configuration core: codec, validation, repository and
lifecycle controller.
"""

from dashboard.subprofiles.codec import (
    CAMERA_PREFIX,
    SCHEDULE_PREFIX,
    ALERT_PREFIX,
    to_map,
    from_map,
    editable_items,
    build_request_payload,
    decode_sub_profile,
    form_from_sub_profile,
)
from dashboard.subprofiles.validators import (
    SubProfileValidator,
    ValidationResult,
    validate,
    validate_submission,
)
from dashboard.subprofiles.repository import SubProfileRepository, normalize_list_payload
from dashboard.subprofiles.controller import (
    ActiveFilter,
    SubmissionResult,
    SubProfileController,
)

__all__ = [
    "CAMERA_PREFIX",
    "SCHEDULE_PREFIX",
    "ALERT_PREFIX",
    "to_map",
    "from_map",
    "editable_items",
    "build_request_payload",
    "decode_sub_profile",
    "form_from_sub_profile",
    "SubProfileValidator",
    "ValidationResult",
    "validate",
    "validate_submission",
    "SubProfileRepository",
    "normalize_list_payload",
    "ActiveFilter",
    "SubmissionResult",
    "SubProfileController",
]
