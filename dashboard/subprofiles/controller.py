"""
Sub-profile lifecycle controller.

Owns the in-memory list of sub-profiles for one profile and runs the
create, edit, delete and toggle flows against the repository. Repository
errors stop here: they are logged and kept in ``last_error`` for the UI to
show or dismiss, never raised to the caller.

Concurrent operations are not serialized. Responses for the same
sub-profile apply in arrival order: a full response replaces the entry,
a toggle response changes only ``is_active`` of whatever entry is held
then. ``loading`` stays set while any remote call is in flight.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from common.utils import APIException, ValidationFailedException
from dashboard.schemas.subprofile import Profile, SubProfile, SubProfileForm
from dashboard.subprofiles.codec import build_request_payload, form_from_sub_profile
from dashboard.subprofiles.repository import SubProfileRepository
from dashboard.subprofiles.validators import ValidationResult, validate_submission

logger = logging.getLogger(__name__)


class ActiveFilter(str, Enum):
    ALL = "all"
    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass
class SubmissionResult:
    """Outcome of a create or update."""
    sub_profile: Optional[SubProfile] = None
    validation: ValidationResult = field(default_factory=ValidationResult)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.sub_profile is not None

    @property
    def focus_section(self) -> Optional[str]:
        return self.validation.focus_section


class SubProfileController:
    """
    Manages the sub-profiles of one profile.
    """

    def __init__(self, profile: Profile, repository: SubProfileRepository):
        """
        Initialize the controller.

        Args:
            profile: Parent profile
            repository: Remote sub-profile store
        """
        self.profile = profile
        self._repository = repository
        self._sub_profiles: List[SubProfile] = []

        self.search_term = ""
        self.active_filter = ActiveFilter.ALL
        self.last_error: Optional[str] = None
        self.field_errors: Dict[str, str] = {}
        self.focus_section: Optional[str] = None
        # remote calls currently awaiting a response
        self._pending = 0

    @property
    def sub_profiles(self) -> Tuple[SubProfile, ...]:
        """Current collection, read-only."""
        return tuple(self._sub_profiles)

    @property
    def loading(self) -> bool:
        """True while any remote call is in flight."""
        return self._pending > 0

    # =========================================================================
    # Operations
    # =========================================================================

    async def refresh(self) -> bool:
        """
        Reload the collection from the server.

        The list is replaced wholesale; local changes not yet confirmed
        are dropped.
        """
        try:
            with self._in_flight():
                sub_profiles = await self._repository.list(self.profile.id)
        except APIException as e:
            self._fail("fetch sub-profiles", e)
            return False

        self._sub_profiles = list(sub_profiles)
        return True

    async def create(self, form: SubProfileForm) -> SubmissionResult:
        """
        Validate and create a sub-profile.

        The new entry is appended, or replaces an entry with the same id
        that an overlapping refresh already brought in.
        """
        validation = self._validate(form)
        if not validation.is_valid:
            return SubmissionResult(validation=validation)

        try:
            with self._in_flight():
                created = await self._repository.create(
                    self.profile.id, build_request_payload(form)
                )
        except APIException as e:
            self._fail("create sub-profile", e)
            return SubmissionResult(validation=validation, error=e.message)

        if self._index_of(created.id) is None:
            self._sub_profiles.append(created)
        else:
            self._replace(created)
        return SubmissionResult(sub_profile=created, validation=validation)

    async def update(self, sub_profile_id: int, form: SubProfileForm) -> SubmissionResult:
        """
        Validate and fully replace a sub-profile.

        Always sends the whole form; the active flag is changed only
        through ``toggle_active``.
        """
        validation = self._validate(form)
        if not validation.is_valid:
            return SubmissionResult(validation=validation)

        try:
            with self._in_flight():
                updated = await self._repository.update(
                    self.profile.id, sub_profile_id, build_request_payload(form)
                )
        except APIException as e:
            self._fail("update sub-profile", e)
            return SubmissionResult(validation=validation, error=e.message)

        self._replace(updated)
        return SubmissionResult(sub_profile=updated, validation=validation)

    async def toggle_active(self, sub_profile: SubProfile) -> bool:
        """
        Flip the active flag with a partial update.

        Only ``is_active`` of the entry held when the response arrives
        changes; its other fields are kept as they are.
        """
        try:
            with self._in_flight():
                updated = await self._repository.partial_update(
                    sub_profile.id, {"is_active": not sub_profile.is_active}
                )
        except APIException as e:
            self._fail("update sub-profile status", e)
            return False

        index = self._index_of(sub_profile.id)
        if index is not None:
            current = self._sub_profiles[index]
            self._sub_profiles[index] = current.model_copy(
                update={"is_active": updated.is_active}
            )
        return True

    async def delete(self, sub_profile_id: int, confirmation: str) -> bool:
        """
        Delete a sub-profile after typed confirmation.

        ``confirmation`` must equal the sub-profile's name exactly
        (case-sensitive, untrimmed), otherwise nothing is sent.
        """
        index = self._index_of(sub_profile_id)
        if index is None:
            self.last_error = "Sub-profile not found."
            return False

        target = self._sub_profiles[index]
        try:
            if confirmation != target.name:
                raise ValidationFailedException(
                    message="Confirmation does not match the sub-profile name",
                    errors={"confirmation": f'Type "{target.name}" to confirm deletion'},
                )
            with self._in_flight():
                await self._repository.delete(self.profile.id, sub_profile_id)
        except ValidationFailedException as e:
            self.field_errors = e.errors
            return False
        except APIException as e:
            self._fail("delete sub-profile", e)
            return False

        self._sub_profiles = [sp for sp in self._sub_profiles if sp.id != sub_profile_id]
        self.field_errors = {}
        return True

    async def view(self, sub_profile_id: int) -> Optional[SubProfile]:
        """Fetch full details of one sub-profile without touching the list."""
        try:
            with self._in_flight():
                return await self._repository.get(sub_profile_id)
        except APIException as e:
            self._fail("fetch sub-profile details", e)
            return None

    # =========================================================================
    # Views
    # =========================================================================

    def filtered_view(
        self,
        search: Optional[str] = None,
        active_filter: Union[ActiveFilter, str, None] = None,
    ) -> List[SubProfile]:
        """
        Sub-profiles matching the search term and active filter, in order.

        Passing ``search`` or ``active_filter`` also stores them as the
        current criteria.
        """
        if search is not None:
            self.search_term = search
        if active_filter is not None:
            self.active_filter = ActiveFilter(active_filter)

        term = self.search_term.lower()
        results = []
        for sub_profile in self._sub_profiles:
            matches_search = (
                term in sub_profile.name.lower()
                or term in sub_profile.description.lower()
                or term in sub_profile.area_type.lower()
            )
            if not matches_search:
                continue
            if self.active_filter == ActiveFilter.ACTIVE and not sub_profile.is_active:
                continue
            if self.active_filter == ActiveFilter.INACTIVE and sub_profile.is_active:
                continue
            results.append(sub_profile)
        return results

    def counts(self) -> Tuple[int, int]:
        """(shown, total) for the list header."""
        return len(self.filtered_view()), len(self._sub_profiles)

    def edit_form(self, sub_profile: SubProfile) -> SubProfileForm:
        """Editable form prefilled from a sub-profile."""
        return form_from_sub_profile(sub_profile)

    def dismiss_error(self) -> None:
        self.last_error = None

    # =========================================================================
    # Helpers
    # =========================================================================

    def _validate(self, form: SubProfileForm) -> ValidationResult:
        validation = validate_submission(form)
        self.field_errors = validation.all_errors()
        self.focus_section = validation.focus_section
        return validation

    @contextmanager
    def _in_flight(self):
        self._pending += 1
        try:
            yield
        finally:
            self._pending -= 1

    def _index_of(self, sub_profile_id: int) -> Optional[int]:
        for index, sub_profile in enumerate(self._sub_profiles):
            if sub_profile.id == sub_profile_id:
                return index
        return None

    def _replace(self, sub_profile: SubProfile) -> None:
        index = self._index_of(sub_profile.id)
        if index is not None:
            self._sub_profiles[index] = sub_profile

    def _fail(self, operation: str, error: APIException) -> None:
        logger.error(f"Failed to {operation} for profile {self.profile.id}: {error.message}")
        self.last_error = error.message
