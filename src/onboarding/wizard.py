"""
Onboarding Wizard.

Drives a pro through the 11 steps: field updates go through here so catalog
invariants hold, and step transitions decide when progress is persisted.

Forward navigation is gated by can_proceed(); a failed save never blocks it.
Only complete() surfaces persistence failures to the pro.
"""

import logging
from dataclasses import dataclass, fields

from pydantic import ValidationError

from .catalog import is_valid_category, is_valid_subcategory
from .forms import (
    EARLIEST_YEAR_ESTABLISHED,
    ServiceItem,
    is_valid_website,
    is_valid_year_established,
    normalize_highlights,
    normalize_hours,
)
from .persistence import OnboardingStore, SaveOutcome, SaveResult
from .scoring import score
from .state import (
    FIRST_STEP,
    LAST_STEP,
    LocationType,
    ProviderType,
    WizardState,
    can_proceed,
    step_errors,
)

logger = logging.getLogger(__name__)

SAVE_FAILED_MESSAGE = "Failed to save profile. Please try again."

# Set through dedicated mutators, never through update()
_CATALOG_FIELDS = {"provider_type", "primary_category", "selected_subcategories"}
_READ_ONLY_FIELDS = {"current_step"}
_UPDATABLE_FIELDS = {f.name for f in fields(WizardState)} - _CATALOG_FIELDS - _READ_ONLY_FIELDS


@dataclass
class StepTransition:
    """Result of a next_step() call."""
    advanced: bool
    current_step: int
    save_result: SaveResult | None = None

    def to_dict(self) -> dict:
        return {
            "advanced": self.advanced,
            "current_step": self.current_step,
            "save": self.save_result.to_dict() if self.save_result else None,
        }


class OnboardingWizard:
    """One pro's wizard session."""

    def __init__(self, state: WizardState, store: OnboardingStore, user_id: str):
        self.state = state
        self.store = store
        self.user_id = user_id
        self.completed = False

    @property
    def current_step(self) -> int:
        return self.state.current_step

    @property
    def can_proceed(self) -> bool:
        return can_proceed(self.state)

    @property
    def errors(self) -> dict[str, str]:
        return step_errors(self.state)

    @property
    def completion(self) -> int:
        return score(self.state)

    # -------------------------------------------------------------------------
    # Catalog selections
    # -------------------------------------------------------------------------

    def set_provider_type(self, provider_type: str) -> None:
        """Choosing a different provider type clears category and subcategories."""
        try:
            new_type = ProviderType(provider_type)
        except ValueError:
            raise ValueError(f"Unknown provider type: {provider_type}")

        if new_type != self.state.provider_type:
            self.state.provider_type = new_type
            self.state.primary_category = ""
            self.state.selected_subcategories = []

    def set_primary_category(self, category: str) -> None:
        """Choosing a different category clears subcategories."""
        if self.state.provider_type is None:
            raise ValueError("Choose a provider type before a category")
        if not is_valid_category(self.state.provider_type.value, category):
            raise ValueError(
                f"'{category}' is not a {self.state.provider_type.value} category"
            )

        if category != self.state.primary_category:
            self.state.primary_category = category
            self.state.selected_subcategories = []

    def toggle_subcategory(self, subcategory: str) -> None:
        self._check_subcategory(subcategory)
        selected = self.state.selected_subcategories
        if subcategory in selected:
            selected.remove(subcategory)
        else:
            selected.append(subcategory)

    def set_subcategories(self, subcategories: list[str]) -> None:
        """Replace the selection wholesale (order kept, duplicates dropped)."""
        if not isinstance(subcategories, list):
            raise ValueError("selected_subcategories must be a list")
        for sub in subcategories:
            self._check_subcategory(sub)
        self.state.selected_subcategories = list(dict.fromkeys(subcategories))

    def _check_subcategory(self, subcategory: str) -> None:
        if self.state.provider_type is None or not self.state.primary_category:
            raise ValueError("Choose a category before its specialties")
        if not is_valid_subcategory(
            self.state.provider_type.value, self.state.primary_category, subcategory
        ):
            raise ValueError(
                f"'{subcategory}' is not a specialty of '{self.state.primary_category}'"
            )

    # -------------------------------------------------------------------------
    # Other fields
    # -------------------------------------------------------------------------

    def update(self, **changes) -> None:
        """
        Apply field edits from the form.

        Structured fields are validated first; nothing is applied if any
        value is rejected.
        """
        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {sorted(unknown)}")

        cleaned = {}
        for name, value in changes.items():
            cleaned[name] = self._clean_field(name, value)

        for name, value in cleaned.items():
            setattr(self.state, name, value)

    def _clean_field(self, name: str, value):
        if value is None:
            raise ValueError(f"{name} cannot be null")

        if name == "location_type":
            try:
                return LocationType(value)
            except ValueError:
                raise ValueError(f"Unknown location type: {value}")

        if name == "services":
            if not isinstance(value, list):
                raise ValueError("services must be a list")
            try:
                return [ServiceItem.model_validate(s).model_dump() for s in value]
            except ValidationError as e:
                raise ValueError(f"Invalid services: {e}")

        if name == "hours":
            if not isinstance(value, dict):
                raise ValueError("hours must be an object keyed by weekday")
            try:
                return normalize_hours(value)
            except ValidationError as e:
                raise ValueError(f"Invalid hours: {e}")

        if name == "highlights":
            if not isinstance(value, list) or not all(isinstance(h, str) for h in value):
                raise ValueError("highlights must be a list of strings")
            return normalize_highlights(value)

        if name == "service_radius":
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError("service_radius must be a non-negative integer")
            return value

        if name in ("service_areas", "work_photos"):
            if not isinstance(value, list):
                raise ValueError(f"{name} must be a list")
            return [str(v).strip() for v in value if str(v).strip()]

        if not isinstance(value, str):
            raise ValueError(f"{name} must be a string")

        # Optional; empty is fine, anything else must be well-formed
        if name == "website" and not is_valid_website(value):
            raise ValueError(f"Invalid website: {value}")
        if name == "year_established" and not is_valid_year_established(value):
            raise ValueError(
                f"Year established must be a 4-digit year from {EARLIEST_YEAR_ESTABLISHED} to this year"
            )
        return value

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    async def next_step(self) -> StepTransition:
        """
        Save progress and move forward one step.

        No-op (nothing saved) when the current step isn't satisfied or the
        wizard is already on review. A failed save is reported but the
        cursor still advances.
        """
        step = self.state.current_step
        if step >= LAST_STEP or not self.can_proceed:
            return StepTransition(advanced=False, current_step=step)

        result = await self.store.save(self.state, self.user_id)
        if not result.ok:
            logger.warning(f"Continuing past step {step} for {self.user_id} without a save: {result.error}")

        self.state.current_step = step + 1
        return StepTransition(advanced=True, current_step=self.state.current_step, save_result=result)

    def prev_step(self) -> int:
        """Move back one step. Never saves."""
        self.state.current_step = max(int(FIRST_STEP), self.state.current_step - 1)
        return self.state.current_step

    async def complete(self) -> SaveResult:
        """
        Final save from the review step.

        On failure the result carries a message fit to show the pro.
        """
        if self.state.current_step != LAST_STEP:
            raise ValueError(f"Can only complete from step {int(LAST_STEP)}")

        result = await self.store.save(self.state, self.user_id)
        if not result.ok:
            logger.error(f"Onboarding completion failed for {self.user_id}: {result.error}")
            return SaveResult(outcome=SaveOutcome.FAILED, error=SAVE_FAILED_MESSAGE)

        self.completed = True
        logger.info(f"Onboarding completed for {self.user_id} ({result.outcome.value}, score {self.completion})")
        return result
