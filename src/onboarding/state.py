"""
Onboarding State Management.

WizardState is the in-session working copy of a pro's profile while they go
through the 11-step wizard. The durable copy lives in the places/pros tables
(see persistence.py); this object is hydrated from there on resume.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum, IntEnum

from .forms import (
    WEEKDAYS,
    business_info_errors,
    highlights_errors,
    is_valid_business_name,
    is_valid_email,
    is_valid_phone,
)


class ProviderType(str, Enum):
    """Kind of provider being onboarded. Each has its own category set."""
    PRO = "pro"
    REALTOR = "realtor"
    ON_THE_GO = "on_the_go"


class LocationType(str, Enum):
    """Fixed storefront/office vs. a provider that travels to customers."""
    FIXED = "fixed"
    MOBILE = "mobile"


class WizardStep(IntEnum):
    """Wizard steps, in order."""
    PROVIDER_TYPE = 1
    CATEGORY = 2
    SUBCATEGORIES = 3
    BUSINESS_INFO = 4
    LOCATION = 5
    HOURS = 6
    SERVICES = 7
    PHOTOS = 8
    HIGHLIGHTS = 9
    BIO = 10
    REVIEW = 11


FIRST_STEP = WizardStep.PROVIDER_TYPE
LAST_STEP = WizardStep.REVIEW

STEP_TITLES = {
    WizardStep.PROVIDER_TYPE: "What kind of provider are you?",
    WizardStep.CATEGORY: "Choose your main category",
    WizardStep.SUBCATEGORIES: "Pick your specialties",
    WizardStep.BUSINESS_INFO: "Business information",
    WizardStep.LOCATION: "Where do you work?",
    WizardStep.HOURS: "Business hours",
    WizardStep.SERVICES: "Services & pricing",
    WizardStep.PHOTOS: "Photos",
    WizardStep.HIGHLIGHTS: "Highlights & credentials",
    WizardStep.BIO: "About your business",
    WizardStep.REVIEW: "Review & finish",
}


def default_hours() -> dict[str, dict]:
    """Weekdays 8-5, Saturday morning, Sunday closed."""
    hours = {}
    for day in WEEKDAYS:
        if day == "sunday":
            hours[day] = {"open": "09:00", "close": "17:00", "closed": True}
        elif day == "saturday":
            hours[day] = {"open": "09:00", "close": "14:00", "closed": False}
        else:
            hours[day] = {"open": "08:00", "close": "17:00", "closed": False}
    return hours


def clamp_step(step: int) -> int:
    return max(int(FIRST_STEP), min(int(LAST_STEP), step))


@dataclass
class WizardState:
    """
    Onboarding wizard session state.

    Every field always holds a concrete value (empty string / empty list
    rather than None) so form components stay controlled.
    """
    # Steps 1-3: What you do
    provider_type: ProviderType | None = None
    primary_category: str = ""
    selected_subcategories: list[str] = field(default_factory=list)

    # Step 4: Business info
    business_name: str = ""
    phone: str = ""
    email: str = ""
    website: str = ""
    year_established: str = ""

    # Step 5: Location
    location_type: LocationType = LocationType.FIXED
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    service_areas: list[str] = field(default_factory=list)
    service_radius: int = 25

    # Step 6: Hours
    hours: dict[str, dict] = field(default_factory=default_hours)

    # Step 7: Services
    services: list[dict] = field(default_factory=list)
    # Each: {"name", "description", "price_type", "price_min", "price_max"}

    # Step 8: Photos (URIs or data-URIs; no upload pipeline yet)
    profile_photo: str = ""
    cover_photo: str = ""
    work_photos: list[str] = field(default_factory=list)

    # Step 9: Highlights
    highlights: list[str] = field(default_factory=list)
    license_number: str = ""
    license_state: str = ""

    # Step 10: Bio
    short_bio: str = ""
    full_description: str = ""

    # Cursor
    current_step: int = int(FIRST_STEP)

    @property
    def specialties(self) -> list[str]:
        """Primary category first, then selected subcategories."""
        if not self.primary_category:
            return list(self.selected_subcategories)
        return [self.primary_category, *self.selected_subcategories]

    @property
    def is_licensed(self) -> bool:
        return "licensed" in self.highlights

    def to_dict(self) -> dict:
        """Serialize state to dict for JSON responses."""
        data = asdict(self)
        data["provider_type"] = self.provider_type.value if self.provider_type else ""
        data["location_type"] = self.location_type.value
        return data


def can_proceed(state: WizardState, step: int | None = None) -> bool:
    """
    Check whether the wizard may move forward from a step.

    Defaults to the state's current step. Optional steps always pass.
    """
    step = state.current_step if step is None else step

    if step == WizardStep.PROVIDER_TYPE:
        return state.provider_type is not None

    elif step == WizardStep.CATEGORY:
        return bool(state.primary_category)

    elif step == WizardStep.SUBCATEGORIES:
        return len(state.selected_subcategories) > 0

    elif step == WizardStep.BUSINESS_INFO:
        return (
            is_valid_business_name(state.business_name)
            and is_valid_phone(state.phone)
            and (not state.email.strip() or is_valid_email(state.email))
        )

    elif step == WizardStep.LOCATION:
        if state.location_type == LocationType.MOBILE:
            return len(state.service_areas) > 0
        return all(v.strip() for v in (state.city, state.state, state.zip_code))

    elif step == WizardStep.SERVICES:
        return len(state.services) > 0

    elif step == WizardStep.BIO:
        return bool(state.short_bio.strip())

    # Hours, photos, highlights and review are optional
    return True


def step_errors(state: WizardState, step: int | None = None) -> dict[str, str]:
    """Inline field messages for a step (only steps with field-level rules)."""
    step = state.current_step if step is None else step

    if step == WizardStep.BUSINESS_INFO:
        return business_info_errors(state.business_name, state.phone, state.email)
    if step == WizardStep.HIGHLIGHTS:
        return highlights_errors(state.highlights, state.license_number)
    return {}


def get_completed_steps(state: WizardState) -> list[int]:
    """Steps before the cursor."""
    return list(range(int(FIRST_STEP), state.current_step))
