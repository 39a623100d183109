"""
Onboarding Record Mapping.

Defines how WizardState maps onto the external records:
- places:        the business-location record (contact, hours, photos, copy)
- pros:          the provider record keyed by user_id, pointing at its place
- pro_providers: legacy flat table, written only as a fallback

Reads go through PlaceRecord/ProRecord so that partially-migrated rows
(nulls, missing columns, odd shapes) are coerced once here and the wizard
never has to second-guess its own state.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .catalog import get_subcategory_names, is_valid_category
from .forms import (
    ServiceItem,
    is_valid_website,
    is_valid_year_established,
    normalize_highlights,
    normalize_hours,
)
from .scoring import score
from .state import (
    LocationType,
    ProviderType,
    WizardState,
    WizardStep,
    clamp_step,
    default_hours,
)

logger = logging.getLogger(__name__)


def _nullable(value: str) -> str | None:
    """Store empty optional text as NULL."""
    value = value.strip()
    return value or None


def _year_or_none(year: str) -> int | None:
    """Out-of-range or malformed years are not stored."""
    year = year.strip()
    if not year or not is_valid_year_established(year):
        return None
    return int(year)


def _website_or_none(website: str) -> str | None:
    if not is_valid_website(website):
        return None
    return _nullable(website)


# =============================================================================
# Write Payloads
# =============================================================================

def build_place_payload(state: WizardState) -> dict:
    """Build the places row (without id) from wizard state."""
    return {
        "name": state.business_name.strip(),
        "phone": _nullable(state.phone),
        "email": _nullable(state.email),
        "website": _website_or_none(state.website),
        "address": _nullable(state.address),
        "city": _nullable(state.city),
        "state": _nullable(state.state),
        "zip_code": _nullable(state.zip_code),
        "description": _nullable(state.full_description),
        "short_description": _nullable(state.short_bio),
        "hours": state.hours,
        "photos": list(state.work_photos),
        "cover_photo": _nullable(state.cover_photo),
        "logo": _nullable(state.profile_photo),
        "place_type": state.location_type.value,
    }


def build_pro_payload(state: WizardState) -> dict:
    """Build the pros row (without user_id / place_id) from wizard state."""
    return {
        "provider_type": state.provider_type.value if state.provider_type else None,
        "specialties": state.specialties,
        "services": [dict(s) for s in state.services],
        "service_areas": list(state.service_areas),
        "service_radius": state.service_radius,
        "year_established": _year_or_none(state.year_established),
        "highlights": list(state.highlights),
        "license_number": _nullable(state.license_number),
        "license_state": _nullable(state.license_state),
        "bio": _nullable(state.short_bio),
        "onboarding_step": state.current_step,
        "profile_completion": score(state),
        "onboarding_completed": state.current_step == WizardStep.REVIEW,
        "is_active": True,
    }


def build_legacy_payload(state: WizardState, user_id: str) -> dict:
    """
    Build the flat pro_providers row.

    Only the subset of fields the legacy table has; used when the
    places/pros write fails.
    """
    return {
        "user_id": user_id,
        "provider_type": state.provider_type.value if state.provider_type else "pro",
        "business_name": state.business_name.strip(),
        "phone": _nullable(state.phone),
        "email": _nullable(state.email),
        "website": _website_or_none(state.website),
        "specialties": state.specialties,
        "address": _nullable(state.address),
        "city": _nullable(state.city),
        "state": _nullable(state.state),
        "zip_code": _nullable(state.zip_code),
        "service_areas": list(state.service_areas),
        "service_radius": state.service_radius,
        "bio": _nullable(state.short_bio),
        "description": _nullable(state.full_description),
        "license_number": _nullable(state.license_number),
        "is_licensed": state.is_licensed,
        "is_insured": "insured" in state.highlights,
        "is_active": True,
    }


# =============================================================================
# Read Models
# =============================================================================

class _Record(BaseModel):
    """Base for DB rows: unknown columns ignored, nulls replaced by defaults."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    @field_validator("*", mode="before")
    @classmethod
    def null_to_default(cls, v: Any, info) -> Any:
        if v is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return v


class PlaceRecord(_Record):
    id: str | int | None = None
    name: str = ""
    phone: str = ""
    email: str = ""
    website: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    description: str = ""
    short_description: str = ""
    hours: dict = {}
    photos: list[str] = []
    cover_photo: str = ""
    logo: str = ""
    place_type: str = ""

    @field_validator("hours", mode="before")
    @classmethod
    def coerce_hours(cls, v: Any) -> dict:
        if not isinstance(v, dict) or not v:
            return {}
        try:
            return normalize_hours(v)
        except ValidationError as e:
            logger.warning(f"Discarding malformed stored hours: {e}")
            return {}

    @field_validator("photos", mode="before")
    @classmethod
    def coerce_photos(cls, v: Any) -> list:
        if not isinstance(v, list):
            return []
        return [p for p in v if isinstance(p, str) and p]


class ProRecord(_Record):
    id: str | int | None = None
    user_id: str = ""
    place_id: str | int | None = None
    provider_type: str = ""
    specialties: list[str] = []
    services: list[dict] = []
    service_areas: list[str] = []
    service_radius: int = 25
    year_established: int | None = None
    highlights: list[str] = []
    license_number: str = ""
    license_state: str = ""
    bio: str = ""
    onboarding_step: int = 1
    profile_completion: int = 0
    onboarding_completed: bool = False
    is_active: bool = True
    places: PlaceRecord | None = None

    @field_validator("services", mode="before")
    @classmethod
    def coerce_services(cls, v: Any) -> list[dict]:
        if not isinstance(v, list):
            return []
        services = []
        for item in v:
            try:
                services.append(ServiceItem.model_validate(item).model_dump())
            except ValidationError as e:
                logger.warning(f"Dropping malformed stored service {item!r}: {e}")
        return services

    @field_validator("specialties", "service_areas", "highlights", mode="before")
    @classmethod
    def coerce_string_list(cls, v: Any) -> list[str]:
        if not isinstance(v, list):
            return []
        return [s for s in v if isinstance(s, str) and s]

    @field_validator("year_established", mode="before")
    @classmethod
    def coerce_year(cls, v: Any) -> int | None:
        if isinstance(v, str):
            return int(v) if v.strip().isdigit() else None
        return v

    @field_validator("places", mode="before")
    @classmethod
    def unwrap_join(cls, v: Any) -> Any:
        # Embedded joins come back as a list when the FK isn't unique
        if isinstance(v, list):
            return v[0] if v else None
        return v


# =============================================================================
# Hydration
# =============================================================================

def state_from_records(pro: ProRecord, place: PlaceRecord | None = None) -> WizardState:
    """
    Build WizardState from stored records.

    Catalog invariants are re-applied: an unknown provider type drops the
    category, an unknown category drops the subcategories, and subcategories
    outside the category are discarded.
    """
    place = place or pro.places or PlaceRecord()

    try:
        provider_type = ProviderType(pro.provider_type) if pro.provider_type else None
    except ValueError:
        logger.warning(f"Unknown stored provider_type '{pro.provider_type}', resetting")
        provider_type = None

    primary_category = ""
    subcategories: list[str] = []
    if provider_type and pro.specialties:
        candidate, *rest = pro.specialties
        if is_valid_category(provider_type.value, candidate):
            primary_category = candidate
            allowed = get_subcategory_names(provider_type.value, candidate)
            for sub in rest:
                if sub in allowed and sub not in subcategories:
                    subcategories.append(sub)
                elif sub not in allowed:
                    logger.info(f"Dropping stored subcategory outside '{candidate}': {sub}")
        else:
            logger.info(f"Dropping stored category outside '{provider_type.value}': {candidate}")

    if place.place_type in (LocationType.FIXED.value, LocationType.MOBILE.value):
        location_type = LocationType(place.place_type)
    elif pro.service_areas and not place.city:
        location_type = LocationType.MOBILE
    else:
        location_type = LocationType.FIXED

    return WizardState(
        provider_type=provider_type,
        primary_category=primary_category,
        selected_subcategories=subcategories,
        business_name=place.name,
        phone=place.phone,
        email=place.email,
        website=place.website,
        year_established=str(pro.year_established) if pro.year_established else "",
        location_type=location_type,
        address=place.address,
        city=place.city,
        state=place.state,
        zip_code=place.zip_code,
        service_areas=pro.service_areas,
        service_radius=pro.service_radius,
        hours=place.hours or default_hours(),
        services=pro.services,
        profile_photo=place.logo,
        cover_photo=place.cover_photo,
        work_photos=place.photos,
        highlights=normalize_highlights(pro.highlights),
        license_number=pro.license_number,
        license_state=pro.license_state,
        short_bio=pro.bio or place.short_description,
        full_description=place.description,
        current_step=clamp_step(pro.onboarding_step),
    )
