"""
Onboarding Forms - Field Validation.

Pure predicates for the contact/profile fields the wizard gates on, plus
Pydantic models for the structured pieces of the profile (services, hours).

Validators never raise: they answer yes/no so the wizard can disable
"Continue" and the UI can show inline messages.
"""

import logging
import re
from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

logger = logging.getLogger(__name__)


# =============================================================================
# Valid Options
# =============================================================================

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

PRICE_TYPES = ["quote", "fixed", "range"]
PRICE_TYPE_LABELS = {
    "quote": "Request a quote",
    "fixed": "Fixed price",
    "range": "Price range",
}

# Badges a pro can show on their profile (step 9)
HIGHLIGHT_OPTIONS = [
    {"id": "licensed", "label": "Licensed", "icon": "📜"},
    {"id": "insured", "label": "Insured", "icon": "🛡️"},
    {"id": "bonded", "label": "Bonded", "icon": "🤝"},
    {"id": "background_checked", "label": "Background Checked", "icon": "✅"},
    {"id": "family_owned", "label": "Family Owned", "icon": "👪"},
    {"id": "veteran_owned", "label": "Veteran Owned", "icon": "🎖️"},
    {"id": "emergency_service", "label": "24/7 Emergency Service", "icon": "🚨"},
    {"id": "free_estimates", "label": "Free Estimates", "icon": "💬"},
    {"id": "eco_friendly", "label": "Eco Friendly", "icon": "🌱"},
    {"id": "warranty", "label": "Work Warranty", "icon": "🔒"},
]
VALID_HIGHLIGHT_IDS = {h["id"] for h in HIGHLIGHT_OPTIONS}

BUSINESS_NAME_MIN_LENGTH = 2
BUSINESS_NAME_MAX_LENGTH = 100
EARLIEST_YEAR_ESTABLISHED = 1800

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_WEBSITE_RE = re.compile(r"^(https?://)?[^\s/.]+(\.[^\s/.]+)+(/\S*)?$", re.IGNORECASE)
_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


# =============================================================================
# Field Validators
# =============================================================================

def is_valid_business_name(name: str) -> bool:
    """Business name must be 2-100 characters once trimmed."""
    length = len(name.strip())
    return BUSINESS_NAME_MIN_LENGTH <= length <= BUSINESS_NAME_MAX_LENGTH


def phone_digits(phone: str) -> str:
    return re.sub(r"\D", "", phone)


def is_valid_phone(phone: str) -> bool:
    """
    US phone numbers only.

    Formatting is ignored; accepts 10 digits, or 11 with a leading country code 1.
    """
    digits = phone_digits(phone)
    if len(digits) == 10:
        return True
    return len(digits) == 11 and digits.startswith("1")


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.match(email.strip()))


def is_valid_website(website: str) -> bool:
    """Empty is fine (optional field)."""
    website = website.strip()
    if not website:
        return True
    return bool(_WEBSITE_RE.match(website))


def is_valid_year_established(year: str) -> bool:
    """Empty is fine (optional field)."""
    year = year.strip()
    if not year:
        return True
    if not (year.isdigit() and len(year) == 4):
        return False
    return EARLIEST_YEAR_ESTABLISHED <= int(year) <= date.today().year


def is_valid_time(value: str) -> bool:
    return bool(_TIME_RE.match(value))


# =============================================================================
# Inline Field Messages
# =============================================================================

def business_info_errors(business_name: str, phone: str, email: str) -> dict[str, str]:
    """Field-level messages for the business info step. Empty dict when valid."""
    errors = {}
    if not is_valid_business_name(business_name):
        errors["business_name"] = (
            f"Business name must be {BUSINESS_NAME_MIN_LENGTH}-{BUSINESS_NAME_MAX_LENGTH} characters"
        )
    if not is_valid_phone(phone):
        errors["phone"] = "Please enter a valid 10-digit phone number"
    if email.strip() and not is_valid_email(email):
        errors["email"] = "Please enter a valid email address"
    return errors


def highlights_errors(highlights: list[str], license_number: str) -> dict[str, str]:
    """License number is required once the pro claims the 'licensed' badge."""
    if "licensed" in highlights and not license_number.strip():
        return {"license_number": "License number is required for licensed pros"}
    return {}


# =============================================================================
# Form Models
# =============================================================================

class ServiceItem(BaseModel):
    """One service on the pro's menu (step 7)."""

    name: str = Field(min_length=1, max_length=120)
    description: str = ""
    price_type: Literal["quote", "fixed", "range"] = "quote"
    price_min: float | None = Field(default=None, ge=0)
    price_max: float | None = Field(default=None, ge=0)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def check_price_range(self) -> "ServiceItem":
        if self.price_type == "quote":
            self.price_min = None
            self.price_max = None
        elif self.price_type == "fixed":
            self.price_max = None
        elif (
            self.price_min is not None
            and self.price_max is not None
            and self.price_min > self.price_max
        ):
            raise ValueError("price_min cannot be greater than price_max")
        return self


class DayHours(BaseModel):
    """Opening hours for a single weekday (step 6)."""

    open: str = "09:00"
    close: str = "17:00"
    closed: bool = False

    @field_validator("open", "close")
    @classmethod
    def validate_time(cls, v: str) -> str:
        if not is_valid_time(v):
            raise ValueError(f"Invalid time '{v}', expected HH:MM")
        return v


def normalize_hours(hours: dict) -> dict[str, dict]:
    """
    Validate an hours mapping and fill in any missing weekday as closed.

    Unknown keys are dropped.
    """
    normalized = {}
    for day in WEEKDAYS:
        entry = hours.get(day)
        if entry is None:
            normalized[day] = DayHours(closed=True).model_dump()
        else:
            normalized[day] = DayHours.model_validate(entry).model_dump()

    unknown = set(hours) - set(WEEKDAYS)
    if unknown:
        logger.info(f"Ignoring unknown weekdays in hours: {unknown}")
    return normalized


def normalize_highlights(highlights: list[str]) -> list[str]:
    """Keep known badge ids, in order, without duplicates."""
    validated = []
    for h in highlights:
        if not h or not h.strip():
            continue
        h_id = h.strip().lower()
        if h_id not in VALID_HIGHLIGHT_IDS:
            logger.info(f"Unknown highlight (ignored): {h}")
            continue
        if h_id not in validated:
            validated.append(h_id)
    return validated


# =============================================================================
# API Response Helpers
# =============================================================================

def get_form_options() -> dict:
    """
    Get static form options for frontend rendering.

    Returns dict with weekdays, price types and highlight badges.
    """
    return {
        "weekdays": WEEKDAYS,
        "price_types": [
            {"id": pt, "label": PRICE_TYPE_LABELS[pt]} for pt in PRICE_TYPES
        ],
        "highlights": HIGHLIGHT_OPTIONS,
    }
