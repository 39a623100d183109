"""
Profile Completion Scoring.

Maps wizard state to a 0-100 score used to nudge pros towards filling in
optional fields. Always computed from the current state, never stored on it.
The weights are shared with the dashboard and must stay in sync.
"""

from .state import WizardState

# Weights add up to 105; score() caps at MAX_SCORE
WEIGHTS = {
    "provider_type": 5,
    "primary_category": 5,
    "business_name": 5,
    "phone": 5,
    "location": 10,
    "hours": 10,
    "services": 15,
    "profile_photo": 10,
    "cover_photo": 5,
    "work_photos": 10,
    "highlights": 10,
    "bio": 10,
    "website": 5,
}

# Count at which proportional fields get full credit
FULL_CREDIT_SERVICES = 3
FULL_CREDIT_WORK_PHOTOS = 3

MAX_SCORE = 100


def _proportional(weight: int, count: int, full_at: int) -> int:
    if count >= full_at:
        return weight
    return (weight * count) // full_at


def score_breakdown(state: WizardState) -> dict[str, int]:
    """Points earned per scoring field."""
    return {
        "provider_type": WEIGHTS["provider_type"] if state.provider_type else 0,
        "primary_category": WEIGHTS["primary_category"] if state.primary_category else 0,
        "business_name": WEIGHTS["business_name"] if state.business_name.strip() else 0,
        "phone": WEIGHTS["phone"] if state.phone.strip() else 0,
        "location": WEIGHTS["location"] if (state.address.strip() or state.service_areas) else 0,
        "hours": WEIGHTS["hours"] if any(not d.get("closed") for d in state.hours.values()) else 0,
        "services": _proportional(WEIGHTS["services"], len(state.services), FULL_CREDIT_SERVICES),
        "profile_photo": WEIGHTS["profile_photo"] if state.profile_photo else 0,
        "cover_photo": WEIGHTS["cover_photo"] if state.cover_photo else 0,
        "work_photos": _proportional(WEIGHTS["work_photos"], len(state.work_photos), FULL_CREDIT_WORK_PHOTOS),
        "highlights": WEIGHTS["highlights"] if state.highlights else 0,
        "bio": WEIGHTS["bio"] if (state.short_bio.strip() or state.full_description.strip()) else 0,
        "website": WEIGHTS["website"] if state.website.strip() else 0,
    }


def score(state: WizardState) -> int:
    """Profile completion score, 0-100."""
    return min(MAX_SCORE, sum(score_breakdown(state).values()))


def missing_fields(state: WizardState) -> list[str]:
    """Scoring fields that haven't earned full credit yet, heaviest first."""
    earned = score_breakdown(state)
    missing = [name for name, points in earned.items() if points < WEIGHTS[name]]
    return sorted(missing, key=lambda name: WEIGHTS[name] - earned[name], reverse=True)
