"""
Onboarding API Endpoints.

Wizard sessions are kept in memory per user and hydrated from the database
on first access, so a pro can close the app and resume where they left off.
"""

import copy
import logging
from typing import Any

from fastapi import APIRouter, Depends, Header, HTTPException
from pydantic import BaseModel

from .catalog import PROVIDER_TYPES, get_catalog_options, search_categories
from .forms import get_form_options
from .persistence import OnboardingStore
from .scoring import missing_fields
from .state import (
    LAST_STEP,
    STEP_TITLES,
    WizardState,
    WizardStep,
    get_completed_steps,
)
from .wizard import SAVE_FAILED_MESSAGE, OnboardingWizard

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/onboarding", tags=["onboarding"])

PROVIDER_TYPE_LABELS = {
    "pro": "Home & Business Pro",
    "realtor": "Real Estate Agent",
    "on_the_go": "On The Go (food trucks, mobile services)",
}

# In-memory wizard sessions (keyed by user_id)
_sessions: dict[str, OnboardingWizard] = {}


# =============================================================================
# Dependencies
# =============================================================================

class AuthenticatedUser(BaseModel):
    """The pro making the request, from their Supabase session."""
    id: str
    email: str | None
    access_token: str


def _bearer_token(authorization: str | None) -> str:
    scheme, _, token = (authorization or "").partition(" ")
    if scheme != "Bearer" or not token.strip():
        raise HTTPException(status_code=401, detail="Missing or invalid authorization header")
    return token.strip()


async def get_current_user(authorization: str = Header(None)) -> AuthenticatedUser:
    """
    Resolve the pro from "Authorization: Bearer <supabase_access_token>".

    Any lookup failure is a 401; the wizard never runs for an anonymous user.
    """
    from tavvy_pros.db.client import get_service_client

    token = _bearer_token(authorization)

    try:
        user_response = get_service_client().auth.get_user(token)
    except Exception as e:
        logger.warning(f"Onboarding auth lookup failed: {e}")
        raise HTTPException(status_code=401, detail="Authentication failed")

    user = user_response.user if user_response else None
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid or expired session")

    return AuthenticatedUser(id=user.id, email=user.email, access_token=token)


def get_store() -> OnboardingStore:
    """Store backed by the service-role client. Overridden in tests."""
    from tavvy_pros.db.client import get_service_client

    return OnboardingStore(get_service_client())


# =============================================================================
# Request/Response Models
# =============================================================================

class StateUpdateRequest(BaseModel):
    """Partial wizard update. Only fields present in the body are applied."""
    provider_type: str | None = None
    primary_category: str | None = None
    selected_subcategories: list[str] | None = None

    business_name: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    year_established: str | None = None

    location_type: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    service_areas: list[str] | None = None
    service_radius: int | None = None

    hours: dict[str, Any] | None = None
    services: list[dict[str, Any]] | None = None

    profile_photo: str | None = None
    cover_photo: str | None = None
    work_photos: list[str] | None = None

    highlights: list[str] | None = None
    license_number: str | None = None
    license_state: str | None = None

    short_bio: str | None = None
    full_description: str | None = None


class StateResponse(BaseModel):
    """Current wizard state plus derived gating and scoring."""
    user_id: str
    current_step: int
    step_title: str
    total_steps: int
    steps_completed: list[int]
    can_proceed: bool
    errors: dict[str, str]
    completion: int
    missing: list[str]
    state: dict


class TransitionResponse(BaseModel):
    """Response after a next-step request."""
    advanced: bool
    current_step: int
    save: dict | None = None
    can_proceed: bool
    errors: dict[str, str]
    completion: int


# =============================================================================
# Session Helpers
# =============================================================================

async def get_or_create_session(user_id: str, store: OnboardingStore) -> OnboardingWizard:
    """
    Return the user's wizard, hydrating from saved progress on first access.

    A user with nothing saved (or an unreadable save) starts at step 1.
    """
    wizard = _sessions.get(user_id)
    if wizard is not None:
        return wizard

    state = await store.load(user_id)
    if state is None:
        logger.info(f"Starting new onboarding for {user_id}")
        state = WizardState()
    else:
        logger.info(f"Resuming onboarding for {user_id} at step {state.current_step}")

    wizard = OnboardingWizard(state, store, user_id)
    _sessions[user_id] = wizard
    return wizard


def clear_session(user_id: str) -> bool:
    return _sessions.pop(user_id, None) is not None


def build_state_response(wizard: OnboardingWizard) -> StateResponse:
    state = wizard.state
    return StateResponse(
        user_id=wizard.user_id,
        current_step=state.current_step,
        step_title=STEP_TITLES[WizardStep(state.current_step)],
        total_steps=int(LAST_STEP),
        steps_completed=get_completed_steps(state),
        can_proceed=wizard.can_proceed,
        errors=wizard.errors,
        completion=wizard.completion,
        missing=missing_fields(state),
        state=state.to_dict(),
    )


def apply_update(wizard: OnboardingWizard, changes: dict) -> None:
    """
    Apply a partial update through the wizard's mutators.

    Catalog fields go first, in order, so a new provider type resets the
    category before a new category is set. All-or-nothing: on any
    error the state is restored.
    """
    snapshot = copy.deepcopy(wizard.state)
    try:
        if "provider_type" in changes:
            wizard.set_provider_type(changes.pop("provider_type"))
        if "primary_category" in changes:
            wizard.set_primary_category(changes.pop("primary_category"))
        if "selected_subcategories" in changes:
            wizard.set_subcategories(changes.pop("selected_subcategories"))
        wizard.update(**changes)
    except Exception:
        wizard.state = snapshot
        raise


# =============================================================================
# Endpoints: Static Options
# =============================================================================

@router.get("/options")
async def get_onboarding_options():
    """
    Get static wizard options for frontend rendering.

    Returns provider types, step titles, weekdays, price types and
    highlight badges.
    """
    return {
        "provider_types": [
            {"id": pt, "label": PROVIDER_TYPE_LABELS.get(pt, pt)} for pt in PROVIDER_TYPES
        ],
        "steps": [{"step": int(step), "title": title} for step, title in STEP_TITLES.items()],
        **get_form_options(),
    }


@router.get("/catalog/{provider_type}")
async def get_catalog(provider_type: str, q: str | None = None):
    """
    Get the category tree for a provider type.

    With ?q=, returns matching categories instead (empty query matches nothing).
    """
    if provider_type not in PROVIDER_TYPES:
        raise HTTPException(status_code=404, detail=f"Unknown provider type: {provider_type}")

    if q is not None:
        return {
            "provider_type": provider_type,
            "query": q,
            "results": search_categories(provider_type, q),
        }
    return get_catalog_options(provider_type)


# =============================================================================
# Endpoints: Wizard
# =============================================================================

@router.get("/state", response_model=StateResponse)
async def get_onboarding_state(
    user: AuthenticatedUser = Depends(get_current_user),
    store: OnboardingStore = Depends(get_store),
) -> StateResponse:
    """Get current onboarding progress (resumes saved progress)."""
    wizard = await get_or_create_session(user.id, store)
    return build_state_response(wizard)


@router.patch("/state", response_model=StateResponse)
async def update_onboarding_state(
    request: StateUpdateRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    store: OnboardingStore = Depends(get_store),
) -> StateResponse:
    """Apply field edits. Nothing is saved until the pro continues."""
    wizard = await get_or_create_session(user.id, store)

    changes = request.model_dump(exclude_unset=True)
    try:
        apply_update(wizard, changes)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return build_state_response(wizard)


@router.post("/next", response_model=TransitionResponse)
async def next_step(
    user: AuthenticatedUser = Depends(get_current_user),
    store: OnboardingStore = Depends(get_store),
) -> TransitionResponse:
    """Save and advance. Not advancing is a normal response, not an error."""
    wizard = await get_or_create_session(user.id, store)
    transition = await wizard.next_step()

    return TransitionResponse(
        **transition.to_dict(),
        can_proceed=wizard.can_proceed,
        errors=wizard.errors,
        completion=wizard.completion,
    )


@router.post("/back", response_model=StateResponse)
async def prev_step(
    user: AuthenticatedUser = Depends(get_current_user),
    store: OnboardingStore = Depends(get_store),
) -> StateResponse:
    """Go back one step (never saves)."""
    wizard = await get_or_create_session(user.id, store)
    wizard.prev_step()
    return build_state_response(wizard)


@router.post("/complete")
async def complete_onboarding(
    user: AuthenticatedUser = Depends(get_current_user),
    store: OnboardingStore = Depends(get_store),
):
    """
    Finish onboarding from the review step.

    On success the in-memory session is discarded; the saved profile is now
    the source of truth.
    """
    wizard = await get_or_create_session(user.id, store)

    if wizard.current_step != LAST_STEP:
        raise HTTPException(
            status_code=400,
            detail=f"Onboarding can only be completed from step {int(LAST_STEP)}",
        )

    result = await wizard.complete()
    if not result.ok:
        raise HTTPException(status_code=502, detail=SAVE_FAILED_MESSAGE)

    completion = wizard.completion
    clear_session(user.id)

    return {
        "success": True,
        "message": "Your profile is live!",
        "outcome": result.outcome.value,
        "place_id": result.place_id,
        "completion": completion,
    }


@router.delete("/session")
async def discard_session(user: AuthenticatedUser = Depends(get_current_user)):
    """Drop the in-memory session; the next request reloads saved progress."""
    cleared = clear_session(user.id)
    return {"success": True, "cleared": cleared}
