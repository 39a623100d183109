"""
Onboarding Persistence.

OnboardingStore writes wizard progress to the places/pros tables and reads it
back on resume. If the places/pros write fails, the flat legacy pro_providers
table is tried instead so a pro never loses what they typed.

The Supabase client is passed in; the web layer owns it.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from pydantic import ValidationError
from supabase import Client

from .payload import (
    ProRecord,
    build_legacy_payload,
    build_place_payload,
    build_pro_payload,
    state_from_records,
)
from .state import WizardState

logger = logging.getLogger(__name__)

PLACES_TABLE = "places"
PROS_TABLE = "pros"
LEGACY_TABLE = "pro_providers"


class SaveOutcome(str, Enum):
    SAVED = "saved"
    SAVED_TO_FALLBACK = "saved_to_fallback"
    FAILED = "failed"


@dataclass
class SaveResult:
    """What happened to a save attempt. The caller decides what to surface."""
    outcome: SaveOutcome
    place_id: str | None = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome != SaveOutcome.FAILED

    def to_dict(self) -> dict:
        return {
            "outcome": self.outcome.value,
            "place_id": self.place_id,
            "error": self.error,
        }


class OnboardingStore:
    """Reads and writes a pro's onboarding progress."""

    def __init__(self, client: Client):
        self.client = client

    async def save(self, state: WizardState, user_id: str) -> SaveResult:
        """
        Persist the current state. Never raises.

        1. Find the user's pros row (if any) and its place
        2. Update that place, or insert a new one
        3. Upsert the pros row pointing at the place
        On failure, upsert the flat subset into pro_providers instead.
        """
        try:
            place_id = self._save_primary(state, user_id)
            logger.info(f"Saved onboarding step {state.current_step} for {user_id} (place {place_id})")
            return SaveResult(outcome=SaveOutcome.SAVED, place_id=place_id)
        except Exception as e:
            logger.error(f"Failed to save onboarding to {PLACES_TABLE}/{PROS_TABLE} for {user_id}: {e}")
            primary_error = str(e)

        try:
            self.client.table(LEGACY_TABLE).upsert(
                build_legacy_payload(state, user_id),
                on_conflict="user_id",
            ).execute()
            logger.warning(f"Saved onboarding for {user_id} to {LEGACY_TABLE} fallback")
            return SaveResult(outcome=SaveOutcome.SAVED_TO_FALLBACK, error=primary_error)
        except Exception as e:
            logger.error(f"Fallback save to {LEGACY_TABLE} failed for {user_id}: {e}")
            return SaveResult(outcome=SaveOutcome.FAILED, error=f"{primary_error}; fallback: {e}")

    def _save_primary(self, state: WizardState, user_id: str) -> str:
        place_payload = build_place_payload(state)
        pro_payload = build_pro_payload(state)

        existing = (
            self.client.table(PROS_TABLE)
            .select("id, place_id")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        place_id = existing.data[0].get("place_id") if existing.data else None

        if place_id:
            self.client.table(PLACES_TABLE).update(place_payload).eq("id", place_id).execute()
        else:
            inserted = self.client.table(PLACES_TABLE).insert(place_payload).execute()
            if not inserted.data:
                raise RuntimeError("Place insert returned no rows")
            place_id = inserted.data[0]["id"]

        self.client.table(PROS_TABLE).upsert(
            {**pro_payload, "user_id": user_id, "place_id": place_id},
            on_conflict="user_id",
        ).execute()

        return str(place_id)

    async def load(self, user_id: str) -> WizardState | None:
        """
        Load saved progress for a user.

        Returns None for a new user, and also when the read fails (logged);
        either way the caller starts a fresh wizard.
        """
        try:
            result = (
                self.client.table(PROS_TABLE)
                .select("*, places(*)")
                .eq("user_id", user_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.warning(f"Failed to load onboarding for {user_id}: {e}")
            return None

        if not result.data:
            return None

        try:
            record = ProRecord.model_validate(result.data[0])
        except ValidationError as e:
            logger.warning(f"Stored onboarding for {user_id} is unreadable: {e}")
            return None

        return state_from_records(record)
