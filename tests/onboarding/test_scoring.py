"""
Tests for profile completion scoring.
"""

import dataclasses

from onboarding.scoring import MAX_SCORE, WEIGHTS, missing_fields, score, score_breakdown
from onboarding.state import ProviderType, WizardState


def _all_closed():
    return {day: {"open": "09:00", "close": "17:00", "closed": True} for day in (
        "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
    )}


class TestScore:
    """score() bounds and weights."""

    def test_fresh_state_only_scores_default_hours(self):
        state = WizardState()
        assert score(state) == WEIGHTS["hours"]

    def test_empty_state_with_closed_week_is_zero(self):
        assert score(WizardState(hours=_all_closed())) == 0

    def test_full_profile_capped(self, plumber_state):
        assert sum(score_breakdown(plumber_state).values()) > MAX_SCORE
        assert score(plumber_state) == MAX_SCORE

    def test_services_proportional(self):
        service = {"name": "Fix", "description": "", "price_type": "quote", "price_min": None, "price_max": None}
        points = [
            score_breakdown(WizardState(services=[service] * n))["services"]
            for n in range(5)
        ]
        assert points == [0, 5, 10, 15, 15]

    def test_work_photos_proportional(self):
        points = [
            score_breakdown(WizardState(work_photos=["p"] * n))["work_photos"]
            for n in range(5)
        ]
        assert points == [0, 3, 6, 10, 10]

    def test_location_from_address_or_service_areas(self):
        assert score_breakdown(WizardState(address="1 Main St"))["location"] == 10
        assert score_breakdown(WizardState(service_areas=["Austin"]))["location"] == 10
        assert score_breakdown(WizardState(city="Austin"))["location"] == 0

    def test_bio_from_either_field(self):
        assert score_breakdown(WizardState(short_bio="Hi"))["bio"] == 10
        assert score_breakdown(WizardState(full_description="Long"))["bio"] == 10
        assert score_breakdown(WizardState(short_bio="   "))["bio"] == 0


class TestMonotonic:
    """Filling in more fields never lowers the score."""

    def test_filling_fields_one_by_one(self, plumber_state):
        state = WizardState(hours=_all_closed())
        previous = score(state)
        for f in dataclasses.fields(plumber_state):
            setattr(state, f.name, getattr(plumber_state, f.name))
            current = score(state)
            assert 0 <= current <= MAX_SCORE
            assert current >= previous, f.name
            previous = current


class TestMissingFields:
    def test_heaviest_first(self):
        state = WizardState(provider_type=ProviderType.PRO)
        missing = missing_fields(state)
        assert "provider_type" not in missing
        assert "hours" not in missing
        assert missing[0] == "services"

    def test_partial_credit_still_missing(self):
        state = WizardState(work_photos=["a"])
        assert "work_photos" in missing_fields(state)

    def test_nothing_missing_when_full(self, plumber_state):
        assert missing_fields(plumber_state) == []
