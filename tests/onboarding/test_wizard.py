"""
Tests for the onboarding wizard state machine.
"""

import asyncio

import pytest

from onboarding.persistence import OnboardingStore, SaveOutcome
from onboarding.state import LocationType, ProviderType, WizardState, WizardStep
from onboarding.wizard import SAVE_FAILED_MESSAGE, OnboardingWizard


@pytest.fixture
def store(fake_supabase):
    return OnboardingStore(fake_supabase)


@pytest.fixture
def wizard(store, user_id):
    return OnboardingWizard(WizardState(), store, user_id)


class TestCatalogSelections:
    """Provider type / category / subcategory mutators."""

    def test_provider_type_change_resets_downstream(self, wizard):
        wizard.set_provider_type("pro")
        wizard.set_primary_category("Plumbing")
        wizard.toggle_subcategory("Drain Services")

        wizard.set_provider_type("realtor")

        assert wizard.state.provider_type == ProviderType.REALTOR
        assert wizard.state.primary_category == ""
        assert wizard.state.selected_subcategories == []

    def test_same_provider_type_keeps_selection(self, wizard):
        wizard.set_provider_type("pro")
        wizard.set_primary_category("Plumbing")
        wizard.toggle_subcategory("Drain Services")

        wizard.set_provider_type("pro")

        assert wizard.state.primary_category == "Plumbing"
        assert wizard.state.selected_subcategories == ["Drain Services"]

    def test_category_change_resets_subcategories(self, wizard):
        wizard.set_provider_type("pro")
        wizard.set_primary_category("Plumbing")
        wizard.toggle_subcategory("Drain Services")

        wizard.set_primary_category("Plumbing")
        assert wizard.state.selected_subcategories == ["Drain Services"]

        wizard.set_primary_category("Electrical")
        assert wizard.state.selected_subcategories == []

    def test_unknown_provider_type(self, wizard):
        with pytest.raises(ValueError):
            wizard.set_provider_type("astronaut")

    def test_category_must_match_provider_type(self, wizard):
        with pytest.raises(ValueError):
            wizard.set_primary_category("Plumbing")

        wizard.set_provider_type("realtor")
        with pytest.raises(ValueError):
            wizard.set_primary_category("Plumbing")

    def test_toggle_subcategory(self, wizard):
        wizard.set_provider_type("pro")
        wizard.set_primary_category("Plumbing")

        wizard.toggle_subcategory("Drain Services")
        wizard.toggle_subcategory("Water Heater")
        assert wizard.state.selected_subcategories == ["Drain Services", "Water Heater"]

        wizard.toggle_subcategory("Drain Services")
        assert wizard.state.selected_subcategories == ["Water Heater"]

    def test_subcategory_outside_category_rejected(self, wizard):
        wizard.set_provider_type("pro")
        wizard.set_primary_category("Plumbing")
        with pytest.raises(ValueError):
            wizard.toggle_subcategory("Pool Repair")
        with pytest.raises(ValueError):
            wizard.set_subcategories(["Drain Services", "Pool Repair"])
        assert wizard.state.selected_subcategories == []

    def test_set_subcategories_dedupes(self, wizard):
        wizard.set_provider_type("pro")
        wizard.set_primary_category("Plumbing")
        wizard.set_subcategories(["Water Heater", "Drain Services", "Water Heater"])
        assert wizard.state.selected_subcategories == ["Water Heater", "Drain Services"]


class TestUpdate:
    """Field edits through update()."""

    def test_scalars(self, wizard):
        wizard.update(business_name="AB Plumbing", phone="5551234567")
        assert wizard.state.business_name == "AB Plumbing"

    def test_catalog_fields_rejected(self, wizard):
        with pytest.raises(ValueError):
            wizard.update(primary_category="Plumbing")
        with pytest.raises(ValueError):
            wizard.update(current_step=11)

    def test_services_validated(self, wizard):
        wizard.update(services=[{"name": "Leak Repair", "price_type": "quote", "price_min": 10}])
        assert wizard.state.services[0]["price_min"] is None

        with pytest.raises(ValueError):
            wizard.update(services=[{"name": "Install", "price_type": "range", "price_min": 9, "price_max": 1}])

    def test_all_or_nothing(self, wizard):
        with pytest.raises(ValueError):
            wizard.update(business_name="AB Plumbing", location_type="teleport")
        assert wizard.state.business_name == ""

    def test_location_type_and_hours(self, wizard):
        wizard.update(
            location_type="mobile",
            hours={"monday": {"open": "07:00", "close": "15:00", "closed": False}},
        )
        assert wizard.state.location_type == LocationType.MOBILE
        assert wizard.state.hours["monday"]["open"] == "07:00"
        assert wizard.state.hours["sunday"]["closed"] is True

    def test_highlights_normalized(self, wizard):
        wizard.update(highlights=["Insured", "bogus"])
        assert wizard.state.highlights == ["insured"]

    def test_service_radius_must_be_non_negative_int(self, wizard):
        with pytest.raises(ValueError):
            wizard.update(service_radius=-5)
        wizard.update(service_radius=50)
        assert wizard.state.service_radius == 50

    @pytest.mark.parametrize("field", ["hours", "services", "highlights", "service_areas", "business_name"])
    def test_null_rejected_and_nothing_applied(self, wizard, field):
        hours_before = dict(wizard.state.hours)
        with pytest.raises(ValueError):
            wizard.update(short_bio="Austin plumbers.", **{field: None})
        assert wizard.state.short_bio == ""
        assert wizard.state.hours == hours_before

    def test_wrong_types_rejected(self, wizard):
        with pytest.raises(ValueError):
            wizard.update(hours=["monday"])
        with pytest.raises(ValueError):
            wizard.update(services={"name": "Leak Repair"})
        with pytest.raises(ValueError):
            wizard.update(highlights="insured")
        with pytest.raises(ValueError):
            wizard.update(phone=5551234567)

    def test_set_subcategories_requires_list(self, wizard):
        wizard.set_provider_type("pro")
        wizard.set_primary_category("Plumbing")
        with pytest.raises(ValueError):
            wizard.set_subcategories(None)
        assert wizard.state.selected_subcategories == []

    def test_malformed_website_and_year_rejected(self, wizard):
        with pytest.raises(ValueError, match="website"):
            wizard.update(website="abplumbing")
        with pytest.raises(ValueError, match="Year established"):
            wizard.update(year_established="19999")
        with pytest.raises(ValueError):
            wizard.update(year_established="1700")
        assert wizard.state.website == ""
        assert wizard.state.year_established == ""

    def test_optional_website_and_year_accepted(self, wizard):
        wizard.update(website="abplumbing.com", year_established="2009")
        assert wizard.state.website == "abplumbing.com"
        assert wizard.state.year_established == "2009"
        wizard.update(website="", year_established="")
        assert wizard.state.website == ""


class TestNavigation:
    """next_step / prev_step."""

    def test_gated_next_is_noop(self, wizard, fake_supabase):
        transition = asyncio.run(wizard.next_step())

        assert not transition.advanced
        assert transition.current_step == 1
        assert transition.save_result is None
        assert fake_supabase.calls == []

    def test_next_saves_then_advances(self, wizard, fake_supabase, user_id):
        wizard.set_provider_type("pro")
        transition = asyncio.run(wizard.next_step())

        assert transition.advanced
        assert transition.current_step == 2
        assert transition.save_result.outcome == SaveOutcome.SAVED
        assert fake_supabase.tables["pros"][0]["onboarding_step"] == 1

    def test_save_failure_does_not_block(self, wizard, fake_supabase):
        fake_supabase.failures |= {("places", "insert"), ("pro_providers", "upsert")}
        wizard.set_provider_type("pro")

        transition = asyncio.run(wizard.next_step())

        assert transition.advanced
        assert transition.current_step == 2
        assert transition.save_result.outcome == SaveOutcome.FAILED

    def test_business_info_scenario(self, wizard):
        wizard.set_provider_type("pro")
        asyncio.run(wizard.next_step())
        wizard.set_primary_category("Plumbing")
        asyncio.run(wizard.next_step())
        wizard.set_subcategories(["Drain Services", "Water Heater"])
        asyncio.run(wizard.next_step())
        assert wizard.current_step == WizardStep.BUSINESS_INFO

        wizard.update(business_name="A", phone="5551234567")
        assert not wizard.can_proceed
        assert "business_name" in wizard.errors
        assert not asyncio.run(wizard.next_step()).advanced

        wizard.update(business_name="AB Plumbing")
        assert wizard.can_proceed
        assert asyncio.run(wizard.next_step()).current_step == WizardStep.LOCATION

    def test_invalid_email_or_short_phone_blocks(self, wizard):
        wizard.state.current_step = int(WizardStep.BUSINESS_INFO)
        wizard.update(business_name="AB Plumbing", phone="5551234567", email="foo")
        assert not asyncio.run(wizard.next_step()).advanced

        wizard.update(email="", phone="555123456")
        assert not asyncio.run(wizard.next_step()).advanced

    def test_next_on_review_is_noop(self, store, plumber_state, user_id, fake_supabase):
        wizard = OnboardingWizard(plumber_state, store, user_id)
        transition = asyncio.run(wizard.next_step())
        assert not transition.advanced
        assert transition.current_step == 11
        assert fake_supabase.calls == []

    def test_prev_step_floors_at_one_and_never_saves(self, wizard, fake_supabase):
        wizard.state.current_step = 3
        assert wizard.prev_step() == 2
        assert wizard.prev_step() == 1
        assert wizard.prev_step() == 1
        assert fake_supabase.calls == []


class TestComplete:
    """complete() from the review step."""

    def test_only_from_review(self, wizard):
        with pytest.raises(ValueError):
            asyncio.run(wizard.complete())

    def test_success_marks_completed(self, store, plumber_state, user_id, fake_supabase):
        wizard = OnboardingWizard(plumber_state, store, user_id)
        result = asyncio.run(wizard.complete())

        assert result.ok
        assert wizard.completed
        pro = fake_supabase.tables["pros"][0]
        assert pro["onboarding_completed"] is True
        assert pro["profile_completion"] == 100

    def test_fallback_save_counts_as_success(self, store, plumber_state, user_id, fake_supabase):
        fake_supabase.failures.add(("pros", "upsert"))
        wizard = OnboardingWizard(plumber_state, store, user_id)

        result = asyncio.run(wizard.complete())

        assert result.outcome == SaveOutcome.SAVED_TO_FALLBACK
        assert wizard.completed

    def test_failure_returns_generic_message(self, store, plumber_state, user_id, fake_supabase):
        fake_supabase.failures |= {("pros", "select"), ("pro_providers", "upsert")}
        wizard = OnboardingWizard(plumber_state, store, user_id)

        result = asyncio.run(wizard.complete())

        assert not result.ok
        assert result.error == SAVE_FAILED_MESSAGE
        assert not wizard.completed
