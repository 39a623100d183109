"""Basic health check tests."""

from unittest.mock import patch

from typer.testing import CliRunner

from tavvy_pros.main import app

runner = CliRunner()


def test_import_tavvy_pros():
    """Test that tavvy_pros package can be imported."""
    import tavvy_pros
    assert tavvy_pros.__version__ == "1.0.0"


def test_import_onboarding():
    """Test that the onboarding package exports its public types."""
    from onboarding import OnboardingStore, OnboardingWizard, WizardState, WizardStep

    assert WizardStep.REVIEW == 11
    assert WizardState().current_step == 1
    assert OnboardingStore and OnboardingWizard


def test_settings_from_env():
    from tavvy_pros.config import get_settings

    settings = get_settings()
    assert settings.supabase_url == "https://test.supabase.co"
    assert settings.is_development
    assert "http://localhost:5173" in settings.cors_origin_list


class TestCli:
    """typer commands that don't need a live database."""

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_health(self):
        result = runner.invoke(app, ["health"])
        assert result.exit_code == 0
        assert "All checks passed" in result.output

    def test_categories_search(self):
        result = runner.invoke(app, ["categories", "pro", "--search", "water heater"])
        assert result.exit_code == 0
        assert "Plumbing" in result.output

    def test_categories_unknown_type(self):
        result = runner.invoke(app, ["categories", "astronaut"])
        assert result.exit_code == 1

    def test_progress_no_saved_onboarding(self, fake_supabase):
        with patch("tavvy_pros.db.client.get_service_client", return_value=fake_supabase):
            result = runner.invoke(app, ["progress", "nobody"])
        assert result.exit_code == 1
        assert "No saved onboarding" in result.output

    def test_progress(self, fake_supabase, plumber_state, user_id):
        import asyncio
        from onboarding.persistence import OnboardingStore

        asyncio.run(OnboardingStore(fake_supabase).save(plumber_state, user_id))

        with patch("tavvy_pros.db.client.get_service_client", return_value=fake_supabase):
            result = runner.invoke(app, ["progress", user_id])

        assert result.exit_code == 0
        assert "AB Plumbing" in result.output
        assert "100%" in result.output


def test_setup_logging_quiets_http_clients():
    import logging

    from tavvy_pros.logging_setup import setup_logging

    setup_logging("DEBUG")
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING
