"""
Tavvy Pros Onboarding.

Eleven-step wizard that turns a new service provider's answers into a
places/pros profile.

Steps:
1-3.  What you do - provider type, primary category, specialties
4-6.  Business basics - contact info, location or service areas, hours
7-10. Profile - services & pricing, photos, highlights, bio
11.   Review & finish

Progress is saved on every forward step so the wizard can be resumed.
"""

from .state import LocationType, ProviderType, WizardState, WizardStep
from .persistence import OnboardingStore, SaveOutcome, SaveResult
from .wizard import OnboardingWizard, StepTransition

__all__ = [
    "LocationType",
    "ProviderType",
    "WizardState",
    "WizardStep",
    "OnboardingStore",
    "SaveOutcome",
    "SaveResult",
    "OnboardingWizard",
    "StepTransition",
]
