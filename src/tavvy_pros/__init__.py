"""
Tavvy Pros - service provider onboarding backend.

Hosts the onboarding wizard API that turns a new pro's answers into a
places/pros profile.
"""

__version__ = "1.0.0"
