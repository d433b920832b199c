"""Context processors for the core app."""

from django.conf import settings
from django.http import HttpRequest


def site_context(request: HttpRequest) -> dict:
    """Add site-wide context variables to all templates."""
    return {
        "SITE_NAME": "GetYourSite",
        "SITE_TAGLINE": "Websites designed, deployed and redesigned",
        "SITE_URL": getattr(settings, "SITE_URL", ""),
    }
