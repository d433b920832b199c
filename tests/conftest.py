"""Pytest configuration for GetYourSite tests."""

import pytest
from django.apps import apps
from django.test import Client


@pytest.fixture(autouse=True)
def reset_rate_limiters() -> None:
    """Give every test a fresh per-process rate limit table."""
    apps.get_app_config("contact").pipeline.rate_limiter.reset()
    apps.get_app_config("accounts").login_rate_limiter.reset()


@pytest.fixture
def admin_user(db):
    """Create a user allowed to use the admin API."""
    from apps.accounts.models import User

    return User.objects.create_user(
        username="siteadmin",
        email="admin@getyoursite.test",
        password="testpass123",
        is_admin=True,
    )


@pytest.fixture
def regular_user(db):
    """Create a user without admin rights."""
    from apps.accounts.models import User

    return User.objects.create_user(
        username="visitor",
        email="visitor@example.com",
        password="testpass123",
    )


@pytest.fixture
def admin_token(admin_user) -> str:
    """Return a signed admin API token."""
    from apps.accounts.tokens import issue_token

    return issue_token(admin_user)


@pytest.fixture
def admin_client(admin_token) -> Client:
    """Return a client that sends the admin bearer token on every request."""
    return Client(HTTP_AUTHORIZATION=f"Bearer {admin_token}")
