"""Tests for admin API tokens and authentication endpoints."""

import json

import pytest
from asgiref.sync import async_to_sync
from django.core import signing
from django.test import Client
from django.urls import reverse

from apps.accounts.tokens import TOKEN_SALT, get_token_user, is_authorized, issue_token, read_token


def login(client: Client, username: str, password: str, **extra):
    return client.post(
        reverse("accounts:admin_login"),
        data=json.dumps({"username": username, "password": password}),
        content_type="application/json",
        **extra,
    )


@pytest.mark.django_db
class TestTokens:
    """Signed admin token helpers."""

    def test_round_trip(self, admin_user) -> None:
        token = issue_token(admin_user)
        assert read_token(token) == admin_user.pk
        assert async_to_sync(get_token_user)(token) == admin_user
        assert async_to_sync(is_authorized)(token) is True

    def test_tampered_token_rejected(self, admin_user) -> None:
        token = issue_token(admin_user)
        assert read_token(token[:-1] + ("A" if token[-1] != "A" else "B")) is None
        assert async_to_sync(is_authorized)("garbage") is False

    def test_token_signed_with_other_salt_rejected(self, admin_user) -> None:
        token = signing.TimestampSigner(salt="something-else").sign_object({"uid": admin_user.pk})
        assert read_token(token) is None

    def test_expired_token_rejected(self, admin_user, settings) -> None:
        token = issue_token(admin_user)
        settings.ADMIN_TOKEN_MAX_AGE = -1
        assert read_token(token) is None

    def test_payload_without_user_id_rejected(self) -> None:
        token = signing.TimestampSigner(salt=TOKEN_SALT).sign_object({"user": "admin"})
        assert read_token(token) is None

    def test_token_invalid_once_admin_rights_removed(self, admin_user) -> None:
        token = issue_token(admin_user)
        admin_user.is_admin = False
        admin_user.save()
        assert async_to_sync(is_authorized)(token) is False

    def test_token_invalid_for_inactive_user(self, admin_user) -> None:
        token = issue_token(admin_user)
        admin_user.is_active = False
        admin_user.save()
        assert async_to_sync(get_token_user)(token) is None

    def test_superuser_can_use_admin_api(self, db) -> None:
        from apps.accounts.models import User

        superuser = User.objects.create_superuser(email="root@getyoursite.test", password="testpass123")
        assert superuser.username == "root@getyoursite.test"
        assert async_to_sync(is_authorized)(issue_token(superuser)) is True


@pytest.mark.django_db
class TestAdminLoginView:
    """POST /api/admin/login/."""

    def test_valid_login_returns_token(self, client: Client, admin_user) -> None:
        response = login(client, "siteadmin", "testpass123")

        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "siteadmin"
        assert data["expires_in"] > 0
        assert read_token(data["token"]) == admin_user.pk

    def test_wrong_password(self, client: Client, admin_user) -> None:
        response = login(client, "siteadmin", "wrong")
        assert response.status_code == 401
        assert "token" not in response.json()

    def test_non_admin_user_rejected(self, client: Client, regular_user) -> None:
        response = login(client, "visitor", "testpass123")
        assert response.status_code == 401

    def test_missing_fields(self, client: Client) -> None:
        response = login(client, "", "")
        assert response.status_code == 400

    def test_malformed_json(self, client: Client) -> None:
        response = client.post(reverse("accounts:admin_login"), data="nope", content_type="application/json")
        assert response.status_code == 400

    def test_non_utf8_body(self, client: Client) -> None:
        response = client.post(reverse("accounts:admin_login"), data=b"\xff\xfe{", content_type="application/json")
        assert response.status_code == 400

    def test_login_attempts_are_throttled(self, client: Client, admin_user, settings) -> None:
        for _ in range(settings.ADMIN_LOGIN_MAX_ATTEMPTS):
            assert login(client, "siteadmin", "wrong").status_code == 401

        response = login(client, "siteadmin", "testpass123")

        assert response.status_code == 429


@pytest.mark.django_db
class TestAdminVerifyView:
    """GET /api/admin/verify/."""

    def test_valid_token(self, admin_client: Client) -> None:
        response = admin_client.get(reverse("accounts:admin_verify"))
        assert response.status_code == 200
        assert response.json() == {"valid": True, "username": "siteadmin"}

    def test_missing_header(self, client: Client) -> None:
        response = client.get(reverse("accounts:admin_verify"))
        assert response.status_code == 401

    def test_non_bearer_header(self, client: Client, admin_token: str) -> None:
        response = client.get(reverse("accounts:admin_verify"), HTTP_AUTHORIZATION=f"Token {admin_token}")
        assert response.status_code == 401

    def test_login_then_verify(self, client: Client, admin_user) -> None:
        token = login(client, "siteadmin", "testpass123").json()["token"]
        response = client.get(reverse("accounts:admin_verify"), HTTP_AUTHORIZATION=f"Bearer {token}")
        assert response.status_code == 200
