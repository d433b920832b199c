"""Admin API authentication views."""

import json
import logging

from django.apps import apps
from django.conf import settings
from django.contrib.auth import aauthenticate
from django.http import HttpRequest, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from apps.core.http import get_client_ip

from .mixins import AdminTokenRequiredMixin
from .tokens import issue_token

logger = logging.getLogger(__name__)


@method_decorator(csrf_exempt, name="dispatch")
class AdminLoginView(View):
    """API: exchange admin credentials for a signed bearer token."""

    async def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = json.loads(request.body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return JsonResponse({"error": "Invalid JSON body"}, status=400)
        if not isinstance(data, dict):
            return JsonResponse({"error": "Invalid JSON body"}, status=400)

        client_ip = get_client_ip(request)
        limiter = apps.get_app_config("accounts").login_rate_limiter
        if not limiter.check(client_ip):
            logger.warning("Admin login rate limit exceeded for %s", client_ip)
            return JsonResponse(
                {"error": "Too many login attempts. Try again later."},
                status=429,
            )

        username = str(data.get("username", "")).strip()
        password = str(data.get("password", ""))
        if not username or not password:
            return JsonResponse({"error": "Username and password are required"}, status=400)

        user = await aauthenticate(request, username=username, password=password)
        if user is None or not user.can_use_admin_api:
            logger.warning("Failed admin login for %r from %s", username, client_ip)
            return JsonResponse({"error": "Invalid credentials"}, status=401)

        logger.info("Issued admin token to %s", user.get_username())
        return JsonResponse(
            {
                "token": issue_token(user),
                "expires_in": settings.ADMIN_TOKEN_MAX_AGE,
                "username": user.get_username(),
            }
        )


class AdminVerifyView(AdminTokenRequiredMixin, View):
    """API: check that a bearer token is still valid."""

    async def get(self, request: HttpRequest) -> JsonResponse:
        return JsonResponse({"valid": True, "username": request.admin_user.get_username()})
