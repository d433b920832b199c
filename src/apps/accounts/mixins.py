"""Authentication mixins for the JSON admin API."""

import logging

from django.http import JsonResponse

from apps.core.http import get_client_ip

from .tokens import get_token_user

logger = logging.getLogger(__name__)


class AdminTokenRequiredMixin:
    """
    Mixin for async class-based views that require an admin bearer token.

    Sets ``request.admin_user`` on success.
    """

    async def dispatch(self, request, *args, **kwargs):
        """Validate the bearer token before dispatching to the handler."""
        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith("Bearer "):
            return JsonResponse(
                {"error": "Missing or invalid Authorization header. Use: Bearer <token>"},
                status=401,
            )

        user = await get_token_user(auth_header[7:])
        if user is None:
            logger.warning("Invalid admin token from %s", get_client_ip(request))
            return JsonResponse({"error": "Invalid or expired token"}, status=401)

        request.admin_user = user
        return await super().dispatch(request, *args, **kwargs)
