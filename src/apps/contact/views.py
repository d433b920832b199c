"""Contact app views: public ingestion endpoint and admin review API."""

import json
import logging

from django.apps import apps
from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from apps.accounts.mixins import AdminTokenRequiredMixin
from apps.core.http import get_client_ip

from .exceptions import ContactError, StorageError, ValidationError
from .store import DEFAULT_LIST_LIMIT

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Message received! We will get back to you shortly."


def _get_pipeline():
    return apps.get_app_config("contact").pipeline


def _read_payload(request: HttpRequest) -> dict | None:
    """Return the request's JSON object or form fields, or None if the body is unusable."""
    if request.content_type == "application/json":
        try:
            data = json.loads(request.body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        return data if isinstance(data, dict) else None
    return request.POST.dict()


def _int_param(value, default: int, *, minimum: int, maximum: int | None = None) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    number = max(minimum, number)
    if maximum is not None:
        number = min(maximum, number)
    return number


@method_decorator(csrf_exempt, name="dispatch")
class ContactSubmitView(View):
    """Handle contact form submissions."""

    async def post(self, request: HttpRequest) -> JsonResponse:
        """Run the submission through the ingestion pipeline."""
        data = _read_payload(request)
        if data is None:
            return JsonResponse({"error": "Invalid JSON body"}, status=400)

        try:
            await _get_pipeline().submit(data, get_client_ip(request))
        except ValidationError as exc:
            return JsonResponse({"error": exc.message, "details": exc.errors}, status=exc.status_code)
        except ContactError as exc:
            return JsonResponse({"error": exc.message}, status=exc.status_code)
        except Exception:
            logger.exception("Unexpected error while processing a contact submission")
            return JsonResponse({"error": "Server error"}, status=500)

        return JsonResponse(
            {
                "success": True,
                "message": SUCCESS_MESSAGE,
                "timestamp": timezone.now().isoformat(),
            }
        )


@method_decorator(csrf_exempt, name="dispatch")
class AdminMessageListView(AdminTokenRequiredMixin, View):
    """API: list contact submissions, newest first."""

    async def get(self, request: HttpRequest) -> JsonResponse:
        store = _get_pipeline().store
        limit = _int_param(request.GET.get("limit"), DEFAULT_LIST_LIMIT, minimum=1, maximum=DEFAULT_LIST_LIMIT)
        offset = _int_param(request.GET.get("offset"), 0, minimum=0)
        unread_only = request.GET.get("status") == "unread"

        try:
            submissions = await store.list(limit, offset=offset, unread_only=unread_only)
            total = await store.count()
            unread = await store.count(unread_only=True)
        except StorageError as exc:
            return JsonResponse({"error": exc.message}, status=exc.status_code)

        return JsonResponse(
            {
                "results": [submission.as_dict() for submission in submissions],
                "total": total,
                "unread": unread,
                "limit": limit,
                "offset": offset,
            }
        )


@method_decorator(csrf_exempt, name="dispatch")
class AdminMessageMarkReadView(AdminTokenRequiredMixin, View):
    """API: mark one contact submission as read."""

    async def put(self, request: HttpRequest) -> JsonResponse:
        try:
            data = json.loads(request.body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return JsonResponse({"error": "Invalid JSON body"}, status=400)

        message_id = _int_param(data.get("messageId") if isinstance(data, dict) else None, 0, minimum=0)
        if not message_id:
            return JsonResponse({"error": "messageId is required"}, status=400)

        try:
            await _get_pipeline().store.mark_read(message_id)
        except StorageError as exc:
            return JsonResponse({"error": exc.message}, status=exc.status_code)

        logger.info("%s marked contact submission #%d as read", request.admin_user, message_id)
        return JsonResponse({"success": True})


@method_decorator(csrf_exempt, name="dispatch")
class AdminMessageDeleteView(AdminTokenRequiredMixin, View):
    """API: delete one contact submission."""

    async def delete(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            deleted = await _get_pipeline().store.delete(pk)
        except StorageError as exc:
            return JsonResponse({"error": exc.message}, status=exc.status_code)

        if deleted:
            logger.info("%s deleted contact submission #%d", request.admin_user, pk)
        return JsonResponse({"success": True})
