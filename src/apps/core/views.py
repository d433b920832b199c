"""Core app views."""

import json
import logging

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils import timezone
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt
from django.views.generic import TemplateView

from apps.accounts.mixins import AdminTokenRequiredMixin

from .content import validate_section
from .models import SiteContent

logger = logging.getLogger(__name__)


class RobotsTxtView(View):
    """Serve robots.txt."""

    ROBOTS_TXT = (
        "User-agent: *\n"
        "Allow: /\n"
        "\n"
        "Disallow: /admin/\n"
        "Disallow: /api/\n"
    )

    def get(self, request: HttpRequest) -> HttpResponse:
        return HttpResponse(self.ROBOTS_TXT, content_type="text/plain")


class IndexView(TemplateView):
    """Public landing page."""

    template_name = "index.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["content"] = SiteContent.objects.resolved()
        return context


class ApiStatusView(View):
    """API: liveness document for the public API."""

    async def get(self, request: HttpRequest) -> JsonResponse:
        return JsonResponse(
            {
                "message": "Welcome to the GetYourSite API",
                "path": request.GET.get("path", request.path),
                "timestamp": timezone.now().isoformat(),
                "status": "active",
            }
        )


class ContentView(View):
    """API: landing page content, every section."""

    async def get(self, request: HttpRequest) -> JsonResponse:
        return JsonResponse(await SiteContent.objects.aresolved())


@method_decorator(csrf_exempt, name="dispatch")
class AdminContentUpdateView(AdminTokenRequiredMixin, View):
    """API: replace one landing page content section."""

    async def put(self, request: HttpRequest) -> JsonResponse:
        try:
            body = json.loads(request.body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return JsonResponse({"error": "Invalid JSON body"}, status=400)
        if not isinstance(body, dict):
            return JsonResponse({"error": "Invalid JSON body"}, status=400)

        section = body.get("type")
        data = body.get("data")
        error = validate_section(section, data)
        if error:
            return JsonResponse({"error": error}, status=400)

        await SiteContent.objects.aupdate_or_create(section=section, defaults={"data": data})
        logger.info("%s updated site content section %r", request.admin_user, section)
        return JsonResponse({"success": True, "type": section, "data": data})
