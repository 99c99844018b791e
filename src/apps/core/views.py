"""Core app views."""

import logging

from django.conf import settings
from django.http import FileResponse, HttpRequest, HttpResponse, HttpResponseNotFound, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt
from django.views.generic import TemplateView

logger = logging.getLogger(__name__)


class HealthView(View):
    """Liveness check. Checks nothing beyond the process answering."""

    def get(self, request: HttpRequest) -> JsonResponse:
        return JsonResponse({"status": "Server is running!"})


class AdminPageView(TemplateView):
    """Standalone admin panel that drives the submissions API from the browser."""

    template_name = "admin.html"


@method_decorator(csrf_exempt, name="dispatch")
class FrontendAppView(View):
    """Serve the single-page app's entry document for every unmatched route, whatever the method."""

    def dispatch(self, request: HttpRequest, *args, **kwargs) -> HttpResponse:
        index_file = settings.FRONTEND_DIST_DIR / "index.html"
        if not index_file.is_file():
            logger.warning("Front-end entry document missing at %s", index_file)
            return HttpResponseNotFound("Front-end build not found.", content_type="text/plain")
        return FileResponse(index_file.open("rb"), content_type="text/html")
