"""API views for lead capture and lead administration."""

import json
import logging

from django.db import DatabaseError
from django.http import HttpRequest, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from . import responses, services, store
from .api_auth import AdminTokenRequiredMixin, ApiKeyRequiredMixin, secrets_match

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "business", "service", "phone")

# Largest value a BigAutoField can hold
MAX_ID = 2**63 - 1


def _load_json_body(request: HttpRequest) -> dict | None:
    """Decode a JSON object body. An empty body reads as ``{}``, anything else unparseable as ``None``."""
    if not request.body:
        return {}
    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return data if isinstance(data, dict) else None


def _text(data: dict, field: str) -> str:
    """Return the stripped string value of ``field``. Anything that is not a string reads as missing."""
    value = data.get(field)
    return value.strip() if isinstance(value, str) else ""


@method_decorator(csrf_exempt, name="dispatch")
class AdminLoginView(ApiKeyRequiredMixin, View):
    """API: Exchange the admin password for the bearer token used by the admin endpoints."""

    async def post(self, request: HttpRequest) -> JsonResponse:
        data = _load_json_body(request)
        if data is None:
            return responses.bad_request("Invalid JSON body")

        password = data.get("password")
        if not password:
            return responses.bad_request("Password required")

        admin_password = self.lead_capture.admin_password
        if not secrets_match(str(password), admin_password):
            logger.warning("Failed admin login attempt")
            return responses.unauthorized("Invalid password")

        # The token is the admin secret itself; there is no session to mint.
        return JsonResponse({"success": True, "message": "Login successful", "token": admin_password})


@method_decorator(csrf_exempt, name="dispatch")
class ContactSubmitView(ApiKeyRequiredMixin, View):
    """API: Store a contact form submission and notify the team."""

    async def post(self, request: HttpRequest) -> JsonResponse:
        """Validate, persist, then fire off the notification without waiting for it."""
        data = _load_json_body(request)
        if data is None:
            return responses.bad_request("Invalid JSON body")

        fields = {field: _text(data, field) for field in REQUIRED_FIELDS}
        if not all(fields.values()):
            return responses.bad_request("Please fill in all required fields")

        try:
            submission = await store.create_submission(**fields, message=_text(data, "message"))
        except DatabaseError:
            logger.exception("Failed to save contact submission")
            return responses.internal_error()

        logger.info("Submission saved with ID: %d", submission.pk)

        services.dispatch_submission_notification(submission, self.lead_capture)

        return JsonResponse(
            {
                "success": True,
                "message": "Form submitted successfully! We will contact you soon.",
                "submissionId": submission.pk,
            }
        )


class SubmissionListView(AdminTokenRequiredMixin, View):
    """API: List every stored submission, newest first."""

    async def get(self, request: HttpRequest) -> JsonResponse:
        try:
            rows = await store.list_submissions()
        except DatabaseError:
            logger.exception("Failed to list submissions")
            return responses.internal_error()

        return JsonResponse({"success": True, "data": rows})


@method_decorator(csrf_exempt, name="dispatch")
class SubmissionDeleteView(AdminTokenRequiredMixin, View):
    """API: Delete one submission by id."""

    async def delete(self, request: HttpRequest, submission_id: str) -> JsonResponse:
        try:
            pk = int(submission_id)
        except ValueError:
            pk = 0
        if not 0 < pk <= MAX_ID:
            return responses.not_found("Submission not found")

        try:
            deleted = await store.delete_submission(pk)
        except DatabaseError:
            logger.exception("Failed to delete submission #%d", pk)
            return responses.internal_error()

        if not deleted:
            return responses.not_found("Submission not found")

        logger.info("Submission #%d deleted", pk)
        return JsonResponse({"success": True, "message": "Submission deleted successfully"})
