"""Shared-secret authentication for the public and admin API endpoints.

Both gates follow the same shape: pull a credential out of the request, reply
401 when there is none, 403 when it does not match the configured secret, and
otherwise let the request through untouched. They differ only in where the
credential lives and which secret it is checked against.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from django.http import HttpRequest, JsonResponse
from django.utils.crypto import constant_time_compare

from . import responses
from .conf import LeadCaptureSettings, get_lead_capture_settings

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def api_key_credential(request: HttpRequest) -> str | None:
    """Read the API key from the ``x-api-key`` header or the ``apiKey`` query parameter."""
    return request.headers.get("x-api-key") or request.GET.get("apiKey") or None


def bearer_credential(request: HttpRequest) -> str | None:
    """Read a bearer token from the Authorization header."""
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith(BEARER_PREFIX):
        return None
    return auth_header[len(BEARER_PREFIX) :]


def secrets_match(credential: str, secret: str) -> bool:
    """Compare in constant time. An unset secret never matches."""
    return bool(secret) and constant_time_compare(credential, secret)


@dataclass(frozen=True)
class SharedSecretGate:
    """A request filter comparing one extracted credential against one configured secret."""

    name: str
    extract: Callable[[HttpRequest], str | None]
    secret: Callable[[LeadCaptureSettings], str]
    missing_message: str
    invalid_message: str

    def check(self, request: HttpRequest, config: LeadCaptureSettings) -> JsonResponse | None:
        """Return an error response when the request is rejected, ``None`` when it may proceed."""
        credential = self.extract(request)
        if credential is None:
            return responses.unauthorized(self.missing_message)

        if not secrets_match(credential, self.secret(config)):
            logger.warning("Rejected %s credential on %s %s", self.name, request.method, request.path)
            return responses.forbidden(self.invalid_message)

        return None


API_KEY_GATE = SharedSecretGate(
    name="API key",
    extract=api_key_credential,
    secret=lambda config: config.api_key,
    missing_message="API key required",
    invalid_message="Invalid API key",
)

ADMIN_GATE = SharedSecretGate(
    name="admin token",
    extract=bearer_credential,
    secret=lambda config: config.admin_password,
    missing_message="Admin authentication required",
    invalid_message="Invalid admin credentials",
)


class SharedSecretRequiredMixin:
    """
    Mixin for class-based views guarded by a :class:`SharedSecretGate`.

    Sets ``self.lead_capture`` to the app's settings before dispatching.
    """

    gate: SharedSecretGate

    async def dispatch(self, request, *args, **kwargs):
        """Run the gate before dispatching to the handler."""
        self.lead_capture = get_lead_capture_settings()

        rejection = self.gate.check(request, self.lead_capture)
        if rejection is not None:
            return rejection

        return await super().dispatch(request, *args, **kwargs)


class ApiKeyRequiredMixin(SharedSecretRequiredMixin):
    gate = API_KEY_GATE


class AdminTokenRequiredMixin(SharedSecretRequiredMixin):
    gate = ADMIN_GATE
