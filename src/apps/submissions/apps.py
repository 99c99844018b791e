"""Submissions app configuration."""

import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class SubmissionsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.submissions"
    label = "submissions"
    verbose_name = "Lead submissions"

    def ready(self) -> None:
        from .conf import LeadCaptureSettings

        self.lead_capture = LeadCaptureSettings.from_django_settings(settings)

        if not self.lead_capture.api_key:
            logger.warning("API_KEY is not configured; contact and login endpoints will reject every request.")
        if not self.lead_capture.admin_password:
            logger.warning("ADMIN_PASSWORD is not configured; admin endpoints will reject every request.")
        logger.info(
            "Email notifications: %s",
            "enabled" if self.lead_capture.notifications_enabled else "not configured",
        )
