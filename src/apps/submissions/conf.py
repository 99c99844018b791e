"""Runtime configuration for lead capture, built once at startup."""

from dataclasses import dataclass

from django.apps import apps


@dataclass(frozen=True)
class LeadCaptureSettings:
    """Shared secrets and notification settings handed to the gates and handlers."""

    api_key: str
    admin_password: str
    notification_recipients: tuple[str, ...]
    notification_sender: str
    site_name: str

    @classmethod
    def from_django_settings(cls, settings) -> "LeadCaptureSettings":
        return cls(
            api_key=settings.API_KEY,
            admin_password=settings.ADMIN_PASSWORD,
            notification_recipients=tuple(r for r in settings.NOTIFICATION_RECIPIENTS if r),
            notification_sender=settings.DEFAULT_FROM_EMAIL,
            site_name=settings.SITE_NAME,
        )

    @property
    def notifications_enabled(self) -> bool:
        return bool(self.notification_recipients)


def get_lead_capture_settings() -> LeadCaptureSettings:
    """Return the settings constructed when the submissions app became ready."""
    return apps.get_app_config("submissions").lead_capture
