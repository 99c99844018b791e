"""Pytest fixtures for the lead-capture tests."""

from datetime import timedelta
from unittest.mock import patch

import pytest
from django.conf import settings
from django.utils import timezone

from apps.submissions.conf import LeadCaptureSettings
from apps.submissions.models import Submission


@pytest.fixture
def api_headers() -> dict[str, str]:
    """Headers carrying the configured API key."""
    return {"x-api-key": settings.API_KEY}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Headers carrying the admin bearer token."""
    return {"Authorization": f"Bearer {settings.ADMIN_PASSWORD}"}


@pytest.fixture
def lead_capture() -> LeadCaptureSettings:
    """Standalone settings for unit tests that should not depend on Django settings."""
    return LeadCaptureSettings(
        api_key="unit-api-key",
        admin_password="unit-admin-password",
        notification_recipients=("owner@example.com",),
        notification_sender="leads@example.com",
        site_name="MarketBloom Studio",
    )


@pytest.fixture
def notifier():
    """Replace the background notifier so no mail leaves the request path."""
    with patch("apps.submissions.services.dispatch_submission_notification") as mock:
        yield mock


@pytest.fixture
def make_submission(db):
    """Factory creating submissions, optionally backdated by ``age``."""

    def _make(age: timedelta | None = None, **overrides) -> Submission:
        fields = {
            "name": "Asha Verma",
            "business": "Verma Bakes",
            "service": "Social Media",
            "phone": "+91 98765 43210",
        }
        fields.update(overrides)
        submission = Submission.objects.create(**fields)
        if age is not None:
            submission.timestamp = timezone.now() - age
            Submission.objects.filter(pk=submission.pk).update(timestamp=submission.timestamp)
        return submission

    return _make
