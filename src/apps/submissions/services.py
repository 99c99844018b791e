"""Submissions app services."""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor

from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string
from django.utils import timezone

from .conf import LeadCaptureSettings
from .models import Submission

logger = logging.getLogger(__name__)

NO_MESSAGE = "No additional message"

# Notifications are sent off the request path; nothing ever waits on them.
_notification_executor: ThreadPoolExecutor | None = None

# The executor queue is unbounded. Each queued send holds its Submission until
# delivery finishes (up to EMAIL_TIMEOUT), so a backlog this deep is logged.
BACKLOG_WARNING_THRESHOLD = 50
_pending_lock = threading.Lock()
_pending = 0


def _get_notification_executor() -> ThreadPoolExecutor:
    global _notification_executor
    if _notification_executor is None:
        _notification_executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="lead_notify")
    return _notification_executor


def send_submission_notification(submission: Submission, config: LeadCaptureSettings) -> None:
    """Email the configured recipients about a new lead. Raises if delivery fails."""
    submitted_at = timezone.localtime(timezone.now())
    message = submission.message or NO_MESSAGE

    subject = f"New Lead: {submission.business} - {config.site_name}"

    # Plain text version
    text_body = (
        f"New contact form submission received:\n\n"
        f"Name: {submission.name}\n"
        f"Business: {submission.business}\n"
        f"Service: {submission.service}\n"
        f"Phone: {submission.phone}\n"
        f"Message: {message}\n\n"
        f"Submission ID: {submission.pk}\n"
        f"Time: {submitted_at:%d/%m/%Y, %I:%M:%S %p}\n"
    )

    # HTML version
    html_body = render_to_string(
        "emails/submission_notification.html",
        {
            "submission": submission,
            "message": message,
            "submitted_at": submitted_at,
        },
    )

    msg = EmailMultiAlternatives(
        subject=subject,
        body=text_body,
        from_email=config.notification_sender,
        to=list(config.notification_recipients),
    )
    msg.attach_alternative(html_body, "text/html")
    msg.send(fail_silently=False)


def _deliver(submission: Submission, config: LeadCaptureSettings) -> None:
    global _pending
    try:
        send_submission_notification(submission, config)
        logger.info("Lead notification sent to %s for submission #%d", config.notification_recipients, submission.pk)
    except Exception:
        logger.exception("Failed to send lead notification for submission #%d", submission.pk)
    finally:
        with _pending_lock:
            _pending -= 1


def dispatch_submission_notification(submission: Submission, config: LeadCaptureSettings) -> Future | None:
    """
    Send the lead notification in the background.

    Returns the pending future, or ``None`` when notifications are not
    configured. The future always completes normally; delivery failures are
    only visible in the logs.
    """
    if not config.notifications_enabled:
        logger.info("No notification recipients configured, skipping notification for #%d.", submission.pk)
        return None

    global _pending
    with _pending_lock:
        _pending += 1
        backlog = _pending
    if backlog >= BACKLOG_WARNING_THRESHOLD:
        logger.warning("Lead notification backlog at %d pending sends", backlog)

    return _get_notification_executor().submit(_deliver, submission, config)
