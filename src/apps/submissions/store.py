"""Queries against the submissions table.

These are the only three operations the API performs on the store. Database
errors propagate to the caller, which decides how to report them.
"""

from .models import Submission

SUBMISSION_FIELDS = ("id", "name", "business", "service", "phone", "message", "timestamp", "status")


async def create_submission(*, name: str, business: str, service: str, phone: str, message: str = "") -> Submission:
    """Insert a submission and return it with its generated id."""
    return await Submission.objects.acreate(
        name=name,
        business=business,
        service=service,
        phone=phone,
        message=message or "",
    )


async def list_submissions() -> list[dict]:
    """Return every submission, most recent first."""
    queryset = Submission.objects.order_by("-timestamp", "-id").values(*SUBMISSION_FIELDS)
    return [row async for row in queryset]


async def delete_submission(submission_id: int) -> bool:
    """Delete a submission by id. Returns False when no row matched."""
    deleted, _ = await Submission.objects.filter(pk=submission_id).adelete()
    return deleted > 0
