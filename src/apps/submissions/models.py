"""Submissions app models."""

from typing import ClassVar

from django.db import models

DEFAULT_STATUS = "new"


class Submission(models.Model):
    """A lead captured through the public contact form."""

    name = models.TextField()
    business = models.TextField()
    service = models.TextField()
    phone = models.TextField()
    message = models.TextField(blank=True, default="")
    timestamp = models.DateTimeField(auto_now_add=True, db_index=True)
    status = models.CharField(max_length=32, default=DEFAULT_STATUS)

    class Meta:
        db_table = "submissions"
        ordering: ClassVar[list[str]] = ["-timestamp", "-id"]
        verbose_name = "submission"
        verbose_name_plural = "submissions"

    def __str__(self) -> str:
        return f"{self.name} - {self.business} ({self.timestamp:%Y-%m-%d})"
