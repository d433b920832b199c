"""Contact app models."""

from typing import ClassVar

from django.db import models

DEFAULT_SUBJECT = "New contact message"


class ContactSubmission(models.Model):
    """
    Stores contact form submissions.

    Text fields hold HTML-escaped text. Length bounds apply to the raw input
    and are enforced before escaping, which can lengthen the stored value.
    """

    name = models.TextField()
    email = models.TextField()
    subject = models.TextField(default=DEFAULT_SUBJECT)
    message = models.TextField()
    client_address = models.CharField(max_length=255, blank=True, default="")
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering: ClassVar[list[str]] = ["-created_at"]
        verbose_name = "contact submission"
        verbose_name_plural = "contact submissions"

    def __str__(self) -> str:
        return f"{self.name} - {self.email} ({self.created_at:%Y-%m-%d})"

    def as_dict(self) -> dict:
        """Serialise for the admin API."""
        return {
            "id": self.pk,
            "name": self.name,
            "email": self.email,
            "subject": self.subject,
            "message": self.message,
            "clientAddress": self.client_address,
            "createdAt": self.created_at.isoformat(),
            "read": self.is_read,
        }
