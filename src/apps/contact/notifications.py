"""Email notification of new contact submissions."""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string

from .exceptions import NotificationError
from .models import ContactSubmission

logger = logging.getLogger(__name__)

MAIL_WORKERS = 4


class EmailNotifier:
    """
    Sends the team an email for each accepted submission.

    The email carries the stored (escaped) submission fields; ``Reply-To`` is
    the sender's original address so "Reply" goes straight to them.
    """

    def __init__(self, *, recipients: list[str] | None = None, enabled: bool | None = None) -> None:
        self._recipients = recipients
        self._enabled = enabled
        # Owned pool: a hung send must not be joined when the request's event loop shuts down.
        self._executor = ThreadPoolExecutor(max_workers=MAIL_WORKERS, thread_name_prefix="contact-mail")

    @property
    def recipients(self) -> list[str]:
        if self._recipients is not None:
            return list(self._recipients)
        return list(getattr(settings, "CONTACT_NOTIFICATION_EMAILS", []))

    @property
    def enabled(self) -> bool:
        if self._enabled is not None:
            return self._enabled
        return getattr(settings, "CONTACT_NOTIFICATIONS_ENABLED", False)

    @property
    def is_configured(self) -> bool:
        return self.enabled and bool(self.recipients)

    def build_message(self, submission: ContactSubmission, reply_to: str) -> EmailMultiAlternatives:
        dashboard_url = f"{settings.SITE_URL}/admin/contact/contactsubmission/{submission.pk}/change/"
        text_body = (
            f"New contact form submission received:\n\n"
            f"Name: {submission.name}\n"
            f"Email: {submission.email}\n"
            f"Subject: {submission.subject}\n"
            f"Message:\n{submission.message}\n\n"
            f"Submitted: {submission.created_at:%Y-%m-%d %H:%M}\n\n"
            f"View in admin: {dashboard_url}\n"
        )
        html_body = render_to_string(
            "emails/contact_notification.html",
            {"submission": submission, "dashboard_url": dashboard_url},
        )
        msg = EmailMultiAlternatives(
            subject=f"New contact submission from {submission.name}",
            body=text_body,
            from_email=settings.DEFAULT_FROM_EMAIL,
            to=self.recipients,
            reply_to=[reply_to],
        )
        msg.attach_alternative(html_body, "text/html")
        return msg

    async def send(self, submission: ContactSubmission, reply_to: str) -> bool:
        """
        Email the team about ``submission``.

        Returns False without sending when outbound mail is not configured.
        Raises NotificationError if the mail backend fails.
        """
        if not self.is_configured:
            logger.info("Outbound mail not configured, skipping notification for submission #%d", submission.pk)
            return False

        msg = self.build_message(submission, reply_to)
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(self._executor, lambda: msg.send(fail_silently=False))
        except Exception as exc:
            raise NotificationError(f"Failed to send notification for submission #{submission.pk}: {exc}") from exc

        logger.info("Contact notification sent to %s for submission #%d", self.recipients, submission.pk)
        return True
