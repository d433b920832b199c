"""
Contact submission ingestion pipeline.

A submission moves through fixed stages::

    RECEIVED -> RATE_CHECKED -> VALIDATED -> SANITIZED -> PERSISTED -> NOTIFIED

and is rejected (``ContactError``) at the first failing checkpoint. Rate
limiting and validation run before any side effect. A storage failure means
the submission was not accepted. Once the submission is persisted the request
succeeds: the notification is attempted under a timeout and its outcome is
only logged.
"""

import asyncio
import enum
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import NotificationError, RateLimitError, ValidationError
from .models import DEFAULT_SUBJECT, ContactSubmission
from .notifications import EmailNotifier
from .rate_limiting import FixedWindowRateLimiter
from .sanitizers import sanitize_fields
from .store import SubmissionStore
from .validators import validate_submission

logger = logging.getLogger(__name__)

DEFAULT_NOTIFICATION_TIMEOUT = 10.0  # seconds


class Stage(enum.Enum):
    RECEIVED = "received"
    RATE_CHECKED = "rate_checked"
    VALIDATED = "validated"
    SANITIZED = "sanitized"
    PERSISTED = "persisted"
    NOTIFIED = "notified"
    REJECTED = "rejected"


@dataclass
class PipelineResult:
    """Outcome of an accepted submission."""

    submission: ContactSubmission
    stage: Stage
    notified: bool = False


class ContactPipeline:
    """Runs a raw contact form payload through every ingestion stage."""

    def __init__(
        self,
        *,
        rate_limiter: FixedWindowRateLimiter,
        store: SubmissionStore,
        notifier: EmailNotifier,
        notification_timeout: float = DEFAULT_NOTIFICATION_TIMEOUT,
    ) -> None:
        self.rate_limiter = rate_limiter
        self.store = store
        self.notifier = notifier
        self.notification_timeout = notification_timeout

    async def submit(self, payload: Mapping[str, Any], client_address: str) -> PipelineResult:
        """
        Accept or reject one submission.

        Raises RateLimitError, ValidationError or StorageError on rejection.
        """
        if not self.rate_limiter.check(client_address):
            logger.warning("Contact form rate limit exceeded for %s", client_address)
            raise RateLimitError()

        errors = validate_submission(payload)
        if errors:
            logger.info("Rejected contact submission from %s: %s", client_address, "; ".join(errors))
            raise ValidationError(errors)

        raw = {
            "name": payload["name"].strip(),
            "email": payload["email"].strip(),
            "subject": _optional_text(payload.get("subject")) or DEFAULT_SUBJECT,
            "message": payload["message"].strip(),
        }
        clean = sanitize_fields(raw)

        submission = await self.store.insert(client_address=client_address, **clean)
        logger.info("Accepted contact submission #%d from %s", submission.pk, client_address)

        notified = await self._notify(submission, reply_to=raw["email"])
        return PipelineResult(
            submission=submission,
            stage=Stage.NOTIFIED if notified else Stage.PERSISTED,
            notified=notified,
        )

    async def _notify(self, submission: ContactSubmission, *, reply_to: str) -> bool:
        try:
            return await asyncio.wait_for(
                self.notifier.send(submission, reply_to),
                timeout=self.notification_timeout,
            )
        except TimeoutError:
            logger.error(
                "Contact notification for submission #%d timed out after %ss",
                submission.pk,
                self.notification_timeout,
            )
        except NotificationError as exc:
            logger.error("%s", exc.message)
        except Exception:
            logger.exception("Unexpected error notifying about submission #%d", submission.pk)
        return False


def _optional_text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""
