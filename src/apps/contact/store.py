"""Persistence of contact submissions."""

import logging

from django.db import DatabaseError
from django.utils import timezone

from .exceptions import StorageError
from .models import ContactSubmission

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 100


class SubmissionStore:
    """
    Async access to persisted contact submissions.

    Every call goes to the database; nothing is cached. Database failures
    are raised as ``StorageError``. ``mark_read`` and ``delete`` are no-ops
    for unknown ids.
    """

    model = ContactSubmission

    async def insert(
        self,
        *,
        name: str,
        email: str,
        subject: str,
        message: str,
        client_address: str,
    ) -> ContactSubmission:
        try:
            return await self.model.objects.acreate(
                name=name,
                email=email,
                subject=subject,
                message=message,
                client_address=client_address,
                is_read=False,
            )
        except DatabaseError as exc:
            logger.exception("Failed to store contact submission from %s", client_address)
            raise StorageError() from exc

    async def list(
        self,
        limit: int = DEFAULT_LIST_LIMIT,
        *,
        offset: int = 0,
        newest_first: bool = True,
        unread_only: bool = False,
    ) -> list[ContactSubmission]:
        ordering = ("-created_at", "-pk") if newest_first else ("created_at", "pk")
        qs = self.model.objects.order_by(*ordering)
        if unread_only:
            qs = qs.filter(is_read=False)
        try:
            return [submission async for submission in qs[offset : offset + limit]]
        except DatabaseError as exc:
            logger.exception("Failed to list contact submissions")
            raise StorageError("Could not load contact submissions") from exc

    async def count(self, *, unread_only: bool = False) -> int:
        qs = self.model.objects.all()
        if unread_only:
            qs = qs.filter(is_read=False)
        try:
            return await qs.acount()
        except DatabaseError as exc:
            logger.exception("Failed to count contact submissions")
            raise StorageError("Could not load contact submissions") from exc

    async def mark_read(self, pk: int) -> bool:
        """Set ``is_read`` on submission ``pk``. Returns whether anything changed."""
        try:
            updated = await self.model.objects.filter(pk=pk, is_read=False).aupdate(
                is_read=True,
                updated_at=timezone.now(),
            )
        except DatabaseError as exc:
            logger.exception("Failed to mark contact submission #%s as read", pk)
            raise StorageError("Could not update the contact submission") from exc
        return updated > 0

    async def delete(self, pk: int) -> bool:
        """Delete submission ``pk``. Returns whether a row was removed."""
        try:
            deleted, _ = await self.model.objects.filter(pk=pk).adelete()
        except DatabaseError as exc:
            logger.exception("Failed to delete contact submission #%s", pk)
            raise StorageError("Could not delete the contact submission") from exc
        return deleted > 0
