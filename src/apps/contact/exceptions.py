"""Errors raised by the contact submission pipeline."""


class ContactError(Exception):
    """Base class for pipeline rejections that map to an HTTP status."""

    status_code = 500
    default_message = "Server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ContactError):
    """One or more fields failed validation."""

    status_code = 400
    default_message = "Invalid submission"

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(". ".join(self.errors))


class RateLimitError(ContactError):
    """The client sent too many submissions within the current window."""

    status_code = 429
    default_message = "Too many requests. Please wait before sending another message."


class StorageError(ContactError):
    """The submission could not be persisted; it was not accepted."""

    status_code = 500
    default_message = "Your message could not be saved. Please try again later."


class NotificationError(ContactError):
    """The notification email could not be sent. Logged only, never returned to the client."""

    default_message = "Notification could not be sent"
