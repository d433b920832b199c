"""Field validation for contact form submissions."""

import re
from collections.abc import Mapping
from typing import Any

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 254
SUBJECT_MAX_LENGTH = 200
MESSAGE_MAX_LENGTH = 2000

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _text(data: Mapping[str, Any], field: str) -> str:
    value = data.get(field)
    return value.strip() if isinstance(value, str) else ""


def validate_submission(data: Mapping[str, Any]) -> list[str]:
    """
    Check a raw submission and return every violated rule.

    Rules are checked in a fixed order (name, email, message, subject) and
    all of them are evaluated, so the caller can show every mistake at once.
    An empty list means the submission is valid. Non-string values count as
    missing.
    """
    errors: list[str] = []

    name = _text(data, "name")
    if not name:
        errors.append("Name is required")
    elif len(name) > NAME_MAX_LENGTH:
        errors.append(f"Name must be at most {NAME_MAX_LENGTH} characters")

    email = _text(data, "email")
    if not email:
        errors.append("Email is required")
    elif not EMAIL_PATTERN.match(email):
        errors.append("Email address is not valid")
    elif len(email) > EMAIL_MAX_LENGTH:
        errors.append(f"Email must be at most {EMAIL_MAX_LENGTH} characters")

    message = _text(data, "message")
    if not message:
        errors.append("Message is required")
    elif len(message) > MESSAGE_MAX_LENGTH:
        errors.append(f"Message must be at most {MESSAGE_MAX_LENGTH} characters")

    subject = _text(data, "subject")
    if subject and len(subject) > SUBJECT_MAX_LENGTH:
        errors.append(f"Subject must be at most {SUBJECT_MAX_LENGTH} characters")

    return errors
