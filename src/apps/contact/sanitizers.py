"""HTML escaping for user-supplied contact form text."""

from collections.abc import Mapping

# Order matters: "&" goes first so entities added below are not re-escaped.
HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#x27;"),
    ("/", "&#x2F;"),
)


def sanitize(value: str) -> str:
    """
    Escape HTML-significant characters in ``value``.

    Not idempotent: escaping already-escaped text escapes the ampersands
    again, so each field is sanitized exactly once, at ingestion.
    """
    for char, entity in HTML_ESCAPES:
        value = value.replace(char, entity)
    return value


def sanitize_fields(fields: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of ``fields`` with every value sanitized."""
    return {key: sanitize(value) for key, value in fields.items()}
