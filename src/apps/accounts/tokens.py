"""Signed bearer tokens for the admin API.

Tokens are produced with Django's ``TimestampSigner`` (HMAC-SHA256 keyed by
``SECRET_KEY``) over the user's primary key, so verifying one needs no
server-side session state. Tokens stop working after ``ADMIN_TOKEN_MAX_AGE``
seconds, or as soon as the user loses admin rights or is deactivated.
"""

import logging

from django.conf import settings
from django.core import signing

from .models import User

logger = logging.getLogger(__name__)

TOKEN_SALT = "apps.accounts.admin-token"


def _signer() -> signing.TimestampSigner:
    return signing.TimestampSigner(salt=TOKEN_SALT)


def issue_token(user: User) -> str:
    """Return a signed admin API token for ``user``."""
    return _signer().sign_object({"uid": user.pk})


def read_token(token: str) -> int | None:
    """Return the user id carried by ``token``, or None if it is invalid or expired."""
    try:
        payload = _signer().unsign_object(token, max_age=settings.ADMIN_TOKEN_MAX_AGE)
    except signing.SignatureExpired:
        logger.info("Rejected expired admin token")
        return None
    except signing.BadSignature:
        return None
    uid = payload.get("uid") if isinstance(payload, dict) else None
    return uid if isinstance(uid, int) else None


async def get_token_user(token: str) -> User | None:
    """Resolve ``token`` to an active admin user."""
    uid = read_token(token)
    if uid is None:
        return None
    user = await User.objects.filter(pk=uid).afirst()
    if user is None or not user.can_use_admin_api:
        return None
    return user


async def is_authorized(token: str) -> bool:
    """Whether ``token`` belongs to an active user allowed to use the admin API."""
    return await get_token_user(token) is not None
