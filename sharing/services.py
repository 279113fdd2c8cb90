"""Sharing service: toggle a user's public link and resolve it for anonymous reads."""

import logging
import secrets
from typing import Optional, Tuple

from django.contrib.auth.models import User
from django.db import IntegrityError, transaction
from django.db.models import QuerySet

from content.services import list_content
from core.exceptions import ConflictError, NotFoundError
from .models import ShareLink

logger = logging.getLogger(__name__)

SHARE_HASH_LENGTH = 10


def generate_hash(length: int = SHARE_HASH_LENGTH) -> str:
    """Lowercase hex token drawn from the OS CSPRNG."""
    return secrets.token_hex((length + 1) // 2)[:length]


def _unused_hash() -> str:
    share_hash = generate_hash()
    while ShareLink.objects.filter(hash=share_hash).exists():
        share_hash = generate_hash()
    return share_hash


def set_sharing(user: User, enabled: bool) -> Tuple[Optional[ShareLink], bool]:
    """
    Turn the user's public link on or off.

    Enabling returns ``(share_link, created)``; an existing link is returned
    unchanged. Disabling deletes the link if there is one and returns
    ``(None, False)``.
    """
    if not enabled:
        deleted, _ = ShareLink.objects.filter(user=user).delete()
        if deleted:
            logger.info("Share link removed for user %s", user.pk)
        return None, False

    existing = ShareLink.objects.filter(user=user).first()
    if existing is not None:
        return existing, False

    try:
        with transaction.atomic():
            share_link = ShareLink.objects.create(user=user, hash=_unused_hash())
    except IntegrityError as exc:
        raise ConflictError("A share link for this user or hash already exists.") from exc

    logger.info("Share link created for user %s", user.pk)
    return share_link, True


def resolve_public(share_hash: str) -> Tuple[str, QuerySet]:
    """Return ``(username, content)`` for the owner of a share hash."""
    share_link = ShareLink.objects.filter(hash=share_hash).first()
    if share_link is None:
        raise NotFoundError("Invalid or expired link")

    owner = User.objects.filter(pk=share_link.user_id).first()
    if owner is None:
        raise NotFoundError("User associated with this link not found")

    return owner.username, list_content(owner)
