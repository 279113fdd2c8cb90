"""Content service: owner-scoped create, list and delete."""

from typing import Iterable, List, Optional, Union

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import URLValidator
from django.db.models import QuerySet

from core.exceptions import NotFoundError, ValidationError
from .models import Content

_validate_url = URLValidator()


def _is_blank_body(body) -> bool:
    if isinstance(body, str):
        return not body
    if isinstance(body, list):
        return not body or not all(isinstance(item, str) for item in body)
    return True


def create_content(
    user,
    title: str,
    body: Union[str, List[str]],
    type: str,
    tags: Optional[Iterable[str]] = None,
    link: Optional[str] = None,
) -> Content:
    errors = {}
    if not title:
        errors["title"] = ["Title is required"]
    if _is_blank_body(body):
        errors["body"] = ["Body must be a non-empty string or list of strings"]
    if not type:
        errors["type"] = ["Type is required"]

    link = link or None
    if link is not None:
        try:
            _validate_url(link)
        except DjangoValidationError:
            errors["link"] = ["Enter a valid URL."]

    if errors:
        raise ValidationError(errors)

    return Content.objects.create(
        user=user,
        title=title,
        body=body,
        type=type,
        tags=list(tags or []),
        link=link,
    )


def list_content(user) -> QuerySet:
    """All of the user's content, newest first."""
    return Content.objects.filter(user=user).order_by("-created_at", "-id")


def delete_content(user, content_id) -> None:
    # Missing and not-owned raise the same NotFoundError.
    try:
        pk = int(content_id)
    except (TypeError, ValueError):
        pk = None

    deleted = 0
    if pk is not None:
        deleted, _ = Content.objects.filter(pk=pk, user=user).delete()
    if not deleted:
        raise NotFoundError("Content not found or you do not have permission to delete")
