"""Auth service: account registration, credential checks and bearer tokens."""

import logging

from django.contrib.auth.models import User
from django.db import IntegrityError, transaction
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

from core.exceptions import (
    ConflictError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 6


def _min_length_errors(**fields):
    errors = {}
    for name, (value, min_length) in fields.items():
        if not isinstance(value, str) or len(value) < min_length:
            errors[name] = [f"Ensure this field has at least {min_length} characters."]
    return errors


def register(username: str, password: str) -> User:
    """
    Create a user with a hashed password.

    No token is issued; callers sign in separately.
    """
    errors = _min_length_errors(
        username=(username, USERNAME_MIN_LENGTH),
        password=(password, PASSWORD_MIN_LENGTH),
    )
    if errors:
        raise ValidationError(errors)

    try:
        with transaction.atomic():
            user = User.objects.create_user(username=username, password=password)
    except IntegrityError as exc:
        raise ConflictError("A user with this username already exists.") from exc

    logger.info("Registered user %s", user.pk)
    return user


def authenticate(username: str, password: str) -> str:
    """Check credentials and return a signed access token for the user."""
    user = User.objects.filter(username=username).first()
    if user is None:
        raise NotFoundError("User not found")
    if not user.check_password(password):
        raise InvalidCredentialsError()
    return str(AccessToken.for_user(user))


def resolve_token(token: str) -> User:
    """Return the user a bearer token was issued to."""
    try:
        access = AccessToken(token)
    except TokenError as exc:
        raise InvalidTokenError() from exc

    user_id = access.get(api_settings.USER_ID_CLAIM)
    if user_id is None:
        raise InvalidTokenError("Invalid token payload")

    user = User.objects.filter(**{api_settings.USER_ID_FIELD: user_id}).first()
    if user is None:
        raise InvalidTokenError()
    return user
