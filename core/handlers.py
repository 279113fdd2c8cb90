import logging

from django.db import IntegrityError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from .exceptions import ConflictError

logger = logging.getLogger(__name__)


def _flatten_errors(detail, path=()):
    """Turn DRF's nested error detail into a flat list of {path, message}."""
    if isinstance(detail, dict):
        errors = []
        for key, value in detail.items():
            sub_path = path if key == "non_field_errors" else path + (key,)
            errors.extend(_flatten_errors(value, sub_path))
        return errors
    if isinstance(detail, list):
        # A list of ErrorDetail is a set of messages for one field;
        # anything else is positional (e.g. per-item errors of a ListField).
        if all(not isinstance(item, (dict, list)) for item in detail):
            return [{"path": list(path), "message": str(item)} for item in detail]
        errors = []
        for index, item in enumerate(detail):
            if item:
                errors.extend(_flatten_errors(item, path + (index,)))
        return errors
    return [{"path": list(path), "message": str(detail)}]


def exception_handler(exc, context):
    if isinstance(exc, IntegrityError):
        exc = ConflictError()

    response = drf_exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception("Unhandled error in %s", view.__class__.__name__ if view else "request")
        return Response(
            {"message": "Internal Server Error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        response.data = {
            "message": "Invalid input",
            "errors": _flatten_errors(exc.detail),
        }
        return response

    # Http404 and Django's PermissionDenied arrive here already translated by DRF
    detail = response.data.get("detail") if isinstance(response.data, dict) else response.data
    response.data = {"message": str(detail)}
    return response
