"""
Domain errors and the DRF exception handler that renders them.

Every handled error becomes the same JSON envelope:
{title, timestamp, status, exception, details}.
"""
import logging

from django.db import IntegrityError
from django.utils import timezone
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

BAD_REQUEST_TITLE = 'Bad Request! Consult the documentation'
CONFLICT_TITLE = 'Conflict! Consult the documentation'
CONFLICT_DETAIL = 'Customer already exists'


class BusinessException(Exception):
    """Raised when a credit or customer operation breaks a business rule."""


def qualified_name(exc) -> str:
    cls = type(exc)
    return f"{cls.__module__}.{cls.__qualname__}"


def validation_details(detail) -> dict:
    """Flatten serializer errors to {field: first message}."""
    if isinstance(detail, dict):
        return {
            field: str(messages[0]) if isinstance(messages, list) and messages else str(messages)
            for field, messages in detail.items()
        }
    if isinstance(detail, list):
        return {'non_field_errors': str(detail[0]) if detail else ''}
    return {'non_field_errors': str(detail)}


def error_response(exc, title: str, status_code: int, details: dict) -> Response:
    return Response(
        {
            'title': title,
            'timestamp': timezone.now().isoformat(),
            'status': status_code,
            'exception': qualified_name(exc),
            'details': details,
        },
        status=status_code,
    )


def credit_exception_handler(exc, context):
    view = context.get('view')
    view_name = type(view).__name__ if view is not None else '-'

    if isinstance(exc, ValidationError):
        logger.warning("%s: validation failed: %s", view_name, exc.detail)
        return error_response(
            exc, BAD_REQUEST_TITLE, status.HTTP_400_BAD_REQUEST, validation_details(exc.detail)
        )

    if isinstance(exc, IntegrityError):
        logger.warning("%s: integrity error: %s", view_name, exc)
        return error_response(
            exc, CONFLICT_TITLE, status.HTTP_409_CONFLICT, {'detail': CONFLICT_DETAIL}
        )

    if isinstance(exc, (BusinessException, ValueError)):
        logger.warning("%s: %s: %s", view_name, type(exc).__name__, exc)
        return error_response(
            exc, BAD_REQUEST_TITLE, status.HTTP_400_BAD_REQUEST, {'detail': str(exc)}
        )

    return exception_handler(exc, context)
