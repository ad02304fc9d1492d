"""
Domain errors shared by the service layer and the project-wide DRF exception handler.

Services raise these directly; because they are ``APIException`` subclasses DRF turns
them into responses with the right status code without per-view try/except blocks.
"""

import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)


class DomainError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request."
    default_code = "invalid"


class ItemNotFound(DomainError):
    default_detail = "Menu item not found."
    default_code = "item_not_found"


class ItemUnavailable(DomainError):
    default_detail = "Menu item is not available."
    default_code = "item_unavailable"


class InsufficientStock(DomainError):
    default_detail = "Insufficient stock."
    default_code = "insufficient_stock"


class InvalidState(DomainError):
    default_detail = "Operation not allowed in the current state."
    default_code = "invalid_state"


class Conflict(DomainError):
    default_detail = "Resource already exists."
    default_code = "conflict"


class InvalidCredentials(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid email or password."
    default_code = "invalid_credentials"


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.error("Unhandled error in %s", view.__class__.__name__ if view else "unknown view", exc_info=exc)
    set_rollback()
    return Response({"detail": "Internal server error."}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
