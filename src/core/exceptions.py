"""Project exception handler: envelope errors and translate article outcomes.

Article lifecycle functions raise domain exceptions rather than HTTP ones.
This is the single place where they become responses:

- ``ArticlePermissionDenied`` -> silent 302 to the dashboard,
- ``ArticleNotFound`` -> 404 (missing and concealed records look the same),
- ``ArticleValidationError`` -> 400 with field-level messages.
"""

import logging
from typing import Any

from django.conf import settings
from django.db import DatabaseError
from django.http import HttpResponseRedirect
from django.urls import reverse
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed, NotAuthenticated, NotFound, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from accounts.services import BlocklistUnavailable
from articles.exceptions import ArticleNotFound, ArticlePermissionDenied, ArticleValidationError

logger = logging.getLogger(__name__)

DENIAL_REDIRECT_URL_NAME = "dashboard"


def _normalize_errors(payload: Any) -> list[Any]:
    """Convert DRF's ``response.data`` into a list for the envelope."""

    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and "detail" in payload:
        return [payload["detail"]]
    return [payload]


def custom_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | HttpResponseRedirect | None:
    """Wrap DRF errors in ``{"data": null, "errors": [...]}``."""

    if isinstance(exc, ArticlePermissionDenied):
        return HttpResponseRedirect(reverse(DENIAL_REDIRECT_URL_NAME))
    if isinstance(exc, ArticleNotFound):
        exc = NotFound()
    elif isinstance(exc, ArticleValidationError):
        exc = ValidationError(exc.errors)

    if isinstance(exc, BlocklistUnavailable):
        return Response(
            {"data": None, "errors": ["Authentication service unavailable (blocklist)."]},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    if isinstance(exc, DatabaseError):
        logger.error("Database error while handling %s: %s", context.get("view").__class__.__name__, exc)
        return Response(
            {"data": None, "errors": ["Service temporarily unavailable."]},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    response = drf_exception_handler(exc, context)
    if response is None:
        return response

    if isinstance(exc, (AuthenticationFailed, NotAuthenticated)):
        response.status_code = status.HTTP_401_UNAUTHORIZED

    if response.status_code >= 400:
        if response.status_code == status.HTTP_401_UNAUTHORIZED and not getattr(
            settings, "DEBUG_AUTH_ERRORS", False
        ):
            errors = [
                "Authentication credentials were not provided or are invalid, "
                "token revoked, or user is inactive."
            ]
        elif response.status_code == status.HTTP_403_FORBIDDEN:
            errors = ["You do not have permission to perform this action on this resource."]
        else:
            errors = _normalize_errors(response.data)

        response.data = {"data": None, "errors": errors}

    return response
