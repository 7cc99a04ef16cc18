"""Middleware that resolves the bearer access token into ``request.user``."""

from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed

from accounts.services import BlocklistUnavailable, TokenService

UNAUTHORIZED_MESSAGE = (
    "Authentication credentials were not provided or are invalid, token revoked, or user is inactive."
)


class JWTAuthMiddleware(MiddlewareMixin):
    """Anonymous without a bearer header; 401 for any token that fails to verify."""

    def process_request(self, request):  # type: ignore[override]
        auth_header = request.META.get("HTTP_AUTHORIZATION", "")
        if not auth_header.startswith("Bearer "):
            request.user = AnonymousUser()
            return None

        try:
            claims = TokenService.decode(auth_header.split(" ", 1)[1], expected_type="access")
            if not claims.get("jti") or TokenService.is_revoked(claims["jti"]):
                return _envelope_error(UNAUTHORIZED_MESSAGE, status.HTTP_401_UNAUTHORIZED)
        except AuthenticationFailed:
            return _envelope_error(UNAUTHORIZED_MESSAGE, status.HTTP_401_UNAUTHORIZED)
        except BlocklistUnavailable:
            return _envelope_error(
                "Authentication service unavailable (blocklist).", status.HTTP_503_SERVICE_UNAVAILABLE
            )

        user = get_user_model().objects.filter(pk=claims.get("sub")).first()
        if user is None or not user.is_active or not TokenService.matches_version(claims, user):
            return _envelope_error(UNAUTHORIZED_MESSAGE, status.HTTP_401_UNAUTHORIZED)

        request.user = user
        return None


def _envelope_error(message: str, status_code: int) -> JsonResponse:
    return JsonResponse({"data": None, "errors": [message]}, status=status_code)


__all__ = ["JWTAuthMiddleware"]
