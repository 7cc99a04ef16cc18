"""Account endpoints: register, login, refresh, logout and profile."""

from typing import Any

from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.response import BaseAPIView, api_response
from .serializers import LoginSerializer, RegisterSerializer, UserDetailSerializer
from .services import TokenService

User = get_user_model()


class RegisterView(BaseAPIView):
    permission_classes: list[Any] = []

    # noinspection PyMethodMayBeStatic
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        return api_response(UserDetailSerializer(user).data, status=status.HTTP_201_CREATED)


class LoginView(BaseAPIView):
    permission_classes: list[Any] = []

    # noinspection PyMethodMayBeStatic
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        tokens = TokenService.issue_pair(serializer.validated_data["user"])
        return api_response(tokens._asdict())


class RefreshView(BaseAPIView):
    permission_classes: list[Any] = []

    # noinspection PyMethodMayBeStatic
    def post(self, request):
        """Trade a refresh token for a new pair; the old version must still be current."""
        token = request.data.get("refresh")
        if not token:
            raise AuthenticationFailed("Refresh token required")

        claims = TokenService.decode(token, expected_type="refresh")
        user = _get_active_user(claims.get("sub"))
        if user is None or not TokenService.matches_version(claims, user):
            raise AuthenticationFailed("Invalid or revoked refresh token")
        return api_response(TokenService.issue_pair(user)._asdict())


class LogoutView(BaseAPIView):
    permission_classes = [IsAuthenticated]

    # noinspection PyMethodMayBeStatic
    def post(self, request):
        """Blocklist the bearer access token used for this request."""
        token = _get_bearer_token(request)
        if token:
            TokenService.revoke(TokenService.decode(token, expected_type="access"))
        # 204 responses must not include a body.
        return Response(status=status.HTTP_204_NO_CONTENT)


class LogoutAllView(BaseAPIView):
    permission_classes = [IsAuthenticated]

    # noinspection PyMethodMayBeStatic
    def post(self, request):
        """Bump token_version so every token issued so far stops working, then blocklist this one."""
        user = request.user
        user.token_version += 1
        user.save(update_fields=["token_version"])

        token = _get_bearer_token(request)
        if token:
            TokenService.revoke(TokenService.decode(token, expected_type="access"))
        return Response(status=status.HTTP_204_NO_CONTENT)


class MeView(BaseAPIView):
    permission_classes = [IsAuthenticated]

    # noinspection PyMethodMayBeStatic
    def get(self, request):
        return api_response(UserDetailSerializer(request.user).data)


def _get_active_user(user_id):
    if not user_id:
        return None
    return User.objects.filter(pk=user_id, is_active=True).first()


def _get_bearer_token(request) -> str | None:
    auth_header = request.META.get("HTTP_AUTHORIZATION", "")
    if auth_header.startswith("Bearer "):
        return auth_header.split(" ", 1)[1]
    return None


__all__ = ["RegisterView", "LoginView", "RefreshView", "LogoutView", "LogoutAllView", "MeView"]
