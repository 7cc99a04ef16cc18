"""DRF permission for the read-only admin article surface."""

from rest_framework import permissions


class IsArticleAdmin(permissions.BasePermission):
    """Authenticated staff only. Grants reads; article mutations stay owner-only."""

    def has_permission(self, request, view) -> bool:
        user = getattr(request, "user", None)
        return bool(user and user.is_authenticated and getattr(user, "is_staff", False))


__all__ = ["IsArticleAdmin"]
