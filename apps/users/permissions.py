"""Role-based permission classes shared by the domain apps."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore


def is_platform_admin(user) -> bool:
    if not user or not user.is_authenticated:
        return False
    if getattr(user, "is_staff", False) or getattr(user, "is_superuser", False):
        return True
    return hasattr(user, "is_admin") and user.is_admin()


class IsPlatformAdmin(permissions.BasePermission):
    """Only admins (role ``admin`` or Django staff) may pass."""

    message = "Admin access required"

    def has_permission(self, request, view) -> bool:  # type: ignore
        return is_platform_admin(request.user)


class IsOwnerOrAdmin(permissions.BasePermission):
    """
    Object-level permission for resources owned through ``host_id``.

    Safe methods are left to the queryset scoping of the view.
    """

    def has_object_permission(self, request, view, obj) -> bool:  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        user = request.user
        if not user.is_authenticated:
            return False
        if is_platform_admin(user):
            return True
        return getattr(obj, "host_id", None) == user.id
