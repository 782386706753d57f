"""API views for notifications."""

from __future__ import annotations

from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .serializers import NotificationSerializer
from .services import (
    NotificationError,
    get_unread_count,
    list_for_user,
    mark_all_as_read,
    mark_as_read,
)


class NotificationViewSet(viewsets.GenericViewSet):
    """Notifications of the authenticated user."""

    serializer_class = NotificationSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):  # type: ignore
        return list_for_user(self.request.user.id)

    def list(self, request):  # type: ignore
        notifications = self.get_queryset()
        return Response(
            {"success": True, "notifications": NotificationSerializer(notifications, many=True).data}
        )

    @action(detail=False, methods=["get"], url_path="unread-count")
    def unread_count(self, request):
        return Response({"success": True, "count": get_unread_count(request.user.id)})

    @action(detail=True, methods=["put", "post"])
    def read(self, request, pk=None):  # type: ignore
        try:
            notification = mark_as_read(int(pk), request.user.id)
        except NotificationError as e:
            return Response({"success": False, "message": e.message}, status=e.status_code)
        except (TypeError, ValueError):
            return Response(
                {"success": False, "message": "Notification not found"},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response({"success": True, "notification": NotificationSerializer(notification).data})

    @action(detail=False, methods=["post"], url_path="read-all")
    def read_all(self, request):
        updated = mark_all_as_read(request.user.id)
        return Response({"success": True, "updated": updated})
