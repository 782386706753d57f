"""User API views."""

from __future__ import annotations

from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .serializers import ChangePasswordSerializer, ProfileUpdateSerializer, UserSerializer


class UserViewSet(viewsets.GenericViewSet):
    """Profile of the authenticated user.

    - `me` returns (GET) or updates (PATCH) the current profile
    - `change-password` replaces the password after checking the current one
    """

    serializer_class = UserSerializer
    permission_classes = [permissions.IsAuthenticated]

    @action(detail=False, methods=["get", "patch"])
    def me(self, request):
        if request.method == "PATCH":
            serializer = ProfileUpdateSerializer(request.user, data=request.data, partial=True)
            serializer.is_valid(raise_exception=True)
            serializer.save()
            return Response(
                {
                    "success": True,
                    "message": "Profile updated",
                    "user": UserSerializer(request.user).data,
                }
            )
        return Response({"success": True, "user": UserSerializer(request.user).data})

    @action(detail=False, methods=["post"], url_path="change-password")
    def change_password(self, request):
        serializer = ChangePasswordSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(
            {"success": True, "message": "Password changed successfully"},
            status=status.HTTP_200_OK,
        )
