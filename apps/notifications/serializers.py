"""Serializers for notifications."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    """Shape shared by the REST API and the ``notification`` push event."""

    class Meta:
        model = Notification
        fields = ["id", "type", "title", "message", "data", "priority", "is_read", "created_at"]
        read_only_fields = fields
