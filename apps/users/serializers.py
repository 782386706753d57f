"""Serializers for user-related API endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from django.contrib.auth.password_validation import validate_password  # type: ignore
from rest_framework import serializers  # type: ignore

from .models import PHONE_VALIDATOR

User = get_user_model()


class UserSummarySerializer(serializers.ModelSerializer):
    """Short user card embedded in bookings and listings."""

    class Meta:
        model = User
        fields = ["id", "name", "email", "phone", "avatar"]


class UserSerializer(serializers.ModelSerializer):
    """Main user serializer."""

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "name",
            "username",
            "phone",
            "role",
            "avatar",
            "bio",
            "is_verified",
            "is_blocked",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "email",
            "role",
            "is_verified",
            "is_blocked",
            "created_at",
            "updated_at",
        ]


class ProfileUpdateSerializer(serializers.ModelSerializer):
    """Fields a user may change on their own profile."""

    phone = serializers.CharField(validators=[PHONE_VALIDATOR], required=False, allow_blank=True)

    class Meta:
        model = User
        fields = ["name", "username", "phone", "avatar", "bio"]
        extra_kwargs = {
            "name": {"required": False},
            "username": {"required": False},
            "avatar": {"required": False},
            "bio": {"required": False},
        }


class ChangePasswordSerializer(serializers.Serializer):
    current_password = serializers.CharField(write_only=True)
    new_password = serializers.CharField(write_only=True, min_length=8)

    def validate_current_password(self, value: str) -> str:
        user = self.context["request"].user
        if not user.check_password(value):
            raise serializers.ValidationError("Current password is incorrect.")
        return value

    def validate_new_password(self, value: str) -> str:
        validate_password(value, user=self.context["request"].user)
        return value

    def save(self, **kwargs):  # type: ignore
        user = self.context["request"].user
        user.set_password(self.validated_data["new_password"])
        user.save(update_fields=["password", "updated_at"])
        return user
