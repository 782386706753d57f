"""JWT authentication that refuses blocked accounts."""

from __future__ import annotations

from django.utils.translation import gettext_lazy as _  # type: ignore
from rest_framework_simplejwt.authentication import JWTAuthentication  # type: ignore
from rest_framework_simplejwt.exceptions import AuthenticationFailed  # type: ignore


class ActiveUserJWTAuthentication(JWTAuthentication):
    """Rejects tokens that belong to users blocked after the token was issued."""

    def get_user(self, validated_token):  # type: ignore
        user = super().get_user(validated_token)
        if getattr(user, "is_blocked", False):
            raise AuthenticationFailed(_("User account is blocked."), code="user_blocked")
        return user
