"""API tests for the profile endpoints."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import User


class ProfileAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(
            email="me@example.com",
            password="OldPassword123",
            name="Old Name",
        )
        self.client.force_authenticate(self.user)

    def test_me_requires_authentication(self) -> None:
        self.client.force_authenticate(None)
        response = self.client.get(reverse("user-me"))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_get_profile(self) -> None:
        response = self.client.get(reverse("user-me"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["user"]["email"], "me@example.com")

    def test_update_profile_ignores_role(self) -> None:
        response = self.client.patch(
            reverse("user-me"),
            {"name": "New Name", "bio": "Traveller", "role": "admin"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.user.refresh_from_db()
        self.assertEqual(self.user.name, "New Name")
        self.assertEqual(self.user.bio, "Traveller")
        self.assertEqual(self.user.role, User.RoleChoices.GUEST)

    def test_change_password(self) -> None:
        response = self.client.post(
            reverse("user-change-password"),
            {"current_password": "OldPassword123", "new_password": "BrandNewPass456"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password("BrandNewPass456"))

    def test_change_password_with_wrong_current(self) -> None:
        response = self.client.post(
            reverse("user-change-password"),
            {"current_password": "nope", "new_password": "BrandNewPass456"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password("OldPassword123"))
