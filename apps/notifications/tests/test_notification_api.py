"""API tests for notification endpoints."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.notifications.models import Notification
from apps.users.models import User


class NotificationAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(email="reader@example.com", password="ReaderPass123")
        self.other = User.objects.create_user(email="other@example.com", password="OtherPass123")
        self.first = Notification.objects.create(user=self.user, title="One", message="1")
        self.second = Notification.objects.create(user=self.user, title="Two", message="2")
        self.foreign = Notification.objects.create(user=self.other, title="Three", message="3")
        self.client.force_authenticate(self.user)

    def test_list_only_own(self) -> None:
        response = self.client.get(reverse("notification-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        ids = [item["id"] for item in response.data["notifications"]]
        self.assertEqual(ids, [self.second.id, self.first.id])

    def test_unread_count(self) -> None:
        response = self.client.get(reverse("notification-unread-count"))
        self.assertEqual(response.data, {"success": True, "count": 2})

    def test_mark_read_with_put(self) -> None:
        response = self.client.put(reverse("notification-read", args=[self.first.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertTrue(response.data["notification"]["is_read"])
        self.assertEqual(self.client.get(reverse("notification-unread-count")).data["count"], 1)

    def test_mark_read_is_idempotent(self) -> None:
        url = reverse("notification-read", args=[self.first.id])
        self.client.post(url)
        response = self.client.post(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["notification"]["is_read"])

    def test_mark_foreign_notification(self) -> None:
        response = self.client.put(reverse("notification-read", args=[self.foreign.id]))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["message"], "Not authorized")

    def test_mark_missing_notification(self) -> None:
        response = self.client.put(reverse("notification-read", args=[424242]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_read_all(self) -> None:
        response = self.client.post(reverse("notification-read-all"))

        self.assertEqual(response.data["updated"], 2)
        self.foreign.refresh_from_db()
        self.assertFalse(self.foreign.is_read)

    def test_requires_authentication(self) -> None:
        self.client.force_authenticate(None)
        response = self.client.get(reverse("notification-list"))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
