"""URL routing for the admin moderation API."""

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import BookingModerationViewSet, ListingModerationViewSet, UserModerationView

router = SimpleRouter()
router.register(r"listings", ListingModerationViewSet, basename="moderation-listing")
router.register(r"bookings", BookingModerationViewSet, basename="moderation-booking")

urlpatterns = [
    path("users/<int:user_id>/<str:action_name>/", UserModerationView.as_view(), name="moderation-user"),
    path("", include(router.urls)),
]
