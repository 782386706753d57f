"""URL routing for the wishlist."""

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import WishlistViewSet

router = SimpleRouter()
router.register(r"", WishlistViewSet, basename="wishlist")

urlpatterns = [path("", include(router.urls))]
