"""Listing API views."""

from __future__ import annotations

from django.db.models import Q  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.filters import OrderingFilter  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.permissions import IsOwnerOrAdmin, is_platform_admin

from .filters import ListingFilterSet
from .models import Listing
from .serializers import ListingSerializer, ListingWriteSerializer, TrendingListingSerializer
from .services import create_listing, trending_listings


class ListingViewSet(viewsets.ModelViewSet):
    """Viewset for browsing and managing listings.

    Anonymous users and guests see live listings only; hosts additionally
    see their own listings in any status; admins see everything.
    """

    queryset = Listing.objects.select_related("host")
    permission_classes = [permissions.IsAuthenticatedOrReadOnly, IsOwnerOrAdmin]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = ListingFilterSet
    ordering_fields = ["price", "created_at", "views", "rating"]
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]

    def get_serializer_class(self):  # type: ignore
        if self.action in {"create", "partial_update"}:
            return ListingWriteSerializer
        if self.action == "trending":
            return TrendingListingSerializer
        return ListingSerializer

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()
        user = self.request.user
        if self.action == "list":
            return qs.filter(status=Listing.Status.LIVE)
        if is_platform_admin(user):
            return qs
        if user.is_authenticated:
            return qs.filter(Q(status=Listing.Status.LIVE) | Q(host=user))
        return qs.filter(status=Listing.Status.LIVE)

    def retrieve(self, request, *args, **kwargs):  # type: ignore
        listing = self.get_object()
        listing.register_view()
        return Response(ListingSerializer(listing).data)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = ListingWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        listing = create_listing(request.user, serializer.validated_data)
        return Response(
            {"success": True, "message": "Listing created", "listing": ListingSerializer(listing).data},
            status=status.HTTP_201_CREATED,
        )

    def partial_update(self, request, *args, **kwargs):  # type: ignore
        listing = self.get_object()
        serializer = ListingWriteSerializer(listing, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response({"success": True, "listing": ListingSerializer(listing).data})

    def destroy(self, request, *args, **kwargs):  # type: ignore
        listing = self.get_object()
        listing.delete()
        return Response({"success": True, "message": "Listing deleted"}, status=status.HTTP_200_OK)

    @action(detail=False, methods=["get"], permission_classes=[permissions.IsAuthenticated])
    def mine(self, request):
        """Listings owned by the current user, in any status."""
        qs = Listing.objects.filter(host=request.user).order_by("-created_at")
        return Response({"success": True, "listings": ListingSerializer(qs, many=True).data})

    @action(detail=False, methods=["get"], permission_classes=[permissions.AllowAny])
    def trending(self, request):
        listings = trending_listings()
        return Response(
            {"success": True, "listings": TrendingListingSerializer(listings, many=True).data}
        )
