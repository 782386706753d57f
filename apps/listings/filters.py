"""FilterSet definitions for listing search."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Listing


class ListingFilterSet(django_filters.FilterSet):
    """Filters used by the public listing feed."""

    location = django_filters.CharFilter(field_name="location", lookup_expr="icontains")
    category = django_filters.CharFilter(field_name="category", lookup_expr="iexact")
    price_min = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    price_max = django_filters.NumberFilter(field_name="price", lookup_expr="lte")
    guests = django_filters.NumberFilter(field_name="guests", lookup_expr="gte")
    bedrooms = django_filters.NumberFilter(field_name="bedrooms", lookup_expr="gte")

    class Meta:
        model = Listing
        fields = ["location", "category"]
