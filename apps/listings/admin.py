"""Admin registration for listings."""

from __future__ import annotations

from django.contrib import admin

from .models import Listing


@admin.register(Listing)
class ListingAdmin(admin.ModelAdmin):
    list_display = ("title", "host", "location", "price", "status", "views", "created_at")
    list_filter = ("status", "category")
    search_fields = ("title", "location", "host__email")
    readonly_fields = ("views", "created_at", "updated_at")
