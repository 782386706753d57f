"""Listings app package.

Rentable properties owned by hosts: publication status, pricing,
capacity, amenities and a view counter. Admin moderation of listings
lives in ``apps.moderation``.
"""
