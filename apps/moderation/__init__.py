"""Admin moderation of listings, bookings and user accounts."""
