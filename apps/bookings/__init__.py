"""Bookings: guest requests, host decisions and cancellations."""
