"""Saved listings per user."""
