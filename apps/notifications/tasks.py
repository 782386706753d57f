"""Periodic notification maintenance."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore

from .services import purge_read_notifications as purge

logger = logging.getLogger(__name__)


@shared_task(name="notifications.purge_read_notifications")
def purge_read_notifications(older_than_days: int | None = None) -> int:
    deleted = purge(older_than_days)
    logger.info(f"Retention task removed {deleted} notifications")
    return deleted
