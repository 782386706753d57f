"""
API error envelope

Every error response carries ``success: false`` and a human-readable
``message`` so that clients can show it as is.
"""

from __future__ import annotations

import logging

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

logger = logging.getLogger(__name__)


def _first_message(detail) -> str:
    """Pick the first readable message out of a DRF error detail."""
    if isinstance(detail, dict):
        if "detail" in detail:
            return _first_message(detail["detail"])
        for key, value in detail.items():
            message = _first_message(value)
            if key == "non_field_errors":
                return message
            return f"{key}: {message}"
        return ""
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def api_exception_handler(exc, context):
    """
    DRF exception handler

    Known API errors keep their status and body, extended with
    ``success`` and ``message``. Anything else is logged and turned into
    a generic 500 with the underlying error text attached.
    """
    response = exception_handler(exc, context)

    if response is not None:
        data = response.data
        message = _first_message(data)
        if isinstance(data, dict):
            data.setdefault("message", message)
            data["success"] = False
        else:
            response.data = {"success": False, "message": message, "errors": data}
        return response

    view = context.get("view")
    logger.error(
        f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}: {exc}",
        exc_info=exc,
    )
    return Response(
        {"success": False, "message": "Server error", "error": str(exc)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
