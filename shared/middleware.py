import logging

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """Logs method and path of every incoming request."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        logger.info(f"Incoming request: {request.method} {request.get_full_path()}")
        response = self.get_response(request)
        if response.status_code >= 500:
            logger.warning(
                f"Request failed: {request.method} {request.get_full_path()} -> {response.status_code}"
            )
        return response
