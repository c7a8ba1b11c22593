import logging
import time
import uuid

from .logging_filters import clear_current_request_id, set_current_request_id

logger = logging.getLogger(__name__)

SKIP_LOG_PREFIXES = ('/static/', '/media/', '/favicon.ico')


def get_client_ip(request):
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        return x_forwarded_for.split(',')[0].strip()
    return request.META.get('REMOTE_ADDR')


class RequestIDMiddleware:
    """Tag the request with a short id, expose it as X-Request-ID and log one line per request."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = uuid.uuid4().hex[:12]
        set_current_request_id(request_id)
        request.request_id = request_id

        start = time.perf_counter()
        response = None
        try:
            response = self.get_response(request)
            response['X-Request-ID'] = request_id
            return response
        finally:
            latency_ms = int((time.perf_counter() - start) * 1000)
            path = getattr(request, 'path', '')
            if not path.startswith(SKIP_LOG_PREFIXES):
                logger.info(
                    '[REQUEST] rid=%s method=%s path=%s status=%s latency_ms=%s ip=%s',
                    request_id,
                    request.method,
                    path,
                    getattr(response, 'status_code', 500),
                    latency_ms,
                    get_client_ip(request) or '0.0.0.0',
                )
            clear_current_request_id()
