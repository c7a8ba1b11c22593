import logging
import threading

NO_REQUEST_ID = "-"

_request_local = threading.local()


def set_current_request_id(request_id):
    _request_local.request_id = request_id


def get_current_request_id():
    return getattr(_request_local, "request_id", NO_REQUEST_ID)


def clear_current_request_id():
    _request_local.request_id = NO_REQUEST_ID


class RequestIDFilter(logging.Filter):
    """Stamp every record with the id of the request being served, so
    `%(request_id)s` works in formatters even outside a request."""

    def filter(self, record):
        if not getattr(record, "request_id", None):
            record.request_id = get_current_request_id()
        return True
