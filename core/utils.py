from .middleware import get_client_ip


def ratelimit_key_by_client_ip(group, request):
    """
    Rate-limit key for anonymous submissions.

    Behind the TLS proxy REMOTE_ADDR is the proxy itself, so the first
    X-Forwarded-For hop identifies the visitor.

    Usage:
    @ratelimit(key=ratelimit_key_by_client_ip, rate='20/h', block=False)
    """
    return f"ip:{get_client_ip(request) or 'unknown'}"
