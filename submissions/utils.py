"""
Request helpers for the submission endpoint.
"""


def get_client_ip(request):
    """
    Get client IP address from request.

    Prefers Cloudflare's CF-Connecting-IP, then the first X-Forwarded-For
    hop, then the socket address.
    """
    cf_connecting_ip = request.META.get('HTTP_CF_CONNECTING_IP')
    if cf_connecting_ip:
        return cf_connecting_ip.strip()

    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        # X-Forwarded-For can be comma-separated list, first is original client
        return x_forwarded_for.split(',')[0].strip()

    return request.META.get('REMOTE_ADDR')
