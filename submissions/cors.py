"""
Origin allow-list and CORS headers for the submission endpoint.

Unlike a permissive CORS middleware, a declared origin that is not on the
list is rejected outright rather than just left without headers.
"""
from django.conf import settings

from .constants import BASE_CORS_HEADERS


def get_allowed_origins():
    """Configured allow-list, falling back to the built-in default."""
    return (
        getattr(settings, 'SUBMISSION_ALLOWED_ORIGINS', None)
        or settings.DEFAULT_SUBMISSION_ALLOWED_ORIGINS
    )


def get_request_origin(request):
    """The ``Origin`` header, or None when the client did not send one."""
    return request.headers.get('Origin') or None


def build_cors_headers(origin, allowed_origins=None):
    """
    Return the CORS headers for ``origin``, or None if it is not allowed.

    A request without an origin (same-origin or non-browser client) passes
    and gets the base headers without Access-Control-Allow-Origin.
    """
    if allowed_origins is None:
        allowed_origins = get_allowed_origins()

    headers = dict(BASE_CORS_HEADERS)
    if not origin:
        return headers

    if origin in allowed_origins:
        headers['Access-Control-Allow-Origin'] = origin
        return headers

    return None
