"""
Helpers for reading list-valued settings from the environment.
"""


def parse_origin_list(value, default):
    """
    Split a comma-separated origin list, dropping blank entries.

    Falls back to a copy of ``default`` when ``value`` is unset or holds
    nothing but commas and whitespace. Origins are kept verbatim apart from
    surrounding whitespace; they are compared exactly against the request's
    ``Origin`` header.
    """
    origins = [origin.strip() for origin in (value or '').split(',') if origin.strip()]
    return origins or list(default)
