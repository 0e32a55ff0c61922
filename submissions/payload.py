"""
Submission Payload Envelope

Checks that a decoded request body is a well-formed submission before any
business validation runs.
"""
from typing import Any, Dict, NamedTuple, Optional

from .constants import FORM_TYPES, LEGACY_TOKEN_FIELD, TOKEN_FIELD


class SubmissionPayload(NamedTuple):
    form_type: str
    data: Dict[str, Any]
    token: str


def extract_turnstile_token(payload: Dict[str, Any]) -> Optional[str]:
    """
    Return the Turnstile token from either the current or the legacy key.

    The first value that is a non-blank string wins; it is returned as sent.
    """
    for key in (TOKEN_FIELD, LEGACY_TOKEN_FIELD):
        token = payload.get(key)
        if isinstance(token, str) and token.strip():
            return token
    return None


def parse_submission_payload(value: Any) -> Optional[SubmissionPayload]:
    """Return a SubmissionPayload, or None when the envelope is malformed."""
    if not isinstance(value, dict):
        return None

    form_type = value.get('formType')
    if form_type not in FORM_TYPES:
        return None

    data = value.get('data')
    if not isinstance(data, dict):
        return None

    token = extract_turnstile_token(value)
    if token is None:
        return None

    return SubmissionPayload(form_type=form_type, data=data, token=token)
