"""
Submission Client

Sends one pilot form to the submission endpoint and turns the result into a
message for the visitor. Used by server-side integrations and smoke checks;
the browser forms follow the same contract.
"""
import logging
from typing import Any, Dict, NamedTuple

import requests

from .constants import FORM_TABLES, LEGACY_TOKEN_FIELD, TABLE_COLUMNS

logger = logging.getLogger(__name__)


class SubmissionOutcome(NamedTuple):
    ok: bool
    message: str


class SubmissionClient:
    """
    Client for the submission endpoint.

    Usage:
        client = SubmissionClient('https://api.halohub.com/api/submissions/')
        outcome = client.submit('donor', {'name': 'Ama', 'email': 'ama@example.com'}, token)
        show(outcome.message)

    At most one request is made per ``submit`` call, and transport failures
    come back as an outcome rather than an exception.
    """

    SUCCESS_MESSAGE = 'Thanks! We’ll be in touch soon.'
    FAILURE_MESSAGE = 'We could not submit your request. Please try again.'
    NETWORK_ERROR_MESSAGE = 'Network error. Please try again in a moment.'
    UNSUPPORTED_FORM_MESSAGE = 'Unsupported form type.'
    NOT_CONFIGURED_MESSAGE = 'Form submission is not configured yet. Please update the submission endpoint.'
    TOKEN_REQUIRED_MESSAGE = 'Please complete the verification challenge.'

    DEFAULT_TIMEOUT = 15

    def __init__(self, endpoint: str, timeout: int = DEFAULT_TIMEOUT, session: requests.Session = None):
        self.endpoint = (endpoint or '').strip()
        self.timeout = timeout
        self.session = session or requests.Session()

    @staticmethod
    def collect_form_values(form_type: str, values: Dict[str, Any]) -> Dict[str, str]:
        """Trimmed values for the form's fields; anything missing is sent empty."""
        data = {}
        for field in TABLE_COLUMNS[FORM_TABLES[form_type]]:
            value = values.get(field)
            data[field] = value.strip() if isinstance(value, str) else ''
        return data

    def submit(self, form_type: str, values: Dict[str, Any], token: str) -> SubmissionOutcome:
        if form_type not in FORM_TABLES:
            return SubmissionOutcome(False, self.UNSUPPORTED_FORM_MESSAGE)

        if not self.endpoint:
            return SubmissionOutcome(False, self.NOT_CONFIGURED_MESSAGE)

        if not token:
            return SubmissionOutcome(False, self.TOKEN_REQUIRED_MESSAGE)

        payload = {
            'formType': form_type,
            'data': self.collect_form_values(form_type, values),
            LEGACY_TOKEN_FIELD: token,
        }

        try:
            response = self.session.post(self.endpoint, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning(f"Submission request failed: {e}")
            return SubmissionOutcome(False, self.NETWORK_ERROR_MESSAGE)

        try:
            result = response.json()
        except ValueError:
            result = {}
        if not isinstance(result, dict):
            result = {}

        if response.ok and result.get('ok'):
            return SubmissionOutcome(True, self.SUCCESS_MESSAGE)

        return SubmissionOutcome(False, result.get('error') or self.FAILURE_MESSAGE)
