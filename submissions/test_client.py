"""
Tests for the submission client.
"""
from unittest.mock import MagicMock

import requests

from submissions.client import SubmissionClient

ENDPOINT = 'https://api.halohub.com/api/submissions/'


def make_response(status_code=200, body=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    if body is None:
        response.json.side_effect = ValueError('No JSON')
    else:
        response.json.return_value = body
    return response


class TestSubmissionClient:

    def setup_method(self):
        self.session = MagicMock()
        self.client = SubmissionClient(ENDPOINT, session=self.session)

    def test_successful_submission(self):
        self.session.post.return_value = make_response(200, {'ok': True})

        outcome = self.client.submit(
            'family',
            {'name': ' Ama ', 'email': 'ama@example.com', 'region': 'Accra'},
            'token'
        )

        assert outcome.ok is True
        assert outcome.message == SubmissionClient.SUCCESS_MESSAGE
        self.session.post.assert_called_once_with(
            ENDPOINT,
            json={
                'formType': 'family',
                'data': {
                    'name': 'Ama',
                    'email': 'ama@example.com',
                    'region': 'Accra',
                    'interest': '',
                },
                'cf-turnstile-response': 'token',
            },
            timeout=SubmissionClient.DEFAULT_TIMEOUT
        )

    def test_server_error_message_is_relayed(self):
        self.session.post.return_value = make_response(
            400, {'ok': False, 'error': 'Email is required.'}
        )

        outcome = self.client.submit('donor', {'name': 'Sunrise'}, 'token')

        assert outcome.ok is False
        assert outcome.message == 'Email is required.'

    def test_generic_message_without_error_body(self):
        self.session.post.return_value = make_response(502)

        outcome = self.client.submit('donor', {'name': 'Sunrise'}, 'token')

        assert outcome == (False, SubmissionClient.FAILURE_MESSAGE)

    def test_ok_status_without_ok_flag_is_a_failure(self):
        self.session.post.return_value = make_response(200, {'received': True})

        outcome = self.client.submit('donor', {'name': 'Sunrise'}, 'token')

        assert outcome.ok is False

    def test_network_error(self):
        self.session.post.side_effect = requests.exceptions.ConnectionError('refused')

        outcome = self.client.submit('collaborator', {'name': 'Kwame'}, 'token')

        assert outcome == (False, SubmissionClient.NETWORK_ERROR_MESSAGE)

    def test_unsupported_form_type_makes_no_request(self):
        outcome = self.client.submit('volunteer', {}, 'token')

        assert outcome == (False, SubmissionClient.UNSUPPORTED_FORM_MESSAGE)
        self.session.post.assert_not_called()

    def test_missing_token_makes_no_request(self):
        outcome = self.client.submit('family', {}, '')

        assert outcome == (False, SubmissionClient.TOKEN_REQUIRED_MESSAGE)
        self.session.post.assert_not_called()

    def test_unconfigured_endpoint(self):
        client = SubmissionClient('  ', session=self.session)

        outcome = client.submit('family', {}, 'token')

        assert outcome == (False, SubmissionClient.NOT_CONFIGURED_MESSAGE)
        self.session.post.assert_not_called()
