"""
Tests for the submission envelope and token extraction.
"""
import pytest

from submissions.payload import extract_turnstile_token, parse_submission_payload


class TestExtractTurnstileToken:

    def test_current_field_wins(self):
        token = extract_turnstile_token({
            'turnstileToken': 'current',
            'cf-turnstile-response': 'legacy',
        })

        assert token == 'current'

    def test_falls_back_to_legacy_field(self):
        token = extract_turnstile_token({
            'turnstileToken': '  ',
            'cf-turnstile-response': 'legacy',
        })

        assert token == 'legacy'

    def test_token_is_returned_as_sent(self):
        assert extract_turnstile_token({'turnstileToken': ' padded '}) == ' padded '

    @pytest.mark.parametrize('payload', [
        {},
        {'turnstileToken': ''},
        {'turnstileToken': None, 'cf-turnstile-response': ''},
        {'turnstileToken': 12345},
    ])
    def test_no_usable_token(self, payload):
        assert extract_turnstile_token(payload) is None


class TestParseSubmissionPayload:

    def test_valid_payload(self):
        payload = parse_submission_payload({
            'formType': 'donor',
            'data': {'name': 'Sunrise'},
            'cf-turnstile-response': 'token',
        })

        assert payload.form_type == 'donor'
        assert payload.data == {'name': 'Sunrise'}
        assert payload.token == 'token'

    @pytest.mark.parametrize('body', [
        None,
        [],
        'family',
        {'data': {}, 'turnstileToken': 'token'},
        {'formType': 'Family', 'data': {}, 'turnstileToken': 'token'},
        {'formType': 'family', 'turnstileToken': 'token'},
        {'formType': 'family', 'data': 'name=Ama', 'turnstileToken': 'token'},
        {'formType': 'family', 'data': ['Ama'], 'turnstileToken': 'token'},
        {'formType': 'family', 'data': {}},
    ])
    def test_malformed_payloads(self, body):
        assert parse_submission_payload(body) is None
