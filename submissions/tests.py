"""
Tests for the Lead Submission endpoint
"""
import pytest
from unittest.mock import patch
from rest_framework import status

from core.turnstile_service import TurnstileVerification
from submissions.models import CollaboratorSubmission, DonorSubmission, FamilySubmission
from submissions.services import SubmissionStorageError

SUBMIT_URL = '/api/submissions/'
ALLOWED_ORIGIN = 'https://halohub.com'


@pytest.mark.django_db
class TestSuccessfulSubmission:
    """Valid submissions are stored in their form's table."""

    def test_family_submission(self, api_client, turnstile_pass, family_payload):
        response = api_client.post(SUBMIT_URL, family_payload, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'ok': True}
        assert FamilySubmission.objects.count() == 1

        family = FamilySubmission.objects.get()
        assert family.name == 'Akosua Mensah'
        assert family.email == 'akosua@example.com'
        assert family.region == 'Kumasi'
        assert family.interest == 'After-school mentoring'
        assert family.created_at is not None

    def test_donor_submission(self, api_client, turnstile_pass, donor_payload):
        response = api_client.post(SUBMIT_URL, donor_payload, format='json')

        assert response.status_code == status.HTTP_200_OK
        donor = DonorSubmission.objects.get()
        assert (donor.name, donor.email, donor.focus, donor.message) == (
            'Sunrise Foundation',
            'grants@sunrise.org',
            'Education',
            'We would like to fund a pilot cohort.',
        )

    def test_collaborator_submission(self, api_client, turnstile_pass, collaborator_payload):
        response = api_client.post(SUBMIT_URL, collaborator_payload, format='json')

        assert response.status_code == status.HTTP_200_OK
        collaborator = CollaboratorSubmission.objects.get()
        assert collaborator.expertise == 'UX research'
        assert collaborator.idea == 'Run usability sessions with families.'
        assert FamilySubmission.objects.count() == 0
        assert DonorSubmission.objects.count() == 0

    def test_omitted_optional_field_is_stored_as_null(self, api_client, turnstile_pass, donor_payload):
        del donor_payload['data']['focus']
        donor_payload['data']['message'] = '   '

        response = api_client.post(SUBMIT_URL, donor_payload, format='json')

        assert response.status_code == status.HTTP_200_OK
        donor = DonorSubmission.objects.get()
        assert donor.focus is None
        assert donor.message is None

    def test_repeated_submission_creates_two_rows(self, api_client, turnstile_pass, family_payload):
        """Duplicates are not suppressed."""
        api_client.post(SUBMIT_URL, family_payload, format='json')
        api_client.post(SUBMIT_URL, family_payload, format='json')

        assert FamilySubmission.objects.count() == 2

    def test_legacy_token_field_is_accepted(self, api_client, turnstile_pass, family_payload):
        del family_payload['turnstileToken']
        family_payload['cf-turnstile-response'] = 'legacy-token'

        response = api_client.post(SUBMIT_URL, family_payload, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert turnstile_pass.call_args[0][0] == 'legacy-token'

    def test_client_ip_forwarded_to_turnstile(self, api_client, turnstile_pass, family_payload):
        api_client.post(
            SUBMIT_URL, family_payload, format='json',
            HTTP_CF_CONNECTING_IP='203.0.113.7'
        )

        turnstile_pass.assert_called_once_with('test-token', '203.0.113.7')

    def test_response_headers(self, api_client, turnstile_pass, family_payload):
        response = api_client.post(
            SUBMIT_URL, family_payload, format='json', HTTP_ORIGIN=ALLOWED_ORIGIN
        )

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Type'] == 'application/json; charset=utf-8'
        assert response['Access-Control-Allow-Origin'] == ALLOWED_ORIGIN
        assert response['Access-Control-Allow-Methods'] == 'POST,OPTIONS'
        assert response['Access-Control-Allow-Headers'] == 'Content-Type'
        assert response['Access-Control-Max-Age'] == '86400'
        assert response['Vary'] == 'Origin'

    def test_html_accept_header_still_gets_json(self, api_client, turnstile_pass, family_payload):
        response = api_client.post(
            SUBMIT_URL, family_payload, format='json',
            HTTP_ACCEPT='text/html', HTTP_ORIGIN=ALLOWED_ORIGIN
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'ok': True}
        assert response['Content-Type'] == 'application/json; charset=utf-8'
        assert response['Access-Control-Allow-Origin'] == ALLOWED_ORIGIN
        assert FamilySubmission.objects.count() == 1

    def test_no_origin_gets_no_allow_origin_header(self, api_client, turnstile_pass, family_payload):
        response = api_client.post(SUBMIT_URL, family_payload, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert 'Access-Control-Allow-Origin' not in response
        assert response['Access-Control-Allow-Methods'] == 'POST,OPTIONS'


@pytest.mark.django_db
class TestOriginAndMethodGate:
    """Requests are gated on method and origin before the payload is read."""

    def test_disallowed_origin_is_rejected(self, api_client, turnstile_pass, family_payload):
        response = api_client.post(
            SUBMIT_URL, family_payload, format='json', HTTP_ORIGIN='https://evil.example'
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data == {'ok': False, 'error': 'Origin not allowed.'}
        assert 'Access-Control-Allow-Origin' not in response
        turnstile_pass.assert_not_called()
        assert FamilySubmission.objects.count() == 0

    def test_disallowed_origin_rejected_even_with_bad_payload(self, api_client):
        response = api_client.post(
            SUBMIT_URL, data='not json', content_type='text/plain',
            HTTP_ORIGIN='https://evil.example'
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_get_is_not_allowed(self, api_client):
        response = api_client.get(SUBMIT_URL, HTTP_ORIGIN=ALLOWED_ORIGIN)

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert response.data == {'ok': False, 'error': 'Method not allowed. Use POST.'}
        assert response['Access-Control-Allow-Origin'] == ALLOWED_ORIGIN

    def test_put_is_not_allowed(self, api_client, family_payload):
        response = api_client.put(SUBMIT_URL, family_payload, format='json')

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED

    def test_preflight_from_allowed_origin(self, api_client):
        response = api_client.options(SUBMIT_URL, HTTP_ORIGIN=ALLOWED_ORIGIN)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response['Access-Control-Allow-Origin'] == ALLOWED_ORIGIN
        assert response['Access-Control-Allow-Methods'] == 'POST,OPTIONS'

    def test_preflight_without_origin(self, api_client):
        response = api_client.options(SUBMIT_URL)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert 'Access-Control-Allow-Origin' not in response

    def test_preflight_from_disallowed_origin(self, api_client):
        response = api_client.options(SUBMIT_URL, HTTP_ORIGIN='https://evil.example')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert 'Access-Control-Allow-Origin' not in response
        assert 'Access-Control-Allow-Methods' not in response


@pytest.mark.django_db
class TestPayloadValidation:
    """Malformed envelopes are rejected before verification."""

    def test_text_plain_is_rejected(self, api_client, turnstile_pass):
        response = api_client.post(SUBMIT_URL, data='name=Ama', content_type='text/plain')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Content-Type must be application/json.'
        turnstile_pass.assert_not_called()

    def test_malformed_json(self, api_client, turnstile_pass):
        response = api_client.post(
            SUBMIT_URL, data='{"formType": "family",', content_type='application/json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Invalid JSON payload.'

    def test_empty_json_body(self, api_client, turnstile_pass):
        response = api_client.post(SUBMIT_URL, data='', content_type='application/json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'ok': False, 'error': 'Invalid JSON payload.'}
        turnstile_pass.assert_not_called()

    def test_error_with_html_accept_header(self, api_client, turnstile_pass):
        response = api_client.post(
            SUBMIT_URL, data='{"formType":', content_type='application/json',
            HTTP_ACCEPT='text/html'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {'ok': False, 'error': 'Invalid JSON payload.'}

    def test_unknown_form_type(self, api_client, turnstile_pass, family_payload):
        family_payload['formType'] = 'volunteer'

        response = api_client.post(SUBMIT_URL, family_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Missing or invalid submission payload.'

    def test_data_must_be_an_object(self, api_client, turnstile_pass, family_payload):
        family_payload['data'] = None

        response = api_client.post(SUBMIT_URL, family_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Missing or invalid submission payload.'

    def test_missing_token(self, api_client, turnstile_pass, family_payload):
        family_payload['turnstileToken'] = '   '

        response = api_client.post(SUBMIT_URL, family_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Missing or invalid submission payload.'
        turnstile_pass.assert_not_called()


@pytest.mark.django_db
class TestVerificationAndFieldErrors:
    """Verification failures and field errors are reported as 400s."""

    @patch('submissions.views.validate_submission')
    @patch('core.turnstile_service.turnstile_service.verify_token')
    def test_failed_verification_skips_sanitization(
        self, mock_verify, mock_validate, api_client, family_payload
    ):
        mock_verify.return_value = TurnstileVerification(
            False, 'Turnstile verification failed: timeout-or-duplicate.'
        )

        response = api_client.post(SUBMIT_URL, family_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'timeout-or-duplicate' in response.data['error']
        mock_validate.assert_not_called()
        assert FamilySubmission.objects.count() == 0

    def test_missing_email(self, api_client, turnstile_pass, family_payload):
        del family_payload['data']['email']

        response = api_client.post(SUBMIT_URL, family_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'Email is required.' in response.data['error']

    def test_all_field_errors_reported_together(self, api_client, turnstile_pass, family_payload):
        family_payload['data']['name'] = ''
        family_payload['data']['email'] = 'not-an-email'

        response = api_client.post(SUBMIT_URL, family_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Name is required. Email must be a valid address.'
        assert FamilySubmission.objects.count() == 0


@pytest.mark.django_db
class TestStorageFailure:

    @patch('submissions.views.record_submission')
    def test_storage_error_is_generic(self, mock_record, api_client, turnstile_pass, family_payload):
        mock_record.side_effect = SubmissionStorageError('disk I/O error')

        response = api_client.post(
            SUBMIT_URL, family_payload, format='json', HTTP_ORIGIN=ALLOWED_ORIGIN
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {'ok': False, 'error': 'Unable to record submission.'}
        assert response['Access-Control-Allow-Origin'] == ALLOWED_ORIGIN
