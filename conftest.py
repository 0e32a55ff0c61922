"""
Shared pytest fixtures.
"""
import pytest
from unittest.mock import patch
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    """API client for making requests."""
    return APIClient()


@pytest.fixture
def turnstile_pass():
    """Turnstile accepts every token."""
    from core.turnstile_service import TurnstileVerification

    with patch('core.turnstile_service.turnstile_service.verify_token') as mock_verify:
        mock_verify.return_value = TurnstileVerification(True)
        yield mock_verify


@pytest.fixture
def family_payload():
    return {
        'formType': 'family',
        'data': {
            'name': '  Akosua Mensah ',
            'email': 'akosua@example.com',
            'region': 'Kumasi',
            'interest': 'After-school mentoring',
        },
        'turnstileToken': 'test-token',
    }


@pytest.fixture
def donor_payload():
    return {
        'formType': 'donor',
        'data': {
            'name': 'Sunrise Foundation',
            'email': 'grants@sunrise.org',
            'focus': 'Education',
            'message': 'We would like to fund a pilot cohort.',
        },
        'turnstileToken': 'test-token',
    }


@pytest.fixture
def collaborator_payload():
    return {
        'formType': 'collaborator',
        'data': {
            'name': 'Kwame Boateng',
            'email': 'kwame@studio.dev',
            'expertise': 'UX research',
            'idea': 'Run usability sessions with families.',
        },
        'turnstileToken': 'test-token',
    }
