"""
Lead Submission Views

Public endpoint for the static site's pilot forms.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import ParseError, UnsupportedMediaType
from rest_framework.negotiation import DefaultContentNegotiation
from rest_framework.parsers import JSONParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.turnstile_service import turnstile_service

from .constants import BASE_CORS_HEADERS, JSON_CONTENT_TYPE
from .cors import build_cors_headers, get_request_origin
from .payload import parse_submission_payload
from .serializers import validate_submission
from .services import SubmissionStorageError, record_submission
from .utils import get_client_ip

logger = logging.getLogger(__name__)


def submission_response(body, status_code, headers=None):
    """JSON response with the charset-qualified content type."""
    return Response(
        body,
        status=status_code,
        headers=headers,
        content_type=JSON_CONTENT_TYPE
    )


def error_response(message, status_code, headers=None):
    return submission_response({'ok': False, 'error': message}, status_code, headers)


class JSONOnlyContentNegotiation(DefaultContentNegotiation):
    """
    Always answer with the first renderer, whatever the Accept header says.

    Browsers posting from the static site may send ``Accept: text/html``;
    they still get the JSON body instead of a 406.
    """

    def select_renderer(self, request, renderers, format_suffix=None):
        return (renderers[0], renderers[0].media_type)


class SubmissionView(APIView):
    """
    Public endpoint for pilot form submissions.

    OPTIONS /api/submissions/
    POST /api/submissions/
    {
        "formType": "family",  // or "donor", "collaborator"
        "data": {"name": "...", "email": "...", ...},
        "turnstileToken": "cloudflare-turnstile-token"
        // legacy clients send "cf-turnstile-response" instead
    }

    No authentication required. The origin allow-list is enforced before the
    body is read, and the Turnstile token is verified before any field is
    sanitized.
    """

    permission_classes = [AllowAny]
    authentication_classes = []
    parser_classes = [JSONParser]
    content_negotiation_class = JSONOnlyContentNegotiation

    def options(self, request, *args, **kwargs):
        """CORS preflight."""
        cors_headers = build_cors_headers(get_request_origin(request))
        if cors_headers is None:
            return Response(status=status.HTTP_403_FORBIDDEN)
        return Response(status=status.HTTP_204_NO_CONTENT, headers=cors_headers)

    def http_method_not_allowed(self, request, *args, **kwargs):
        return error_response(
            'Method not allowed. Use POST.',
            status.HTTP_405_METHOD_NOT_ALLOWED,
            build_cors_headers(get_request_origin(request))
        )

    def post(self, request):
        """Validate, verify and record a submission."""
        cors_headers = build_cors_headers(get_request_origin(request))
        if cors_headers is None:
            return error_response(
                'Origin not allowed.',
                status.HTTP_403_FORBIDDEN,
                BASE_CORS_HEADERS
            )

        if 'application/json' not in (request.content_type or '').lower():
            return error_response(
                'Content-Type must be application/json.',
                status.HTTP_400_BAD_REQUEST,
                cors_headers
            )

        # DRF reads a zero-length body as {}; an empty body is not JSON
        if request.stream is None:
            return error_response(
                'Invalid JSON payload.',
                status.HTTP_400_BAD_REQUEST,
                cors_headers
            )

        try:
            body = request.data
        except UnsupportedMediaType:
            return error_response(
                'Content-Type must be application/json.',
                status.HTTP_400_BAD_REQUEST,
                cors_headers
            )
        except ParseError:
            return error_response(
                'Invalid JSON payload.',
                status.HTTP_400_BAD_REQUEST,
                cors_headers
            )

        payload = parse_submission_payload(body)
        if payload is None:
            return error_response(
                'Missing or invalid submission payload.',
                status.HTTP_400_BAD_REQUEST,
                cors_headers
            )

        verification = turnstile_service.verify_token(payload.token, get_client_ip(request))
        if not verification.success:
            return error_response(
                verification.error,
                status.HTTP_400_BAD_REQUEST,
                cors_headers
            )

        result = validate_submission(payload.form_type, payload.data)
        if not result.success:
            return error_response(
                result.error,
                status.HTTP_400_BAD_REQUEST,
                cors_headers
            )

        try:
            record_submission(result.table, result.parameters)
        except SubmissionStorageError:
            return error_response(
                'Unable to record submission.',
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                cors_headers
            )

        logger.info(f"Accepted {payload.form_type} submission")
        return submission_response({'ok': True}, status.HTTP_200_OK, cors_headers)
