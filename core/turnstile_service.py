"""
Cloudflare Turnstile CAPTCHA Verification Service

Verifies Turnstile tokens from the lead capture forms against the Cloudflare
siteverify API before any submission data is trusted.

Documentation: https://developers.cloudflare.com/turnstile/
"""

import logging
from typing import NamedTuple, Optional

import requests
from django.conf import settings

logger = logging.getLogger(__name__)


class TurnstileVerification(NamedTuple):
    """Outcome of a siteverify call. ``error`` is safe to show to the caller."""
    success: bool
    error: Optional[str] = None


class TurnstileService:
    """
    Service for verifying Cloudflare Turnstile CAPTCHA tokens.

    Usage:
        service = TurnstileService()
        verification = service.verify_token(token, user_ip='192.168.1.1')
        if not verification.success:
            return error_response(verification.error)
    """

    VERIFY_URL = 'https://challenges.cloudflare.com/turnstile/v0/siteverify'
    DEFAULT_TIMEOUT = 10

    UNAVAILABLE_MESSAGE = 'Unable to verify Turnstile token.'
    ERROR_MESSAGE = 'Turnstile verification error.'
    FALLBACK_ERROR_CODE = 'verification_failed'

    def __init__(self):
        self.secret_key = getattr(settings, 'TURNSTILE_SECRET_KEY', '')
        self.verify_url = getattr(settings, 'TURNSTILE_VERIFY_URL', self.VERIFY_URL)
        self.timeout = getattr(settings, 'TURNSTILE_VERIFY_TIMEOUT', self.DEFAULT_TIMEOUT)

        if not self.secret_key:
            logger.warning(
                "TURNSTILE_SECRET is not set. "
                "CAPTCHA verification will fail!"
            )

    def verify_token(self, token: str, user_ip: str = None) -> TurnstileVerification:
        """
        Verify a Turnstile token.

        Args:
            token: The Turnstile response token from the form
            user_ip: Optional visitor IP address, forwarded as ``remoteip``

        Returns:
            TurnstileVerification. Transport problems are reported as a
            failed verification, never raised.
        """
        payload = {
            'secret': self.secret_key,
            'response': token,
        }

        if user_ip:
            payload['remoteip'] = user_ip

        try:
            response = requests.post(
                self.verify_url,
                data=payload,
                timeout=self.timeout
            )

            if response.status_code != 200:
                logger.error(
                    f"Turnstile API returned status {response.status_code}: {response.text}"
                )
                return TurnstileVerification(False, self.UNAVAILABLE_MESSAGE)

            result = response.json()

            if result.get('success'):
                logger.info("Turnstile token verified successfully")
                return TurnstileVerification(True)

            error_codes = result.get('error-codes')
            if not isinstance(error_codes, list):
                error_codes = []
            logger.warning(f"Turnstile verification failed: {error_codes}")

            error_code = ', '.join(str(code) for code in error_codes) or self.FALLBACK_ERROR_CODE
            return TurnstileVerification(
                False, f'Turnstile verification failed: {error_code}.'
            )

        except requests.exceptions.Timeout:
            logger.error("Turnstile verification timeout")
            return TurnstileVerification(False, self.ERROR_MESSAGE)

        except requests.exceptions.RequestException as e:
            logger.error(f"Turnstile verification network error: {e}")
            return TurnstileVerification(False, self.ERROR_MESSAGE)

        except (ValueError, AttributeError) as e:
            # Body was not JSON, or not a JSON object
            logger.error(f"Turnstile returned an unreadable response: {e}")
            return TurnstileVerification(False, self.ERROR_MESSAGE)


# Singleton instance
turnstile_service = TurnstileService()
