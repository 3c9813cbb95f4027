"""
Google ID token verification.

Google signs ID tokens with rotating keys published at a well-known URL.
``google.oauth2.id_token.verify_oauth2_token`` fetches those keys, checks the
signature, issuer, audience and expiry, and returns the claims.
"""
from dataclasses import dataclass
from typing import Optional
import logging

from google.auth import exceptions as google_exceptions
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token

from ..exceptions import InternalServerException
from .exceptions import InvalidFederatedTokenException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FederatedIdentity:
    """Verified identity claims taken from an ID token."""
    email: str
    display_name: str
    picture_url: Optional[str] = None


class _TimeoutRequest(google_requests.Request):
    """Transport that applies a fixed timeout to the signing-key fetch."""

    def __init__(self, timeout: float):
        super().__init__()
        self.timeout = timeout

    def __call__(self, url, method="GET", body=None, headers=None, timeout=None, **kwargs):
        return super().__call__(url, method=method, body=body, headers=headers, timeout=timeout or self.timeout, **kwargs)


class GoogleIdentityVerifier:
    """
    Verifies Google ID tokens issued for this application's client id.
    """

    def __init__(self, client_id: Optional[str], timeout: float = 10):
        self.client_id = client_id
        self.timeout = timeout

    def verify(self, raw_token: Optional[str]) -> FederatedIdentity:
        """
        Verify an ID token and extract the identity it asserts.

        Args:
            raw_token: Encoded ID token sent by the client

        Returns:
            FederatedIdentity: Verified email, display name and picture

        Raises:
            InvalidFederatedTokenException: On any signature, audience, expiry
                or format problem, or when the email is missing or unverified
            InternalServerException: When the signing keys cannot be fetched
        """
        if not self.client_id:
            logger.error("Google sign-in attempted but GOOGLE_CLIENT_ID is not configured")
            raise InvalidFederatedTokenException()
        if not raw_token:
            raise InvalidFederatedTokenException()

        try:
            claims = id_token.verify_oauth2_token(raw_token, _TimeoutRequest(self.timeout), audience=self.client_id)
        except google_exceptions.TransportError as e:
            logger.error(f"Could not fetch Google signing keys: {e}")
            raise InternalServerException()
        except (ValueError, google_exceptions.GoogleAuthError) as e:
            logger.warning(f"Google ID token rejected: {e}")
            raise InvalidFederatedTokenException()

        email = claims.get("email")
        if not email:
            logger.warning("Google ID token carries no email claim")
            raise InvalidFederatedTokenException()
        if claims.get("email_verified") is not True:
            logger.warning(f"Google ID token email not verified: {email}")
            raise InvalidFederatedTokenException()

        return FederatedIdentity(
            email=email,
            display_name=claims.get("name") or email,
            picture_url=claims.get("picture"),
        )
