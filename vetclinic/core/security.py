"""
Core security utilities for password hashing and session tokens.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

from jose import jwt, JWTError, ExpiredSignatureError
from passlib.context import CryptContext

from ..auth.exceptions import InvalidTokenException, TokenExpiredException

# Set up logging
logger = logging.getLogger(__name__)

# Password hashing context, bcrypt with a fixed work factor
# 10 rounds matches the hashes already stored by the legacy Node service
BCRYPT_ROUNDS = 10
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        str: Hashed password
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """
    Verify a password against a hash.

    A missing or unrecognised hash is a mismatch, not an error. A missing
    hash still costs one bcrypt check so unknown accounts answer as slowly
    as wrong passwords.

    Args:
        plain_password: Plain text password
        hashed_password: Hashed password to compare against

    Returns:
        bool: True if password matches hash
    """
    if not plain_password:
        return False
    if not hashed_password:
        pwd_context.dummy_verify()
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        logger.warning("Stored password hash could not be identified")
        return False


@dataclass(frozen=True)
class TokenSubject:
    """Identity carried by a verified session token."""
    id: int
    email: str


class TokenService:
    """
    Issues and verifies signed session tokens.

    Tokens carry only the subject id and email plus ``iat``/``exp``. Roles are
    never embedded; they are resolved from storage on every request.
    Verification is stateless: signature and expiry only.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expires_delta: timedelta = timedelta(days=7)):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    def issue(self, user_id: int, email: str, now: Optional[datetime] = None) -> str:
        """
        Create a session token valid for ``expires_delta`` from ``now``.

        Args:
            user_id: Subject id
            email: Subject email
            now: Issuance time, defaults to the current UTC time

        Returns:
            str: Encoded token
        """
        issued_at = now or datetime.now(timezone.utc)
        to_encode = {
            "id": user_id,
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self.expires_delta,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenSubject:
        """
        Verify and decode a session token.

        Args:
            token: Encoded token

        Returns:
            TokenSubject: The subject the token was issued for

        Raises:
            TokenExpiredException: If the validity window has passed
            InvalidTokenException: If the token is malformed or tampered with
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require_exp": True},
            )
        except ExpiredSignatureError:
            raise TokenExpiredException()
        except JWTError:
            raise InvalidTokenException()

        user_id = payload.get("id")
        email = payload.get("email")
        if not isinstance(user_id, int) or isinstance(user_id, bool) or not isinstance(email, str):
            raise InvalidTokenException()
        return TokenSubject(id=user_id, email=email)
