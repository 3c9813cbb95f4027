"""
FastAPI dependencies for authentication and authorization.

Two composable checks:
- ``get_current_user``: a valid bearer session token is required
- ``require_roles(...)``: additionally, the subject must hold one of the roles
"""
from datetime import timedelta
from typing import Optional
import logging

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import Settings, get_settings
from ..core.security import TokenService, TokenSubject
from ..database import get_db
from ..exceptions import InternalServerException
from .exceptions import NotAuthenticatedException, PermissionDeniedException
from .federated import GoogleIdentityVerifier
from .models import RoleName
from .roles import roles_of

logger = logging.getLogger(__name__)

# Bearer scheme for session tokens; missing headers are handled below
bearer_scheme = HTTPBearer(auto_error=False)


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    """
    Build the token service from settings.
    """
    return TokenService(
        secret_key=settings.secret_key,
        algorithm=settings.algorithm,
        expires_delta=timedelta(days=settings.access_token_expire_days),
    )


def get_identity_verifier(settings: Settings = Depends(get_settings)) -> GoogleIdentityVerifier:
    """
    Build the Google ID token verifier from settings.
    """
    return GoogleIdentityVerifier(settings.google_client_id, timeout=settings.request_timeout_seconds)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> TokenSubject:
    """
    Get the authenticated subject from the ``Authorization: Bearer`` header.

    The verified subject is also stored on ``request.state.user``.

    Args:
        request: Incoming request
        credentials: Parsed bearer credentials, None when absent
        tokens: Token service

    Returns:
        TokenSubject: Verified subject id and email

    Raises:
        NotAuthenticatedException: If no token is sent or it fails verification
    """
    if credentials is None or not credentials.credentials:
        raise NotAuthenticatedException()

    try:
        subject = tokens.verify(credentials.credentials)
    except NotAuthenticatedException as e:
        logger.warning(f"Rejected session token on {request.url.path}: {e.detail}")
        raise

    request.state.user = subject
    return subject


def require_roles(*role_names: str):
    """
    Dependency factory to require at least one of the given roles.

    Roles are read from storage on every call.

    Args:
        role_names: Roles that are allowed access

    Returns:
        Function that checks if the authenticated subject holds a required role
    """
    if not role_names:
        raise ValueError("require_roles needs at least one role name")
    allowed = frozenset(role_names)

    def role_checker(
        current_user: TokenSubject = Depends(get_current_user),
        db: Session = Depends(get_db),
    ) -> TokenSubject:
        try:
            assigned = roles_of(db, current_user.id)
        except SQLAlchemyError as e:
            logger.error(f"Role lookup failed for user {current_user.id}: {e}")
            raise InternalServerException()

        if allowed.isdisjoint(assigned):
            logger.warning(
                f"Access denied for user {current_user.id}. Required roles: {sorted(allowed)}. "
                f"Assigned: {sorted(assigned)}"
            )
            raise PermissionDeniedException()
        return current_user

    return role_checker


# Convenience dependency for administrator-only routes
require_admin = require_roles(RoleName.ADMIN)
