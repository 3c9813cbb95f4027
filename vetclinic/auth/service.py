"""
Authentication service layer for business logic.
"""
import logging
from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.security import TokenService, hash_password, verify_password
from ..exceptions import MissingFieldsException
from .exceptions import EmailAlreadyExistsException, InvalidCredentialsException
from .federated import FederatedIdentity, GoogleIdentityVerifier
from .models import AuthProvider, RoleName, User
from .roles import assign_role, primary_role, roles_of
from .schemas import UserResponse

# Set up logging
logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(db: Session, email: str, provider: Optional[AuthProvider] = None) -> Optional[User]:
    """
    Find a user by email, optionally restricted to one provider.
    """
    stmt = select(User).where(User.email == _normalize_email(email))
    if provider is not None:
        stmt = stmt.where(User.proveedor == provider)
    return db.scalar(stmt)


def _login_payload(db: Session, tokens: TokenService, user: User) -> Dict[str, Any]:
    rol = primary_role(roles_of(db, user.id))
    return {
        "ok": True,
        "user": UserResponse.model_validate(user),
        "token": tokens.issue(user.id, user.email),
        "rol": rol,
    }


def login_local(db: Session, tokens: TokenService, email: Optional[str], password: Optional[str]) -> Dict[str, Any]:
    """
    Authenticate a local user and issue a session token.

    Unknown email and wrong password produce the same error.

    Args:
        db: Database session
        tokens: Token service
        email: User's email address
        password: User's password

    Returns:
        Dict with user, token and primary role

    Raises:
        InvalidCredentialsException: If credentials are invalid
    """
    if not email or not password:
        raise InvalidCredentialsException()

    user = get_user_by_email(db, email, provider=AuthProvider.LOCAL)
    stored_hash = user.password if user is not None else None
    if not verify_password(password, stored_hash) or user is None:
        logger.warning(f"Login failed: Invalid credentials for {email}")
        raise InvalidCredentialsException()

    logger.info(f"Login successful: User {user.id} ({user.email})")
    return _login_payload(db, tokens, user)


def register_local(db: Session, nombre: Optional[str], email: Optional[str], password: Optional[str]) -> User:
    """
    Register a new local client user.

    The user row and its CLIENTE role are written in one transaction. The
    unique constraint on ``usuarios.email`` decides concurrent registrations.

    Args:
        db: Database session
        nombre: Display name
        email: User's email address
        password: User's password

    Returns:
        User: The created user

    Raises:
        MissingFieldsException: If a field is missing or blank
        EmailAlreadyExistsException: If email already exists for any provider
    """
    if not nombre or not nombre.strip() or not email or not email.strip() or not password:
        raise MissingFieldsException()

    email = _normalize_email(email)
    logger.info(f"Client registration attempt for email: {email}")

    if get_user_by_email(db, email) is not None:
        logger.warning(f"Registration failed: Email {email} already registered")
        raise EmailAlreadyExistsException()

    user = User(
        nombre=nombre.strip(),
        email=email,
        password=hash_password(password),
        proveedor=AuthProvider.LOCAL,
    )
    try:
        db.add(user)
        db.flush()
        assign_role(db, user.id, RoleName.CLIENTE)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Registration failed: Email {email} registered concurrently")
        raise EmailAlreadyExistsException()
    except Exception:
        db.rollback()
        raise

    db.refresh(user)
    logger.info(f"Client account created: {user.id}")
    return user


def _get_or_create_federated_user(db: Session, identity: FederatedIdentity) -> User:
    email = _normalize_email(identity.email)
    user = get_user_by_email(db, email)
    if user is not None:
        return user

    user = User(
        nombre=identity.display_name,
        email=email,
        foto_perfil=identity.picture_url,
        proveedor=AuthProvider.GOOGLE,
    )
    try:
        db.add(user)
        db.flush()
        assign_role(db, user.id, RoleName.CLIENTE)
        db.commit()
    except IntegrityError:
        # Another request created the same user first
        db.rollback()
        existing = get_user_by_email(db, email)
        if existing is None:
            raise
        return existing
    except Exception:
        db.rollback()
        raise

    db.refresh(user)
    logger.info(f"Google account created: {user.id} ({email})")
    return user


def login_google(
    db: Session,
    tokens: TokenService,
    verifier: GoogleIdentityVerifier,
    raw_token: Optional[str],
) -> Dict[str, Any]:
    """
    Sign in with a Google ID token, creating the user on first sign-in.

    An existing user with the same email is reused whatever its provider.

    Args:
        db: Database session
        tokens: Token service
        verifier: Google ID token verifier
        raw_token: ID token sent by the client

    Returns:
        Dict with user, token and primary role

    Raises:
        InvalidFederatedTokenException: If the ID token is not valid
    """
    identity = verifier.verify(raw_token)
    user = _get_or_create_federated_user(db, identity)
    logger.info(f"Google login successful: User {user.id} ({user.email})")
    return _login_payload(db, tokens, user)
