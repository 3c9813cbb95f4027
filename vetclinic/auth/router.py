"""
Authentication routes for the veterinary clinic system.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.security import TokenService
from ..database import get_db
from .dependencies import get_identity_verifier, get_token_service
from .federated import GoogleIdentityVerifier
from .schemas import GoogleLogin, LocalLogin, LocalRegistration, LoginResponse, MessageResponse
from .service import login_google, login_local, register_local

router = APIRouter()


@router.post("/login-admin", response_model=LoginResponse, summary="Local Login")
def login_admin_route(
    login_data: LocalLogin,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Log in with email and password.

    Despite the path, any local user may log in; the response reports the
    user's primary role.
    """
    return login_local(db, tokens, login_data.email, login_data.password)


@router.post("/register", response_model=MessageResponse, summary="Client Registration")
def register_route(registration: LocalRegistration, db: Session = Depends(get_db)):
    """
    Register a local client account. No token is issued; the client logs in afterwards.
    """
    register_local(db, registration.nombre, registration.email, registration.password)
    return MessageResponse(msg="Usuario registrado correctamente")


@router.post("/google", response_model=LoginResponse, summary="Google Login")
def google_login_route(
    login_data: GoogleLogin,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
    verifier: GoogleIdentityVerifier = Depends(get_identity_verifier),
):
    """
    Sign in with a Google ID token, creating a client account on first use.
    """
    return login_google(db, tokens, verifier, login_data.token)
