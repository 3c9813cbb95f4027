"""
Authentication-specific exceptions.
"""
from fastapi import status

from ..exceptions import AppException

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


class AuthException(AppException):
    """Base class for authentication exceptions."""


class InvalidCredentialsException(AuthException):
    """Exception raised when the email/password pair does not match a local user."""
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Credenciales inválidas"


class EmailAlreadyExistsException(AuthException):
    """Exception raised when email already exists."""
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Ese correo ya está registrado"


class InvalidFederatedTokenException(AuthException):
    """Exception raised when a Google ID token cannot be verified."""
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Token de Google inválido"


class NotAuthenticatedException(AuthException):
    """Exception raised when a protected route is called without a usable session token."""
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Token no enviado"

    def __init__(self, detail: str = None):
        super().__init__(detail)
        self.headers = BEARER_CHALLENGE


class InvalidTokenException(NotAuthenticatedException):
    """Exception raised when token is malformed or its signature does not match."""
    detail = "Token inválido"


class TokenExpiredException(NotAuthenticatedException):
    """Exception raised when token has expired."""
    detail = "Token expirado"


class PermissionDeniedException(AuthException):
    """Exception raised when user doesn't have the required role."""
    status_code = status.HTTP_403_FORBIDDEN
    detail = "No tienes permisos para esta acción"
