"""
Auth Schemas - Pydantic models for login, registration and user payloads.
"""
from typing import Optional
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from .models import AuthProvider


class LocalLogin(BaseModel):
    """
    Local Login Schema - email and password

    Both fields are optional at the schema level so that a missing value is
    reported as invalid credentials rather than a validation error.
    """
    email: Optional[str] = None
    password: Optional[str] = None


class LocalRegistration(BaseModel):
    """
    Local Registration Schema - Used for client self-registration

    Fields:
    - nombre: Display name
    - email: Email address, unique across all users
    - password: Plain text password (hashed before storage)
    """
    nombre: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None


class GoogleLogin(BaseModel):
    """
    Google Login Schema - Google Identity Services sends ``credential``,
    other clients may send ``id_token``.
    """
    credential: Optional[str] = None
    id_token: Optional[str] = None

    @property
    def token(self) -> Optional[str]:
        return self.credential or self.id_token


class UserResponse(BaseModel):
    """
    User Response Schema - Never includes the password hash
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    email: str
    foto_perfil: Optional[str] = None
    proveedor: AuthProvider
    creado_en: Optional[datetime] = None


class LoginResponse(BaseModel):
    """Successful login payload"""
    ok: bool = True
    user: UserResponse
    token: str
    rol: str


class MessageResponse(BaseModel):
    """Plain acknowledgement payload"""
    ok: bool = True
    msg: str = Field(..., description="Human readable result")
