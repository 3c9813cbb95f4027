"""
Veterinarian Schemas - Pydantic models for veterinarian data validation and serialization.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class VeterinarianCreate(BaseModel):
    """
    Veterinarian Creation Schema

    Fields:
    - usuario_id: User whose name and email are copied
    - especialidad: Specialty (optional)
    - telefono: Contact phone (optional)
    """
    usuario_id: int = Field(..., description="Linked user id")
    especialidad: Optional[str] = None
    telefono: Optional[str] = None


class VeterinarianResponse(BaseModel):
    """Full veterinarian row"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    usuario_id: int
    nombre: str
    email: str
    especialidad: Optional[str] = None
    telefono: Optional[str] = None


class PublicVeterinarian(BaseModel):
    """Veterinarian as shown to clients"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    especialidad: Optional[str] = None


class VeterinarianListResponse(BaseModel):
    ok: bool = True
    veterinarios: List[VeterinarianResponse]


class PublicVeterinarianListResponse(BaseModel):
    ok: bool = True
    veterinarios: List[PublicVeterinarian]


class AppointmentCountResponse(BaseModel):
    ok: bool = True
    total: int
