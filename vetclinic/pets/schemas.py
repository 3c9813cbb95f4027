"""
Pet Schemas - Pydantic models for pet data validation and serialization.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PetCreate(BaseModel):
    """
    Pet Creation Schema

    Fields:
    - usuario_id: Owner id
    - nombre: Pet name
    - especie, raza, edad, peso: Optional description
    """
    usuario_id: int
    nombre: str = Field(..., min_length=1)
    especie: Optional[str] = None
    raza: Optional[str] = None
    edad: Optional[int] = Field(None, ge=0)
    peso: Optional[float] = Field(None, ge=0)


class PetResponse(BaseModel):
    """Pet row"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    usuario_id: int
    nombre: str
    especie: Optional[str] = None
    raza: Optional[str] = None
    edad: Optional[int] = None
    peso: Optional[float] = None
    creado_en: Optional[datetime] = None


class PetWithOwner(PetResponse):
    """Pet row with the owner's name, as listed to administrators"""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    owner_name: Optional[str] = Field(None, alias="dueño")


class PetListResponse(BaseModel):
    ok: bool = True
    mascotas: List[PetResponse]


class PetWithOwnerListResponse(BaseModel):
    ok: bool = True
    mascotas: List[PetWithOwner]


class PetCreatedResponse(BaseModel):
    ok: bool = True
    msg: str = "Mascota registrada"
    id: int
