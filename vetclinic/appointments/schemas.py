"""
Appointment Schemas - Pydantic models for appointment data validation and serialization.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class AppointmentCreate(BaseModel):
    """
    Appointment Creation Schema

    All fields are required; they are optional here so that a missing one is
    reported with the clinic's own message.
    """
    mascota_id: Optional[int] = None
    veterinario_id: Optional[int] = None
    fecha: Optional[datetime] = None
    motivo: Optional[str] = None


class ClientAppointment(BaseModel):
    """Appointment row with pet and veterinarian names, as shown to clients"""
    id: int
    mascota_id: int
    veterinario_id: int
    fecha: datetime
    motivo: str
    estado: str
    mascota: str
    veterinario: str


class AppointmentSummary(BaseModel):
    """Appointment row as listed to administrators"""
    id: int
    mascota: str
    veterinario: str
    fecha: datetime
    motivo: str


class ClientAppointmentListResponse(BaseModel):
    ok: bool = True
    citas: List[ClientAppointment]


class AppointmentListResponse(BaseModel):
    ok: bool = True
    citas: List[AppointmentSummary]


class AppointmentCreatedResponse(BaseModel):
    ok: bool = True
    msg: str = "Cita creada correctamente"
    id: int
