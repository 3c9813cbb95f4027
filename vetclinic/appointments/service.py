"""
Appointment Service - Business logic for booking, listing and deleting appointments.
"""
from typing import List
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..exceptions import MissingFieldsException, ResourceNotFoundException
from ..pets.models import Pet
from ..veterinarians.models import Veterinarian
from .models import Appointment, AppointmentStatus
from .schemas import AppointmentCreate, AppointmentSummary, ClientAppointment

# Set up logging
logger = logging.getLogger(__name__)


def create_appointment(db: Session, data: AppointmentCreate) -> Appointment:
    """
    Book an appointment in PENDIENTE status.

    Args:
        db: Database session
        data: Appointment data

    Returns:
        Appointment: The created appointment

    Raises:
        MissingFieldsException: If a field is missing
        ResourceNotFoundException: If the pet or veterinarian does not exist
    """
    if not data.mascota_id or not data.veterinario_id or not data.fecha or not data.motivo:
        raise MissingFieldsException("Faltan datos para crear la cita")

    if db.get(Pet, data.mascota_id) is None:
        raise ResourceNotFoundException("Mascota no encontrada")
    if db.get(Veterinarian, data.veterinario_id) is None:
        raise ResourceNotFoundException("Veterinario no encontrado")

    appointment = Appointment(
        mascota_id=data.mascota_id,
        veterinario_id=data.veterinario_id,
        fecha=data.fecha,
        motivo=data.motivo,
        estado=AppointmentStatus.PENDIENTE,
    )
    db.add(appointment)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(appointment)
    logger.info(f"Appointment {appointment.id} booked for pet {appointment.mascota_id}")
    return appointment


def list_appointments_for_owner(db: Session, user_id: int) -> List[ClientAppointment]:
    """Get the appointments of every pet a user owns, latest date first."""
    stmt = (
        select(Appointment, Pet.nombre, Veterinarian.nombre)
        .join(Pet, Pet.id == Appointment.mascota_id)
        .join(Veterinarian, Veterinarian.id == Appointment.veterinario_id)
        .where(Pet.usuario_id == user_id)
        .order_by(Appointment.fecha.desc())
    )
    return [
        ClientAppointment(
            id=appointment.id,
            mascota_id=appointment.mascota_id,
            veterinario_id=appointment.veterinario_id,
            fecha=appointment.fecha,
            motivo=appointment.motivo,
            estado=appointment.estado,
            mascota=pet_name,
            veterinario=vet_name,
        )
        for appointment, pet_name, vet_name in db.execute(stmt).all()
    ]


def list_appointments(db: Session) -> List[AppointmentSummary]:
    """Get every appointment, newest first."""
    stmt = (
        select(Appointment.id, Pet.nombre, Veterinarian.nombre, Appointment.fecha, Appointment.motivo)
        .join(Pet, Appointment.mascota_id == Pet.id)
        .join(Veterinarian, Appointment.veterinario_id == Veterinarian.id)
        .order_by(Appointment.id.desc())
    )
    return [
        AppointmentSummary(id=id_, mascota=pet_name, veterinario=vet_name, fecha=fecha, motivo=motivo)
        for id_, pet_name, vet_name, fecha, motivo in db.execute(stmt).all()
    ]


def delete_appointment(db: Session, appointment_id: int) -> None:
    """
    Delete an appointment.

    Raises:
        ResourceNotFoundException: If the appointment does not exist
    """
    appointment = db.get(Appointment, appointment_id)
    if appointment is None:
        raise ResourceNotFoundException("Cita no encontrada")
    db.delete(appointment)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info(f"Appointment {appointment_id} deleted")
