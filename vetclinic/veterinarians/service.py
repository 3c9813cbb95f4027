"""
Veterinarian Service - Business logic for veterinarian management.
"""
from typing import List
import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..appointments.models import Appointment
from ..auth.models import User
from ..exceptions import ResourceNotFoundException
from .models import Veterinarian
from .schemas import VeterinarianCreate

# Set up logging
logger = logging.getLogger(__name__)


def create_veterinarian(db: Session, data: VeterinarianCreate) -> Veterinarian:
    """
    Create a veterinarian from an existing user.

    Args:
        db: Database session
        data: Veterinarian data

    Returns:
        Veterinarian: The created veterinarian

    Raises:
        ResourceNotFoundException: If the user does not exist
    """
    user = db.get(User, data.usuario_id)
    if user is None:
        raise ResourceNotFoundException("Usuario no encontrado")

    veterinarian = Veterinarian(
        usuario_id=user.id,
        nombre=user.nombre,
        email=user.email,
        especialidad=data.especialidad,
        telefono=data.telefono,
    )
    db.add(veterinarian)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(veterinarian)
    logger.info(f"Veterinarian {veterinarian.id} created for user {user.id}")
    return veterinarian


def list_veterinarians(db: Session) -> List[Veterinarian]:
    """Get all veterinarians."""
    return list(db.scalars(select(Veterinarian).order_by(Veterinarian.id)).all())


def count_appointments(db: Session, veterinarian_id: int) -> int:
    """
    Count the appointments booked with a veterinarian.

    Args:
        db: Database session
        veterinarian_id: ID of the veterinarian

    Returns:
        int: Number of appointments, 0 for an unknown veterinarian
    """
    stmt = select(func.count()).select_from(Appointment).where(Appointment.veterinario_id == veterinarian_id)
    return db.scalar(stmt) or 0
