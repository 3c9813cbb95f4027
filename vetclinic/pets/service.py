"""
Pet Service - Business logic for pet registration and listing.
"""
from typing import List
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..auth.models import User
from ..exceptions import ResourceNotFoundException
from .models import Pet
from .schemas import PetCreate, PetWithOwner

# Set up logging
logger = logging.getLogger(__name__)


def create_pet(db: Session, data: PetCreate) -> Pet:
    """
    Register a pet for an existing user.

    Args:
        db: Database session
        data: Pet data

    Returns:
        Pet: The created pet

    Raises:
        ResourceNotFoundException: If the owner does not exist
    """
    if db.get(User, data.usuario_id) is None:
        raise ResourceNotFoundException("Usuario no encontrado")

    pet = Pet(**data.model_dump())
    db.add(pet)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(pet)
    logger.info(f"Pet {pet.id} registered for user {pet.usuario_id}")
    return pet


def list_pets_with_owner(db: Session) -> List[PetWithOwner]:
    """Get all pets with their owner's name, newest first."""
    stmt = (
        select(Pet, User.nombre)
        .join(User, Pet.usuario_id == User.id)
        .order_by(Pet.id.desc())
    )
    return [
        PetWithOwner.model_validate(pet).model_copy(update={"owner_name": owner_name})
        for pet, owner_name in db.execute(stmt).all()
    ]


def list_pets_for_owner(db: Session, user_id: int) -> List[Pet]:
    """Get the pets of one owner, most recently registered first."""
    stmt = (
        select(Pet)
        .where(Pet.usuario_id == user_id)
        .order_by(Pet.creado_en.desc(), Pet.id.desc())
    )
    return list(db.scalars(stmt).all())
