"""
Pet Router - administrator and client pet endpoints.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth.dependencies import get_current_user, require_admin
from ..core.security import TokenSubject
from ..database import get_db
from .schemas import PetCreate, PetCreatedResponse, PetListResponse, PetWithOwnerListResponse
from .service import create_pet, list_pets_for_owner, list_pets_with_owner

router = APIRouter()


@router.post("/mascotas")
def create_pet_route(
    data: PetCreate,
    db: Session = Depends(get_db),
    current_user: TokenSubject = Depends(require_admin),
):
    """
    Register a pet for any user. Administrators only.
    """
    pet = create_pet(db, data)
    return {"ok": True, "id": pet.id}


@router.get("/mascotas", response_model=PetWithOwnerListResponse)
def list_pets_route(
    db: Session = Depends(get_db),
    current_user: TokenSubject = Depends(require_admin),
):
    """
    List every pet with its owner's name. Administrators only.
    """
    return PetWithOwnerListResponse(mascotas=list_pets_with_owner(db))


@router.get("/cliente/mascotas/{usuario_id}", response_model=PetListResponse)
def list_client_pets_route(
    usuario_id: int,
    db: Session = Depends(get_db),
    current_user: TokenSubject = Depends(get_current_user),
):
    """
    List the pets of a user.
    """
    return PetListResponse(mascotas=list_pets_for_owner(db, usuario_id))


@router.post("/cliente/mascotas", response_model=PetCreatedResponse)
def create_client_pet_route(
    data: PetCreate,
    db: Session = Depends(get_db),
    current_user: TokenSubject = Depends(get_current_user),
):
    """
    Register a pet from the client area.
    """
    pet = create_pet(db, data)
    return PetCreatedResponse(id=pet.id)
