"""
Veterinarian Router - API endpoints for veterinarian management.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth.dependencies import get_current_user, require_admin
from ..core.security import TokenSubject
from ..database import get_db
from .schemas import (
    AppointmentCountResponse,
    PublicVeterinarianListResponse,
    VeterinarianCreate,
    VeterinarianListResponse,
)
from .service import count_appointments, create_veterinarian, list_veterinarians

router = APIRouter()


@router.post("/veterinarios")
def create_veterinarian_route(
    data: VeterinarianCreate,
    db: Session = Depends(get_db),
    current_user: TokenSubject = Depends(require_admin),
):
    """
    Create a veterinarian from an existing user. Administrators only.
    """
    veterinarian = create_veterinarian(db, data)
    return {"ok": True, "id": veterinarian.id}


@router.get("/veterinarios", response_model=VeterinarianListResponse)
def list_veterinarians_route(
    db: Session = Depends(get_db),
    current_user: TokenSubject = Depends(require_admin),
):
    """
    List veterinarians with contact details. Administrators only.
    """
    return VeterinarianListResponse(veterinarios=list_veterinarians(db))


@router.get("/veterinarios/{veterinarian_id}/citas-count", response_model=AppointmentCountResponse)
def count_appointments_route(
    veterinarian_id: int,
    db: Session = Depends(get_db),
    current_user: TokenSubject = Depends(require_admin),
):
    """
    Count a veterinarian's appointments. Administrators only.
    """
    return AppointmentCountResponse(total=count_appointments(db, veterinarian_id))


@router.get("/public/veterinarios", response_model=PublicVeterinarianListResponse)
def list_public_veterinarians_route(
    db: Session = Depends(get_db),
    current_user: TokenSubject = Depends(get_current_user),
):
    """
    List veterinarians for clients booking an appointment.
    """
    return PublicVeterinarianListResponse(veterinarios=list_veterinarians(db))
