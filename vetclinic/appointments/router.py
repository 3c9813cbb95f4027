"""
Appointment Router - administrator and client appointment endpoints.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth.dependencies import get_current_user, require_admin
from ..auth.schemas import MessageResponse
from ..core.security import TokenSubject
from ..database import get_db
from .schemas import AppointmentCreate, AppointmentCreatedResponse, AppointmentListResponse, ClientAppointmentListResponse
from .service import create_appointment, delete_appointment, list_appointments, list_appointments_for_owner

router = APIRouter()


@router.get("/cliente/citas/{usuario_id}", response_model=ClientAppointmentListResponse)
def list_client_appointments_route(
    usuario_id: int,
    db: Session = Depends(get_db),
    current_user: TokenSubject = Depends(get_current_user),
):
    """
    List the appointments of a user's pets.
    """
    return ClientAppointmentListResponse(citas=list_appointments_for_owner(db, usuario_id))


@router.post("/cliente/citas", response_model=AppointmentCreatedResponse)
def create_client_appointment_route(
    data: AppointmentCreate,
    db: Session = Depends(get_db),
    current_user: TokenSubject = Depends(get_current_user),
):
    """
    Book an appointment from the client area.
    """
    appointment = create_appointment(db, data)
    return AppointmentCreatedResponse(id=appointment.id)


@router.get("/citas", response_model=AppointmentListResponse)
def list_appointments_route(
    db: Session = Depends(get_db),
    current_user: TokenSubject = Depends(require_admin),
):
    """
    List every appointment. Administrators only.
    """
    return AppointmentListResponse(citas=list_appointments(db))


@router.delete("/citas/{appointment_id}", response_model=MessageResponse)
def delete_appointment_route(
    appointment_id: int,
    db: Session = Depends(get_db),
    current_user: TokenSubject = Depends(require_admin),
):
    """
    Delete an appointment. Administrators only.
    """
    delete_appointment(db, appointment_id)
    return MessageResponse(msg="Cita eliminada")
