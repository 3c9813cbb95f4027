"""
Appointment Model - Stores appointments between pets and veterinarians.
"""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ..database import Base


class AppointmentStatus:
    """Appointment status values. Only the initial status is defined."""
    PENDIENTE = "PENDIENTE"


class Appointment(Base):
    """
    Appointment Model

    Fields:
    - id: Primary key
    - mascota_id: Foreign key to Pet
    - veterinario_id: Foreign key to Veterinarian
    - fecha: Date and time of the appointment
    - motivo: Reason for the visit
    - estado: Status, PENDIENTE on creation
    """
    __tablename__ = "citas"

    id = Column(Integer, primary_key=True, index=True)
    mascota_id = Column(Integer, ForeignKey("mascotas.id", ondelete="CASCADE"), nullable=False, index=True)
    veterinario_id = Column(Integer, ForeignKey("veterinarios.id", ondelete="CASCADE"), nullable=False, index=True)
    fecha = Column(DateTime, nullable=False)
    motivo = Column(String(500), nullable=False)
    estado = Column(String(30), nullable=False, default=AppointmentStatus.PENDIENTE)

    pet = relationship("Pet", back_populates="appointments")
    veterinarian = relationship("Veterinarian", back_populates="appointments")

    def __repr__(self):
        return f"<Appointment(id={self.id}, mascota_id={self.mascota_id}, veterinario_id={self.veterinario_id}, fecha='{self.fecha}')>"
