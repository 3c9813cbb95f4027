"""
Veterinarian Model - Clinic veterinarians linked to a user account.

Name and email are copied from the linked user when the veterinarian is
created and are not kept in sync afterwards.
"""
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ..database import Base


class Veterinarian(Base):
    """
    Veterinarian Model

    Fields:
    - id: Primary key
    - usuario_id: Foreign key to the linked user
    - nombre: Snapshot of the user's name
    - email: Snapshot of the user's email
    - especialidad: Specialty
    - telefono: Contact phone
    """
    __tablename__ = "veterinarios"

    id = Column(Integer, primary_key=True, index=True)
    usuario_id = Column(Integer, ForeignKey("usuarios.id", ondelete="CASCADE"), nullable=False, index=True)
    nombre = Column(String(150), nullable=False)
    email = Column(String(255), nullable=False)
    especialidad = Column(String(150), nullable=True)
    telefono = Column(String(50), nullable=True)

    user = relationship("User")
    appointments = relationship("Appointment", back_populates="veterinarian")

    def __repr__(self):
        return f"<Veterinarian(id={self.id}, usuario_id={self.usuario_id}, especialidad='{self.especialidad}')>"
