"""
Pet Model - Pets owned by clinic clients.
"""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, func
from sqlalchemy.orm import relationship

from ..database import Base


class Pet(Base):
    """
    Pet Model

    Fields:
    - id: Primary key
    - usuario_id: Owner
    - nombre: Pet name
    - especie: Species
    - raza: Breed
    - edad: Age in years
    - peso: Weight in kilograms
    - creado_en: When the pet was registered
    """
    __tablename__ = "mascotas"

    id = Column(Integer, primary_key=True, index=True)
    usuario_id = Column(Integer, ForeignKey("usuarios.id", ondelete="CASCADE"), nullable=False, index=True)
    nombre = Column(String(100), nullable=False)
    especie = Column(String(50), nullable=True)
    raza = Column(String(100), nullable=True)
    edad = Column(Integer, nullable=True)
    peso = Column(Numeric(6, 2), nullable=True)
    creado_en = Column(DateTime(timezone=True), server_default=func.now())

    owner = relationship("User")
    appointments = relationship("Appointment", back_populates="pet", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Pet(id={self.id}, usuario_id={self.usuario_id}, nombre='{self.nombre}')>"
