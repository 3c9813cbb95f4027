"""
Identity models - users, roles and the many-to-many association between them.
"""
import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from ..database import Base


class AuthProvider(str, enum.Enum):
    """Enum for the way a user authenticates"""
    LOCAL = "local"
    GOOGLE = "google"


class RoleName:
    """Names of the roles the application relies on. Other roles may exist."""
    ADMIN = "ADMIN"
    CLIENTE = "CLIENTE"


class UserRole(Base):
    """
    Association row between a user and a role.

    The composite primary key guarantees a role is never assigned twice.
    """
    __tablename__ = "usuarios_roles"

    usuario_id = Column(Integer, ForeignKey("usuarios.id", ondelete="CASCADE"), primary_key=True)
    rol_id = Column(Integer, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True)

    def __repr__(self):
        return f"<UserRole(usuario_id={self.usuario_id}, rol_id={self.rol_id})>"


class Role(Base):
    """
    Role Model - Named permission tier referenced by name
    """
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(50), unique=True, nullable=False)

    users = relationship("User", secondary="usuarios_roles", back_populates="roles")

    def __repr__(self):
        return f"<Role(id={self.id}, nombre='{self.nombre}')>"


class User(Base):
    """
    User Model - Identity record for local and Google users

    Fields:
    - id: Primary key
    - nombre: Display name
    - email: Unique across all providers
    - password: bcrypt hash, only present for local users
    - foto_perfil: Profile picture URL (Google users)
    - proveedor: Authentication provider
    - creado_en: When the user was created
    """
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(150), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=True)
    foto_perfil = Column(String(500), nullable=True)
    proveedor = Column(
        Enum(AuthProvider, name="auth_provider", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=AuthProvider.LOCAL,
    )
    creado_en = Column(DateTime(timezone=True), server_default=func.now())

    roles = relationship("Role", secondary="usuarios_roles", back_populates="users")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', proveedor='{self.proveedor}')>"
