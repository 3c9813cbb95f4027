"""
Role resolution over the usuarios_roles join table.

Roles are never cached: every call reads the current assignment from storage.
"""
from typing import Set
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import Role, RoleName, UserRole

logger = logging.getLogger(__name__)


def roles_of(db: Session, user_id: int) -> Set[str]:
    """
    Get the names of all roles assigned to a user.

    Args:
        db: Database session
        user_id: ID of the user

    Returns:
        Set of role names, empty when the user has none
    """
    stmt = (
        select(Role.nombre)
        .join(UserRole, UserRole.rol_id == Role.id)
        .where(UserRole.usuario_id == user_id)
    )
    return set(db.scalars(stmt).all())


def has_role(db: Session, user_id: int, role_name: str) -> bool:
    """
    Check if a user holds a specific role.

    Args:
        db: Database session
        user_id: ID of the user
        role_name: Role to look for

    Returns:
        bool: True if the role is assigned
    """
    return role_name in roles_of(db, user_id)


def primary_role(roles: Set[str]) -> str:
    """
    Pick the role reported to clients after login.

    ADMIN wins over any other role; a user without roles is reported as CLIENTE.
    """
    if RoleName.ADMIN in roles:
        return RoleName.ADMIN
    if RoleName.CLIENTE in roles:
        return RoleName.CLIENTE
    return min(roles) if roles else RoleName.CLIENTE


def get_or_create_role(db: Session, role_name: str) -> Role:
    """
    Fetch a role by name, adding it to the session if missing.

    The caller owns the transaction.
    """
    role = db.scalar(select(Role).where(Role.nombre == role_name))
    if role is None:
        role = Role(nombre=role_name)
        db.add(role)
        db.flush()
        logger.info(f"Role created: {role_name}")
    return role


def assign_role(db: Session, user_id: int, role_name: str) -> bool:
    """
    Associate a role with a user inside the caller's transaction.

    Args:
        db: Database session
        user_id: ID of the user
        role_name: Role to assign

    Returns:
        bool: True if a new association was added, False if it already existed
    """
    role = get_or_create_role(db, role_name)
    if db.get(UserRole, (user_id, role.id)) is not None:
        return False
    db.add(UserRole(usuario_id=user_id, rol_id=role.id))
    db.flush()
    return True
