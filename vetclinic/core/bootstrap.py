"""
Bootstrap utilities run at application startup.

Creates missing tables, seeds the roles the application relies on and
creates the first administrator from environment variables.
"""
import logging
from typing import List

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from ..auth.models import AuthProvider, Role, RoleName, User, UserRole
from ..auth.roles import assign_role, get_or_create_role
from ..config import Settings
from ..database import Base
from .security import hash_password

# Import the remaining models so Base.metadata knows every table
from ..appointments import models as _appointment_models  # noqa: F401
from ..pets import models as _pet_models  # noqa: F401
from ..veterinarians import models as _veterinarian_models  # noqa: F401

logger = logging.getLogger(__name__)

DEFAULT_ROLES = (RoleName.ADMIN, RoleName.CLIENTE)


def create_tables(engine: Engine) -> None:
    """Create tables that do not exist yet."""
    Base.metadata.create_all(bind=engine)


def seed_roles(db: Session) -> None:
    """
    Make sure the default roles exist. Safe to call repeatedly.

    Args:
        db: Database session
    """
    for role_name in DEFAULT_ROLES:
        get_or_create_role(db, role_name)
    db.commit()


def list_admins(db: Session) -> List[User]:
    """
    Get every user holding the ADMIN role.
    """
    stmt = (
        select(User)
        .join(UserRole, UserRole.usuario_id == User.id)
        .join(Role, Role.id == UserRole.rol_id)
        .where(Role.nombre == RoleName.ADMIN)
        .order_by(User.id)
    )
    return list(db.scalars(stmt).all())


def admin_exists(db: Session) -> bool:
    """
    Check if any user holds the ADMIN role.

    Args:
        db: Database session

    Returns:
        bool: True if at least one admin exists, False otherwise
    """
    stmt = (
        select(func.count())
        .select_from(UserRole)
        .join(Role, Role.id == UserRole.rol_id)
        .where(Role.nombre == RoleName.ADMIN)
    )
    return (db.scalar(stmt) or 0) > 0


def grant_role(db: Session, email: str, role_name: str) -> bool:
    """
    Grant a role to an existing user.

    Args:
        db: Database session
        email: Email of the user
        role_name: Role to grant

    Returns:
        bool: True if the role was newly granted, False if already held

    Raises:
        LookupError: If no user has that email
    """
    user = db.scalar(select(User).where(User.email == email.strip().lower()))
    if user is None:
        raise LookupError(f"No user with email {email}")
    try:
        granted = assign_role(db, user.id, role_name)
        db.commit()
    except Exception:
        db.rollback()
        raise
    if granted:
        logger.info(f"Role {role_name} granted to user {user.id} ({user.email})")
    return granted


def create_bootstrap_admin(db: Session, settings: Settings) -> bool:
    """
    Create the first admin user from environment variables.

    Args:
        db: Database session
        settings: Application settings

    Returns:
        bool: True if admin was created successfully, False otherwise
    """
    if not settings.bootstrap_admin_email or not settings.bootstrap_admin_password:
        logger.warning("Bootstrap admin credentials not provided in environment variables")
        return False

    email = settings.bootstrap_admin_email.strip().lower()
    if db.scalar(select(User).where(User.email == email)) is not None:
        logger.warning(f"Bootstrap failed: Email {email} already exists")
        return False

    admin = User(
        nombre=settings.bootstrap_admin_name,
        email=email,
        password=hash_password(settings.bootstrap_admin_password),
        proveedor=AuthProvider.LOCAL,
    )
    try:
        db.add(admin)
        db.flush()
        assign_role(db, admin.id, RoleName.ADMIN)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Bootstrap admin created: {admin.email} (ID: {admin.id})")
    return True


def bootstrap_admin_if_needed(db: Session, settings: Settings) -> None:
    """
    Check if admin exists and create bootstrap admin if needed.
    This function should be called during application startup.

    Args:
        db: Database session
        settings: Application settings
    """
    if admin_exists(db):
        logger.info("Admin users found. Bootstrap not needed.")
        return

    logger.info("No admin users found. Attempting bootstrap admin creation...")
    if not create_bootstrap_admin(db, settings):
        logger.info("To create the first admin, set BOOTSTRAP_ADMIN_EMAIL and BOOTSTRAP_ADMIN_PASSWORD in your .env file.")
