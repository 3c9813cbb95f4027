"""
User Service - read access to users for administrators.
"""
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..auth.models import User


def list_users(db: Session) -> List[User]:
    """
    Get all users, newest first.

    Args:
        db: Database session

    Returns:
        List of users
    """
    return list(db.scalars(select(User).order_by(User.id.desc())).all())
