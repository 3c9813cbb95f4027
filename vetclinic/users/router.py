"""
User Router - administrator user listing.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth.dependencies import require_admin
from ..core.security import TokenSubject
from ..database import get_db
from .schemas import UserListResponse
from .service import list_users

router = APIRouter()


@router.get("/usuarios", response_model=UserListResponse)
def list_users_route(
    db: Session = Depends(get_db),
    current_user: TokenSubject = Depends(require_admin),
):
    """
    List every user. Administrators only.
    """
    return UserListResponse(usuarios=list_users(db))
