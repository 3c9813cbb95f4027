"""
User listing schemas.
"""
from typing import List

from pydantic import BaseModel, ConfigDict


class UserSummary(BaseModel):
    """Row of the administrator user listing"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    email: str


class UserListResponse(BaseModel):
    ok: bool = True
    usuarios: List[UserSummary]
