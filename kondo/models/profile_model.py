from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from kondo.models.role import Role


class UserProfile(BaseModel):
    id: str
    full_name: Optional[str] = None
    email: Optional[str] = None
    apartment: Optional[str] = None
    block: Optional[str] = None
    role: Role = Role.MORADOR
    created_at: Optional[datetime] = None

    class Config:
        extra = "ignore"

    @field_validator("role", mode="before")
    @classmethod
    def _parse_role(cls, value):
        return Role.parse(value)


class ProfileUpdate(BaseModel):
    """Campos que el propio usuario puede cambiar."""

    full_name: Optional[str] = None
    apartment: Optional[str] = None
    block: Optional[str] = None

    class Config:
        extra = "forbid"


class AuthUser(BaseModel):
    """Usuario del proveedor de identidad, tal como lo lista el admin API."""

    id: str
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    last_sign_in_at: Optional[datetime] = None

    class Config:
        extra = "ignore"
