from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from kondo.models.incident_state import IncidentStatus


class AuthorInfo(BaseModel):
    """Datos del autor que ve el síndico en el listado."""

    full_name: Optional[str] = None
    apartment: Optional[str] = None
    block: Optional[str] = None

    class Config:
        extra = "ignore"


class Incident(BaseModel):
    id: str  # PK, asignado por la base
    sequential_id: Optional[int] = None
    title: str
    description: str
    user_id: str
    status: IncidentStatus = IncidentStatus.OPEN
    created_at: Optional[datetime] = None
    response: Optional[str] = None
    responded_at: Optional[datetime] = None
    closing_note: Optional[str] = None
    resolved_at: Optional[datetime] = None
    author: Optional[AuthorInfo] = None

    class Config:
        extra = "ignore"


class IncidentCreate(BaseModel):
    """Registro que se inserta al crear un incidente."""

    title: str
    description: str
    user_id: str
    status: IncidentStatus = IncidentStatus.OPEN
