from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class Alert(BaseModel):
    """Aviso publicado por el síndico. No tiene estado ni se edita."""

    id: str
    sequential_id: Optional[int] = None
    title: str
    description: str
    user_id: str
    created_at: Optional[datetime] = None

    class Config:
        extra = "ignore"


class AlertCreate(BaseModel):
    title: str
    description: str
    user_id: str
