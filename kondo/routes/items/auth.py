import logging
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel
from supabase import Client

from kondo.models.role import Role
from kondo.routes.items.providers import build_with_supabase, get_role_resolver
from kondo.services.role_resolver import RoleResolver

logger = logging.getLogger("auth")

bearer_scheme = HTTPBearer(auto_error=False)


class Actor(BaseModel):
    """Usuario autenticado que hace la request, con su rol ya resuelto."""

    id: str
    email: Optional[str] = None
    role: Role = Role.MORADOR

    @property
    def is_sindico(self) -> bool:
        return self.role == Role.SINDICO


def get_auth_client() -> Client:
    return build_with_supabase("Supabase auth client", lambda supabase: supabase)


def get_current_actor(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Security(bearer_scheme)],
    supabase: Annotated[Client, Depends(get_auth_client)],
    resolver: Annotated[RoleResolver, Depends(get_role_resolver)],
) -> Actor:
    """
    Valida el bearer token contra Supabase Auth y resuelve el rol del usuario.
    Si la consulta del rol falla, el actor queda como morador.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Not authenticated")

    try:
        response = supabase.auth.get_user(credentials.credentials)
    except Exception as e:
        logger.warning("Token validation failed: %s", e)
        raise HTTPException(status_code=401, detail="Invalid authentication credentials")

    user = getattr(response, "user", None)
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid authentication credentials")

    role = resolver.resolve_or_default(user.id)
    return Actor(id=user.id, email=getattr(user, "email", None), role=role)


def require_sindico(actor: Annotated[Actor, Depends(get_current_actor)]) -> Actor:
    if not actor.is_sindico:
        raise HTTPException(status_code=403, detail="Insufficient permissions")
    return actor


CurrentActor = Annotated[Actor, Depends(get_current_actor)]
SindicoActor = Annotated[Actor, Depends(require_sindico)]
