import logging
from typing import Optional

from kondo.errors import RoleLookupError, StoreError, Unauthenticated
from kondo.models.role import Role
from kondo.repositories.profile_repo import ProfileRepository

logger = logging.getLogger("roles")


class RoleResolver:
    """
    Determina si el actor es síndico o morador consultando su perfil.

    No guarda nada en caché: cada request vuelve a consultar el rol.
    """

    def __init__(self, profile_repository: ProfileRepository):
        self.profile_repository = profile_repository

    def resolve(self, actor_id: Optional[str]) -> Role:
        """
        Args:
            actor_id: ID del usuario autenticado

        Returns:
            Role del actor

        Raises:
            Unauthenticated: si no hay actor
            RoleLookupError: si la consulta a Supabase falla
        """
        if not actor_id:
            raise Unauthenticated("No authenticated actor")

        try:
            raw_role = self.profile_repository.select_role(actor_id)
        except StoreError as e:
            raise RoleLookupError(f"Role lookup failed for user {actor_id}: {e}") from e

        return Role.parse(raw_role)

    def resolve_or_default(self, actor_id: Optional[str]) -> Role:
        """Igual que resolve, pero ante un fallo de consulta retorna morador."""
        try:
            return self.resolve(actor_id)
        except RoleLookupError as e:
            logger.warning("Treating user %s as morador: %s", actor_id, e)
            return Role.MORADOR
