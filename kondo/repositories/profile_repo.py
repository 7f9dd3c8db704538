from typing import Any, Optional

from supabase import Client

from kondo.models.profile_model import UserProfile
from kondo.repositories.base_repo import BaseRepository


class ProfileRepository(BaseRepository[UserProfile]):
    """Repositorio para la tabla profiles."""

    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.table_name = "profiles"

    def get_by_id(self, entity_id: str) -> Optional[UserProfile]:
        response = self._execute(
            self.supabase.table(self.table_name)
            .select("*")
            .eq("id", entity_id)
            .limit(1),
            "select",
        )
        return self._to_model(UserProfile, response.data[0]) if response.data else None

    def select_role(self, user_id: str) -> Optional[Any]:
        """Retorna el valor crudo de la columna role, o None si no hay perfil."""
        response = self._execute(
            self.supabase.table(self.table_name)
            .select("role")
            .eq("id", user_id)
            .limit(1),
            "select role",
        )
        if not response.data:
            return None
        return response.data[0].get("role")

    def update_fields(self, entity_id: str, fields: dict[str, Any]) -> Optional[UserProfile]:
        response = self._execute(
            self.supabase.table(self.table_name).update(fields).eq("id", entity_id),
            "update",
        )
        return self._to_model(UserProfile, response.data[0]) if response.data else None

    def select_all(self, order_by: str = "created_at", descending: bool = True) -> list[UserProfile]:
        response = self._execute(
            self.supabase.table(self.table_name).select("*").order(order_by, desc=descending),
            "select",
        )
        return [self._to_model(UserProfile, row) for row in response.data or []]
