from typing import Any, Iterable, Optional

from supabase import Client

from kondo.errors import StoreError
from kondo.models.incident_model import AuthorInfo, Incident, IncidentCreate
from kondo.models.incident_state import IncidentStatus
from kondo.repositories.base_repo import BaseRepository

AUTHOR_COLUMNS = "id, full_name, apartment, block"


class IncidentRepository(BaseRepository[Incident]):
    """Repositorio para la tabla de incidentes en Supabase. No valida nada."""

    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.table_name = "incidents"
        self.profiles_table = "profiles"

    def insert(self, entity: IncidentCreate) -> Incident:
        data = entity.model_dump(mode="json")
        response = self._execute(
            self.supabase.table(self.table_name).insert(data), "insert"
        )
        if not response.data:
            raise StoreError("insert on 'incidents' returned no rows")
        return self._to_model(Incident, response.data[0])

    def get_by_id(self, entity_id: str) -> Optional[Incident]:
        response = self._execute(
            self.supabase.table(self.table_name)
            .select("*")
            .eq("id", entity_id)
            .limit(1),
            "select",
        )
        return self._to_model(Incident, response.data[0]) if response.data else None

    def update_fields(
        self,
        entity_id: str,
        fields: dict[str, Any],
        expected_status: Optional[IncidentStatus] = None,
    ) -> Optional[Incident]:
        """
        Actualiza campos de un incidente.

        Con expected_status solo se actualiza si la fila sigue en ese estado;
        si otra escritura la avanzó antes, no hay filas afectadas y se retorna None.
        """
        query = self.supabase.table(self.table_name).update(fields).eq("id", entity_id)
        if expected_status is not None:
            query = query.eq("status", expected_status.value)
        response = self._execute(query, "update")
        return self._to_model(Incident, response.data[0]) if response.data else None

    def select_all(
        self,
        order_by: str = "created_at",
        descending: bool = True,
        limit: Optional[int] = None,
    ) -> list[Incident]:
        query = self.supabase.table(self.table_name).select("*").order(order_by, desc=descending)
        if limit is not None:
            query = query.limit(limit)
        response = self._execute(query, "select")
        return [self._to_model(Incident, row) for row in response.data or []]

    def select_author(self, user_id: str) -> Optional[AuthorInfo]:
        return self.select_authors([user_id]).get(user_id)

    def select_authors(self, user_ids: Iterable[str]) -> dict[str, AuthorInfo]:
        """Busca en una sola consulta los perfiles de varios autores."""
        ids = sorted(set(user_ids))
        if not ids:
            return {}
        response = self._execute(
            self.supabase.table(self.profiles_table)
            .select(AUTHOR_COLUMNS)
            .in_("id", ids),
            "select authors",
        )
        return {row["id"]: self._to_model(AuthorInfo, row) for row in response.data or []}
