from typing import Optional

from supabase import Client

from kondo.errors import StoreError
from kondo.models.alert_model import Alert, AlertCreate
from kondo.repositories.base_repo import BaseRepository


class AlertRepository(BaseRepository[Alert]):
    """Repositorio para manejar los avisos del condominio en Supabase."""

    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.table_name = "alerts"

    def insert(self, entity: AlertCreate) -> Alert:
        """Inserta un aviso."""
        data = entity.model_dump(mode="json")
        response = self._execute(
            self.supabase.table(self.table_name).insert(data), "insert"
        )
        if not response.data:
            raise StoreError("insert on 'alerts' returned no rows")
        return self._to_model(Alert, response.data[0])

    def get_by_id(self, entity_id: str) -> Optional[Alert]:
        """Obtiene un aviso por su ID."""
        response = self._execute(
            self.supabase.table(self.table_name)
            .select("*")
            .eq("id", entity_id)
            .limit(1),
            "select",
        )
        return self._to_model(Alert, response.data[0]) if response.data else None

    def select_all(
        self,
        order_by: str = "created_at",
        descending: bool = True,
        limit: Optional[int] = None,
    ) -> list[Alert]:
        query = self.supabase.table(self.table_name).select("*").order(order_by, desc=descending)
        if limit is not None:
            query = query.limit(limit)
        response = self._execute(query, "select")
        return [self._to_model(Alert, row) for row in response.data or []]
