from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as RowValidationError

from kondo.errors import StoreError

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class BaseRepository(ABC, Generic[T]):
    table_name: str = ""

    @abstractmethod
    def get_by_id(self, entity_id: Any) -> Optional[T]:
        """Obtiene una entidad por su ID."""
        pass

    @abstractmethod
    def select_all(self, order_by: str = "created_at", descending: bool = True) -> list[T]:
        """Lista todas las entidades ordenadas por una columna."""
        pass

    def _execute(self, query: Any, action: str) -> Any:
        """Ejecuta una consulta de Supabase, envolviendo cualquier fallo en StoreError."""
        try:
            return query.execute()
        except Exception as e:
            raise StoreError(f"{action} on '{self.table_name}' failed: {e}") from e

    def _to_model(self, model: type[M], row: dict[str, Any]) -> M:
        """Convierte una fila en modelo; una fila con datos inesperados es un StoreError."""
        try:
            return model(**row)
        except RowValidationError as e:
            raise StoreError(f"unexpected row in {self.table_name}: {e}") from e
