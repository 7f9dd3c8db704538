class KondoError(Exception):
    """Error base del dominio del condominio."""

    status_code = 500


class ValidationError(KondoError):
    """Entrada vacía o inválida."""

    status_code = 400


class Unauthenticated(KondoError):
    """No hay un actor autenticado."""

    status_code = 401


class Forbidden(KondoError):
    """El rol del actor no permite la operación."""

    status_code = 403


class NotFound(KondoError):
    """El registro pedido no existe."""

    status_code = 404


class InvalidTransition(KondoError):
    """El estado actual del incidente no admite la transición pedida."""

    status_code = 409


class StoreError(KondoError):
    """Falló una llamada a Supabase."""

    status_code = 502


class RoleLookupError(StoreError):
    """No se pudo obtener el rol del actor."""


def require_text(value: str | None, field: str) -> str:
    """Valida que un texto no quede vacío tras recortar espacios."""
    if value is None or not value.strip():
        raise ValidationError(f"'{field}' must not be empty")
    return value.strip()
