import logging
from enum import Enum
from typing import Any

logger = logging.getLogger("roles")


class Role(str, Enum):
    """Roles del condominio."""

    SINDICO = "sindico"
    MORADOR = "morador"

    @classmethod
    def parse(cls, value: Any) -> "Role":
        """
        Convierte el valor crudo que llega de Supabase en un Role.

        Cualquier valor desconocido se trata como morador, el rol con menos
        privilegios.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for role in cls:
                if role.value == normalized:
                    return role
        logger.warning("Unknown role value %r, falling back to morador", value)
        return cls.MORADOR
