from enum import Enum
from typing import Optional

from kondo.errors import InvalidTransition, ValidationError


class IncidentStatus(str, Enum):
    """Estados de un incidente, con los valores que guarda la tabla."""

    OPEN = "Aberto"
    RESPONDED = "Respondido"
    RESOLVED = "Resolvido"

    @classmethod
    def parse(cls, value: "IncidentStatus | str") -> "IncidentStatus":
        """Acepta el valor guardado ('Resolvido') o el nombre del estado ('resolved')."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for status in cls:
            if text == status.value or text.upper() == status.name:
                return status
        raise ValidationError(f"Unknown incident status: {value!r}")


class IncidentStateMachine:
    """Valida el ciclo de vida Aberto -> Respondido -> Resolvido."""

    _TRANSITIONS: dict[IncidentStatus, Optional[IncidentStatus]] = {
        IncidentStatus.OPEN: IncidentStatus.RESPONDED,
        IncidentStatus.RESPONDED: IncidentStatus.RESOLVED,
        IncidentStatus.RESOLVED: None,
    }

    @classmethod
    def initial_state(cls) -> IncidentStatus:
        return IncidentStatus.OPEN

    @classmethod
    def is_terminal(cls, status: IncidentStatus) -> bool:
        return cls._TRANSITIONS.get(status) is None

    @classmethod
    def can_transition(cls, current: IncidentStatus, new: IncidentStatus) -> bool:
        return cls._TRANSITIONS.get(current) == new

    @classmethod
    def assert_transition(cls, current: IncidentStatus, new: IncidentStatus) -> None:
        if not cls.can_transition(current, new):
            raise InvalidTransition(
                f"Invalid incident status transition: {current.value} -> {new.value}"
            )
