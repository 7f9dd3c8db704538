from typing import Iterable, Optional, Union

from kondo.errors import ValidationError
from kondo.models.alert_model import Alert
from kondo.models.incident_model import Incident
from kondo.models.incident_state import IncidentStatus
from kondo.models.profile_model import UserProfile


def _contains(value: Optional[str], needle: str) -> bool:
    return needle in (value or "").lower()


def filter_incidents(
    incidents: Iterable[Incident],
    search_text: str = "",
    status_filter: Union[IncidentStatus, str, None] = "",
) -> list[Incident]:
    """
    Filtra incidentes por texto en el título y por estado.

    Un texto o estado vacío no filtra y un estado desconocido no coincide con
    ningún incidente. Mantiene el orden de entrada y no modifica la colección
    original.
    """
    needle = (search_text or "").lower()
    status = None
    if status_filter:
        try:
            status = IncidentStatus.parse(status_filter)
        except ValidationError:
            return []

    return [
        incident
        for incident in incidents
        if _contains(incident.title, needle)
        and (status is None or incident.status == status)
    ]


def filter_alerts(alerts: Iterable[Alert], search_text: str = "") -> list[Alert]:
    """Filtra avisos cuyo título o descripción contenga el texto."""
    needle = (search_text or "").lower()
    return [
        alert
        for alert in alerts
        if _contains(alert.title, needle) or _contains(alert.description, needle)
    ]


def filter_profiles(profiles: Iterable[UserProfile], search_text: str = "") -> list[UserProfile]:
    """Filtra perfiles por nombre, email, apartamento o bloque."""
    needle = (search_text or "").lower()
    return [
        profile
        for profile in profiles
        if any(
            _contains(value, needle)
            for value in (profile.full_name, profile.email, profile.apartment, profile.block)
        )
    ]
