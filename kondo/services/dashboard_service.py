from kondo.repositories.alert_repo import AlertRepository
from kondo.repositories.incident_repo import IncidentRepository

RECENT_LIMIT = 5


class DashboardService:
    """Resumen de la página inicial: últimos incidentes y avisos."""

    def __init__(self, incident_repository: IncidentRepository, alert_repository: AlertRepository):
        self.incident_repository = incident_repository
        self.alert_repository = alert_repository

    def recent(self, limit: int = RECENT_LIMIT) -> dict:
        return {
            "incidents": self.incident_repository.select_all(limit=limit),
            "alerts": self.alert_repository.select_all(limit=limit),
        }
