import logging
from typing import Optional

from kondo.errors import Forbidden, NotFound, Unauthenticated, require_text
from kondo.models.alert_model import Alert, AlertCreate
from kondo.models.role import Role
from kondo.repositories.alert_repo import AlertRepository

logger = logging.getLogger("alerts")


class AlertService:
    """
    Servicio para los avisos que el síndico publica para el condominio.
    """

    def __init__(self, alert_repository: AlertRepository):
        self.alert_repository = alert_repository

    def create(self, title: str, description: str, author_id: str, acting_role: Role) -> Alert:
        """
        Publica un aviso.

        Args:
            title: Título del aviso
            description: Contenido del aviso
            author_id: ID del síndico que lo publica
            acting_role: Rol del actor

        Returns:
            Alert creado
        """
        if acting_role != Role.SINDICO:
            raise Forbidden("Only the síndico can post alerts")
        title = require_text(title, "title")
        description = require_text(description, "description")
        if not author_id:
            raise Unauthenticated("An authenticated user is required to post alerts")

        alert = self.alert_repository.insert(
            AlertCreate(title=title, description=description, user_id=author_id)
        )
        logger.info("Alert created id=%s by user=%s", alert.id, author_id)
        return alert

    def get(self, alert_id: str) -> Alert:
        alert = self.alert_repository.get_by_id(alert_id)
        if alert is None:
            raise NotFound(f"Alert with ID '{alert_id}' not found")
        return alert

    def list(self, limit: Optional[int] = None) -> list[Alert]:
        return self.alert_repository.select_all(order_by="created_at", descending=True, limit=limit)
