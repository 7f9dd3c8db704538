import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from kondo.errors import Forbidden, InvalidTransition, NotFound, StoreError, Unauthenticated, require_text
from kondo.models.incident_model import Incident, IncidentCreate
from kondo.models.incident_state import IncidentStateMachine, IncidentStatus
from kondo.models.role import Role
from kondo.repositories.incident_repo import IncidentRepository

logger = logging.getLogger("incidents")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class IncidentService:
    """
    Servicio que maneja el ciclo de vida de los incidentes.

    Las reglas de rol y de texto se verifican antes de cualquier llamada
    al repositorio; las de estado, después de leer el registro actual.
    """

    def __init__(
        self,
        incident_repository: IncidentRepository,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.incident_repository = incident_repository
        self.clock = clock or _utcnow

    def create(self, title: str, description: str, author_id: str) -> Incident:
        """
        Registra un incidente nuevo en estado Aberto.

        Args:
            title: Título breve del incidente
            description: Descripción detallada
            author_id: ID del morador que lo registra

        Returns:
            Incident creado
        """
        title = require_text(title, "title")
        description = require_text(description, "description")
        if not author_id:
            raise Unauthenticated("An authenticated user is required to create incidents")

        record = IncidentCreate(
            title=title,
            description=description,
            user_id=author_id,
            status=IncidentStateMachine.initial_state(),
        )
        incident = self.incident_repository.insert(record)
        logger.info("Incident created id=%s by user=%s", incident.id, author_id)
        return incident

    def get(self, incident_id: str) -> Incident:
        incident = self.incident_repository.get_by_id(incident_id)
        if incident is None:
            raise NotFound(f"Incident with ID '{incident_id}' not found")
        return incident

    def respond(self, incident_id: str, response_text: str, acting_role: Role) -> Incident:
        """Agrega la respuesta del síndico y pasa el incidente a Respondido."""
        self._require_sindico(acting_role, "respond to incidents")
        response_text = require_text(response_text, "response")

        return self._advance(
            incident_id,
            IncidentStatus.RESPONDED,
            {"response": response_text, "responded_at": self.clock().isoformat()},
        )

    def resolve(self, incident_id: str, closing_note: str, acting_role: Role) -> Incident:
        """Agrega la nota de cierre y pasa el incidente a Resolvido."""
        self._require_sindico(acting_role, "resolve incidents")
        closing_note = require_text(closing_note, "closing_note")

        return self._advance(
            incident_id,
            IncidentStatus.RESOLVED,
            {"closing_note": closing_note, "resolved_at": self.clock().isoformat()},
        )

    def list(self, acting_role: Role, actor_id: Optional[str] = None) -> list[Incident]:
        """
        Lista los incidentes, del más reciente al más antiguo.

        Para el síndico cada incidente trae los datos de su autor. Si la
        búsqueda de autores falla, los incidentes se retornan sin autor.
        """
        incidents = self.incident_repository.select_all(order_by="created_at", descending=True)
        if acting_role != Role.SINDICO or not incidents:
            return incidents

        try:
            authors = self.incident_repository.select_authors(i.user_id for i in incidents)
        except StoreError as e:
            logger.warning("Author lookup failed for incident listing (actor=%s): %s", actor_id, e)
            return incidents

        enriched = []
        for incident in incidents:
            author = authors.get(incident.user_id)
            if author is None:
                logger.warning(
                    "Author %s not found for incident id=%s", incident.user_id, incident.id
                )
                enriched.append(incident)
                continue
            enriched.append(incident.model_copy(update={"author": author}))
        return enriched

    def _advance(self, incident_id: str, target: IncidentStatus, fields: dict) -> Incident:
        current = self.get(incident_id)
        IncidentStateMachine.assert_transition(current.status, target)

        updated = self.incident_repository.update_fields(
            incident_id,
            {"status": target.value, **fields},
            expected_status=current.status,
        )
        if updated is None:
            # Otra escritura avanzó el incidente entre la lectura y el update.
            raise InvalidTransition(
                f"Incident '{incident_id}' is no longer {current.status.value}"
            )

        logger.info(
            "Incident id=%s moved %s -> %s", incident_id, current.status.value, target.value
        )
        return updated

    @staticmethod
    def _require_sindico(acting_role: Role, action: str) -> None:
        if acting_role != Role.SINDICO:
            raise Forbidden(f"Only the síndico can {action}")
