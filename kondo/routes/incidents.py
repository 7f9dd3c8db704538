from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from kondo.models.incident_model import Incident
from kondo.routes.items.auth import CurrentActor
from kondo.routes.items.providers import get_incident_service
from kondo.services.filters import filter_incidents
from kondo.services.incident_service import IncidentService

router = APIRouter(prefix="/incidents", tags=["incidents"])

IncidentServiceDep = Annotated[IncidentService, Depends(get_incident_service)]


class IncidentCreateRequest(BaseModel):
    title: str
    description: str


class IncidentResponseRequest(BaseModel):
    response: str


class IncidentResolutionRequest(BaseModel):
    closing_note: str


@router.get("", response_model=list[Incident])
def list_incidents(
    actor: CurrentActor,
    service: IncidentServiceDep,
    search: str = "",
    status_filter: str = Query(default="", alias="status"),
):
    incidents = service.list(actor.role, actor.id)
    return filter_incidents(incidents, search, status_filter)


@router.post("", response_model=Incident, status_code=status.HTTP_201_CREATED)
def create_incident(payload: IncidentCreateRequest, actor: CurrentActor, service: IncidentServiceDep):
    return service.create(payload.title, payload.description, actor.id)


@router.get("/{incident_id}", response_model=Incident)
def get_incident(incident_id: str, actor: CurrentActor, service: IncidentServiceDep):
    return service.get(incident_id)


@router.post("/{incident_id}/response", response_model=Incident)
def respond_incident(
    incident_id: str,
    payload: IncidentResponseRequest,
    actor: CurrentActor,
    service: IncidentServiceDep,
):
    return service.respond(incident_id, payload.response, actor.role)


@router.post("/{incident_id}/resolution", response_model=Incident)
def resolve_incident(
    incident_id: str,
    payload: IncidentResolutionRequest,
    actor: CurrentActor,
    service: IncidentServiceDep,
):
    return service.resolve(incident_id, payload.closing_note, actor.role)
