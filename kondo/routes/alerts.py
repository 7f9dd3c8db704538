from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from kondo.models.alert_model import Alert
from kondo.routes.items.auth import CurrentActor
from kondo.routes.items.providers import get_alert_service
from kondo.services.alert_service import AlertService
from kondo.services.filters import filter_alerts

router = APIRouter(prefix="/alerts", tags=["alerts"])

AlertServiceDep = Annotated[AlertService, Depends(get_alert_service)]


class AlertCreateRequest(BaseModel):
    title: str
    description: str


@router.get("", response_model=list[Alert])
def list_alerts(actor: CurrentActor, service: AlertServiceDep, search: str = ""):
    return filter_alerts(service.list(), search)


@router.post("", response_model=Alert, status_code=status.HTTP_201_CREATED)
def create_alert(payload: AlertCreateRequest, actor: CurrentActor, service: AlertServiceDep):
    return service.create(payload.title, payload.description, actor.id, actor.role)


@router.get("/{alert_id}", response_model=Alert)
def get_alert(alert_id: str, actor: CurrentActor, service: AlertServiceDep):
    return service.get(alert_id)
