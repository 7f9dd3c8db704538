from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from kondo.models.alert_model import Alert
from kondo.models.incident_model import Incident
from kondo.routes.items.auth import CurrentActor
from kondo.routes.items.providers import get_dashboard_service
from kondo.services.dashboard_service import DashboardService

router = APIRouter(tags=["dashboard"])


class DashboardResponse(BaseModel):
    incidents: list[Incident]
    alerts: list[Alert]


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(actor: CurrentActor, service: Annotated[DashboardService, Depends(get_dashboard_service)]):
    return service.recent()
