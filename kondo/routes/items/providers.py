import logging
from typing import Callable, TypeVar

from fastapi import HTTPException
from supabase import Client

from kondo.core.config import get_supabase
from kondo.repositories.alert_repo import AlertRepository
from kondo.repositories.incident_repo import IncidentRepository
from kondo.repositories.profile_repo import ProfileRepository
from kondo.services.alert_service import AlertService
from kondo.services.dashboard_service import DashboardService
from kondo.services.incident_service import IncidentService
from kondo.services.profile_service import ProfileService
from kondo.services.role_resolver import RoleResolver
from kondo.services.user_admin_service import UserAdminService

T = TypeVar("T")


def build_with_supabase(name: str, factory: Callable[[Client], T]) -> T:
    """
    Arma una dependencia sobre un cliente Supabase nuevo. Cualquier fallo de
    configuración se devuelve como HTTP 500 sin exponer el detalle.
    """
    try:
        return factory(get_supabase())
    except Exception as e:
        logging.error(f"Error initializing {name} dependencies: {e}")
        raise HTTPException(
            status_code=500, detail="Internal Server Error: Database dependency failed."
        )


def get_incident_service() -> IncidentService:
    return build_with_supabase(
        "IncidentService", lambda supabase: IncidentService(IncidentRepository(supabase))
    )


def get_alert_service() -> AlertService:
    return build_with_supabase(
        "AlertService", lambda supabase: AlertService(AlertRepository(supabase))
    )


def get_dashboard_service() -> DashboardService:
    return build_with_supabase(
        "DashboardService",
        lambda supabase: DashboardService(IncidentRepository(supabase), AlertRepository(supabase)),
    )


def get_profile_service() -> ProfileService:
    return build_with_supabase(
        "ProfileService", lambda supabase: ProfileService(ProfileRepository(supabase))
    )


def get_role_resolver() -> RoleResolver:
    return build_with_supabase(
        "RoleResolver", lambda supabase: RoleResolver(ProfileRepository(supabase))
    )


def get_user_admin_service() -> UserAdminService:
    return build_with_supabase("UserAdminService", UserAdminService)
