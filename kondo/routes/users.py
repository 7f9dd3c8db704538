import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from kondo.core.config import get_password_reset_redirect
from kondo.models.profile_model import UserProfile
from kondo.models.role import Role
from kondo.routes.items.auth import SindicoActor
from kondo.routes.items.providers import get_profile_service, get_user_admin_service
from kondo.services.filters import filter_profiles
from kondo.services.profile_service import ProfileService
from kondo.services.user_admin_service import UserAdminService

router = APIRouter(tags=["users"])

logger = logging.getLogger("user_admin")

ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]
UserAdminServiceDep = Annotated[UserAdminService, Depends(get_user_admin_service)]


class RoleChangeRequest(BaseModel):
    role: Role


class ManageUsersRequest(BaseModel):
    action: Optional[str] = None
    email: Optional[str] = None


@router.get("/users", response_model=list[UserProfile])
def list_users(actor: SindicoActor, service: ProfileServiceDep, search: str = ""):
    return filter_profiles(service.list(actor.role), search)


@router.patch("/users/{user_id}/role", response_model=UserProfile)
def change_user_role(
    user_id: str, payload: RoleChangeRequest, actor: SindicoActor, service: ProfileServiceDep
):
    return service.change_role(user_id, payload.role, actor.id, actor.role)


@router.post("/users/{user_id}/password-reset")
def reset_user_password(
    user_id: str,
    actor: SindicoActor,
    profiles: ProfileServiceDep,
    admin: UserAdminServiceDep,
):
    profile = profiles.get(user_id)
    email = profile.email
    if not email:
        email = next((u.email for u in admin.list_users() if u.id == user_id), None)
    admin.send_password_reset(email, get_password_reset_redirect())
    return {"message": f"Password reset email sent to {email}"}


@router.post("/admin/users")
def manage_users(payload: ManageUsersRequest, actor: SindicoActor, admin: UserAdminServiceDep):
    """
    Acciones de administración de usuarios:
    - {"action": "list"} -> {"users": [...]}
    - {"action": "delete", "email": "..."} -> {"message": "..."}
    """
    if payload.action == "list":
        return {"users": [user.model_dump(mode="json") for user in admin.list_users()]}
    if payload.action == "delete" and payload.email:
        message = admin.delete_user(payload.email)
        logger.info("User %s deleted by síndico %s", payload.email, actor.id)
        return {"message": message}
    raise HTTPException(status_code=400, detail='Invalid action. Use "list" or "delete"')
