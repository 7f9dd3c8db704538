from typing import Annotated

from fastapi import APIRouter, Depends

from kondo.models.profile_model import ProfileUpdate, UserProfile
from kondo.routes.items.auth import CurrentActor
from kondo.routes.items.providers import get_profile_service
from kondo.services.profile_service import ProfileService

router = APIRouter(prefix="/me", tags=["me"])

ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]


@router.get("/role")
def get_current_user_role(actor: CurrentActor):
    return {"role": actor.role.value}


@router.get("/profile", response_model=UserProfile)
def get_profile(actor: CurrentActor, service: ProfileServiceDep):
    profile = service.get(actor.id, email=actor.email)
    return profile.model_copy(update={"role": actor.role})


@router.patch("/profile", response_model=UserProfile)
def update_profile(payload: ProfileUpdate, actor: CurrentActor, service: ProfileServiceDep):
    return service.update(actor.id, payload)
