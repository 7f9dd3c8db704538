import logging
from datetime import datetime, timezone

from kondo.errors import Forbidden, NotFound, Unauthenticated, ValidationError
from kondo.models.profile_model import ProfileUpdate, UserProfile
from kondo.models.role import Role
from kondo.repositories.profile_repo import ProfileRepository

logger = logging.getLogger("profiles")


class ProfileService:
    """
    Servicio para los perfiles de los usuarios del condominio.
    """

    def __init__(self, profile_repository: ProfileRepository):
        self.profile_repository = profile_repository

    def get(self, actor_id: str, email: str | None = None) -> UserProfile:
        """
        Obtiene el perfil del actor. El email viene del proveedor de identidad
        cuando la tabla profiles no lo guarda.
        """
        if not actor_id:
            raise Unauthenticated("No authenticated actor")
        profile = self.profile_repository.get_by_id(actor_id)
        if profile is None:
            raise NotFound(f"Profile for user '{actor_id}' not found")
        if email and not profile.email:
            profile = profile.model_copy(update={"email": email})
        return profile

    def update(self, actor_id: str, changes: ProfileUpdate) -> UserProfile:
        """Actualiza nombre, apartamento y bloque del propio perfil."""
        if not actor_id:
            raise Unauthenticated("No authenticated actor")
        fields = changes.model_dump(exclude_none=True)
        if not fields:
            raise ValidationError("No fields provided for update")
        fields["updated_at"] = datetime.now(timezone.utc).isoformat()

        updated = self.profile_repository.update_fields(actor_id, fields)
        if updated is None:
            raise NotFound(f"Profile for user '{actor_id}' not found")
        logger.info("Profile updated for user=%s fields=%s", actor_id, sorted(fields))
        return updated

    def list(self, acting_role: Role) -> list[UserProfile]:
        if acting_role != Role.SINDICO:
            raise Forbidden("Only the síndico can list users")
        return self.profile_repository.select_all(order_by="created_at", descending=True)

    def change_role(self, target_id: str, new_role: Role, actor_id: str, acting_role: Role) -> UserProfile:
        """
        Cambia el rol de otro usuario. El síndico no puede cambiar su propio rol.
        """
        if acting_role != Role.SINDICO:
            raise Forbidden("Only the síndico can change roles")
        if target_id == actor_id:
            raise Forbidden("The síndico cannot change their own role")

        updated = self.profile_repository.update_fields(target_id, {"role": Role(new_role).value})
        if updated is None:
            raise NotFound(f"Profile for user '{target_id}' not found")
        logger.info("Role of user=%s set to %s by user=%s", target_id, updated.role.value, actor_id)
        return updated
