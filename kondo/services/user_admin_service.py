import logging
from typing import Any, Optional

from supabase import Client

from kondo.errors import NotFound, StoreError, ValidationError, require_text
from kondo.models.profile_model import AuthUser

logger = logging.getLogger("user_admin")


def _to_auth_user(user: Any) -> AuthUser:
    if isinstance(user, dict):
        return AuthUser(**user)
    return AuthUser.model_validate(user, from_attributes=True)


class UserAdminService:
    """
    Operaciones sobre usuarios del proveedor de identidad. Usa el cliente
    con la service role key.
    """

    def __init__(self, supabase_admin: Client):
        self.supabase = supabase_admin

    def list_users(self) -> list[AuthUser]:
        try:
            users = self.supabase.auth.admin.list_users()
        except Exception as e:
            raise StoreError(f"Listing auth users failed: {e}") from e
        return [_to_auth_user(user) for user in users or []]

    def delete_user(self, email: str) -> str:
        """
        Elimina el usuario con ese email.

        Returns:
            Mensaje de confirmación
        """
        email = require_text(email, "email")
        user = next((u for u in self.list_users() if u.email == email), None)
        if user is None:
            raise NotFound("User not found")

        try:
            self.supabase.auth.admin.delete_user(user.id)
        except Exception as e:
            raise StoreError(f"Deleting auth user {user.id} failed: {e}") from e

        logger.info("Auth user deleted id=%s", user.id)
        return f"User {email} deleted successfully"

    def send_password_reset(self, email: Optional[str], redirect_to: Optional[str] = None) -> None:
        if not email:
            raise ValidationError("User has no email address")
        options = {"redirect_to": redirect_to} if redirect_to else {}
        try:
            self.supabase.auth.reset_password_for_email(email, options)
        except Exception as e:
            raise StoreError(f"Password reset for {email} failed: {e}") from e
        logger.info("Password reset email sent to %s", email)
