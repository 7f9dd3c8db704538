import logging
import os

from dotenv import load_dotenv
from supabase import Client, create_client

load_dotenv()

DEFAULT_LOG_LEVEL = "INFO"


def get_supabase() -> Client:
    """
    Cliente con la service role key. La API valida el token y aplica los
    permisos por rol, así que tablas y admin API de auth usan el mismo cliente.
    """
    SUPABASE_URL = os.getenv("SUPABASE_URL")
    SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")
    if not SUPABASE_SERVICE_ROLE_KEY:
        raise RuntimeError("SUPABASE_SERVICE_ROLE_KEY not set")
    return create_client(SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY)


def get_log_level() -> int:
    name = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_password_reset_redirect() -> str | None:
    return os.getenv("PASSWORD_RESET_REDIRECT_URL") or None
