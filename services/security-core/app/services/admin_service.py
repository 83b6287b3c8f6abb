"""
Admin account bootstrap
"""
from typing import Any, Dict, Optional
import logging

from app.core.config import Settings
from app.core.errors import ConfigurationError, NotFoundError
from app.core.security import hash_password
from app.services.records import now_iso, unwrap, unwrap_row
from app.services.store_client import StoreClient

logger = logging.getLogger(__name__)

ADMIN_USERS_TABLE = "security_admin_users"


def setup_admin(store: StoreClient, settings: Settings) -> Dict[str, Any]:
    """
    Create or refresh the admin account (idempotent)

    Upserts by email, so repeated calls keep the same row id and only
    replace the password hash.
    """
    if not settings.ADMIN_PASSWORD:
        raise ConfigurationError("ADMIN_PASSWORD is not configured", code="not_configured")

    row = {
        "email": settings.ADMIN_EMAIL.lower(),
        "password_hash": hash_password(settings.ADMIN_PASSWORD),
        "name": settings.ADMIN_NAME,
        "role": "admin",
        "is_active": True,
        "updated_at": now_iso(),
    }
    admin = unwrap(store.upsert(ADMIN_USERS_TABLE, row, on_conflict="email"), "set up admin user")
    logger.info("Admin user %s created/updated", admin.get("id"))
    return admin


def get_admin_user(store: StoreClient, email: str) -> Optional[Dict[str, Any]]:
    """Look up an admin account by email, None if absent"""
    result = store.select(ADMIN_USERS_TABLE, filters={"email": email.lower()}, single=True)
    try:
        return unwrap_row(result, "get admin user", "Admin user")
    except NotFoundError:
        return None
