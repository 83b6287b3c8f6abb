"""
Admin bootstrap endpoints
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import logging

from app.api.deps import get_settings, get_store
from app.core.config import Settings
from app.core.errors import StoreError
from app.services.store_client import StoreClient
from app.services import admin_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/setup-admin")
def setup_admin(store: StoreClient = Depends(get_store), settings: Settings = Depends(get_settings)):
    """
    Create or update the admin user with a fresh password hash

    Safe to call repeatedly: the row is upserted by email.
    """
    try:
        admin = admin_service.setup_admin(store, settings)
    except StoreError as e:
        logger.error("Error creating admin user: %s", e.message)
        return JSONResponse(status_code=500, content={"success": False, "error": e.message})
    except Exception as e:
        logger.exception("Unexpected error creating admin user")
        return JSONResponse(status_code=500, content={"success": False, "error": str(e)})

    return {
        "success": True,
        "message": "Admin user created/updated successfully",
        "userId": admin["id"],
    }


@router.get("/setup-admin")
def inspect_admin(store: StoreClient = Depends(get_store), settings: Settings = Depends(get_settings)):
    """Report whether the admin user exists (read-only)"""
    try:
        admin = admin_service.get_admin_user(store, settings.ADMIN_EMAIL)
    except StoreError as e:
        return JSONResponse(status_code=500, content={"success": False, "error": e.message})

    return {
        "success": True,
        "exists": admin is not None,
        "userId": admin["id"] if admin else None,
    }
