"""
Shared API dependencies
"""
from fastapi import Depends, Request

from app.core.config import Settings
from app.services.connection_provider import ConnectionProvider
from app.services.store_client import Privilege, StoreClient


def get_provider(request: Request) -> ConnectionProvider:
    return request.app.state.store_provider


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(provider: ConnectionProvider = Depends(get_provider)) -> StoreClient:
    """Full-privilege store client for trusted server-side handlers"""
    return provider.client_for(Privilege.FULL).client
