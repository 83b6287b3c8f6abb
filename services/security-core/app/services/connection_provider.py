"""
Connection provider for the hosted store

Builds one store handle per privilege tier on first use and keeps it for the
life of the provider. Missing configuration never raises here: the caller
gets a stub (or a narrower tier) and the handle says which tier was granted.
"""
from dataclasses import dataclass
from typing import Dict
import logging

from sqlalchemy.exc import ArgumentError

from app.core.config import Settings
from app.core.database import make_engine
from app.services.rest_store_client import RestStoreClient
from app.services.sql_store_client import SqlStoreClient
from app.services.store_client import Privilege, StoreClient, UnconfiguredStoreClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreHandle:
    client: StoreClient
    requested: Privilege
    granted: Privilege

    @property
    def degraded(self) -> bool:
        return self.granted != self.requested


class ConnectionProvider:
    """Lazily constructs and memoizes store handles per privilege tier"""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._handles: Dict[Privilege, StoreHandle] = {}

    def client_for(self, privilege: Privilege) -> StoreHandle:
        privilege = Privilege(privilege)
        if privilege == Privilege.NONE:
            raise ValueError("Cannot request a store handle without privilege")

        handle = self._handles.get(privilege)
        if handle is None:
            handle = self._build(privilege)
            self._handles[privilege] = handle
        return handle

    def close(self) -> None:
        closed = set()
        for handle in self._handles.values():
            if id(handle.client) not in closed:
                handle.client.close()
                closed.add(id(handle.client))
        self._handles.clear()

    def _build(self, privilege: Privilege) -> StoreHandle:
        if self.settings.uses_sql_backend:
            return self._build_sql(privilege)
        if privilege == Privilege.RESTRICTED:
            return self._build_restricted()
        return self._build_full()

    def _build_restricted(self) -> StoreHandle:
        url = self.settings.SUPABASE_URL
        key = self.settings.SUPABASE_ANON_KEY
        if url and key:
            client = RestStoreClient(url, key, Privilege.RESTRICTED, timeout=self.settings.STORE_TIMEOUT_SECONDS)
            return StoreHandle(client, Privilege.RESTRICTED, Privilege.RESTRICTED)

        logger.warning("Store client not initialized - missing SUPABASE_URL or SUPABASE_ANON_KEY")
        return StoreHandle(UnconfiguredStoreClient(), Privilege.RESTRICTED, Privilege.NONE)

    def _build_full(self) -> StoreHandle:
        url = self.settings.SUPABASE_URL
        key = self.settings.SUPABASE_SERVICE_ROLE_KEY
        if url and key:
            client = RestStoreClient(url, key, Privilege.FULL, timeout=self.settings.STORE_TIMEOUT_SECONDS)
            return StoreHandle(client, Privilege.FULL, Privilege.FULL)

        restricted = self.client_for(Privilege.RESTRICTED)
        logger.warning(
            "SUPABASE_SERVICE_ROLE_KEY missing - full-privilege requests fall back to the %s client",
            restricted.granted.value,
        )
        return StoreHandle(restricted.client, Privilege.FULL, restricted.granted)

    def _build_sql(self, privilege: Privilege) -> StoreHandle:
        if privilege == Privilege.RESTRICTED:
            logger.warning("Direct database connections cannot enforce row-level access - restricted tier disabled")
            return StoreHandle(
                UnconfiguredStoreClient("Restricted access requires the hosted store"),
                Privilege.RESTRICTED,
                Privilege.NONE,
            )

        if not self.settings.DATABASE_URL:
            logger.warning("Store client not initialized - STORE_BACKEND=sql without DATABASE_URL")
            return StoreHandle(UnconfiguredStoreClient(), Privilege.FULL, Privilege.NONE)

        try:
            engine = make_engine(self.settings.DATABASE_URL)
        except (ArgumentError, ImportError) as e:
            logger.error("Invalid DATABASE_URL: %s", e)
            return StoreHandle(UnconfiguredStoreClient(), Privilege.FULL, Privilege.NONE)
        return StoreHandle(SqlStoreClient(engine), Privilege.FULL, Privilege.FULL)
