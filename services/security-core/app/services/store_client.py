"""
Store client abstraction for the hosted database

Every operation returns a StoreResult (data, error) pair instead of raising,
matching the hosted store's own client contract. The access layer decides
what a failure means.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import enum
import logging

logger = logging.getLogger(__name__)

# PostgREST code for "JSON object requested, multiple (or no) rows returned"
NO_ROWS_CODE = "PGRST116"
NOT_CONFIGURED_CODE = "not_configured"
TRANSPORT_ERROR_CODE = "transport_error"


class Privilege(str, enum.Enum):
    NONE = "none"
    RESTRICTED = "restricted"
    FULL = "full"


@dataclass(frozen=True)
class Order:
    column: str
    ascending: bool = True


@dataclass(frozen=True)
class Embed:
    """One-level to-one join: rows get `alias` = {columns} of the related row"""
    alias: str
    table: str
    foreign_key: str
    columns: List[str] = field(default_factory=lambda: ["*"])


@dataclass(frozen=True)
class StoreFailure:
    message: str
    code: Optional[str] = None
    details: Optional[Any] = None
    hint: Optional[str] = None
    status: Optional[int] = None

    @property
    def is_no_rows(self) -> bool:
        return self.code == NO_ROWS_CODE

    @property
    def is_not_configured(self) -> bool:
        return self.code == NOT_CONFIGURED_CODE


@dataclass(frozen=True)
class StoreResult:
    data: Any = None
    error: Optional[StoreFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class StoreClient(ABC):
    """Minimal operation set shared by the real clients and the stub"""

    configured = True

    @abstractmethod
    def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        order: Optional[List[Order]] = None,
        embed: Optional[List[Embed]] = None,
        single: bool = False,
    ) -> StoreResult:
        ...

    @abstractmethod
    def insert(self, table: str, row: Dict[str, Any]) -> StoreResult:
        """Insert one row and return it as persisted"""

    @abstractmethod
    def update(self, table: str, values: Dict[str, Any], filters: Dict[str, Any]) -> StoreResult:
        """Update exactly one row matched by filters and return it"""

    @abstractmethod
    def upsert(self, table: str, row: Dict[str, Any], on_conflict: str) -> StoreResult:
        """Insert or update keyed on the on_conflict column and return the row"""

    def close(self) -> None:
        pass


class UnconfiguredStoreClient(StoreClient):
    """
    Stand-in used when store configuration is missing

    Reads succeed with empty data, writes fail with a configuration error.
    Nothing here raises, so the service still boots.
    """

    configured = False

    def __init__(self, reason: str = "Store not configured"):
        self.reason = reason

    def _failure(self, table: str) -> StoreResult:
        logger.debug("Write to %s rejected: %s", table, self.reason)
        return StoreResult(error=StoreFailure(message=self.reason, code=NOT_CONFIGURED_CODE, status=503))

    def select(self, table, filters=None, order=None, embed=None, single=False):
        return StoreResult(data=None if single else [])

    def insert(self, table, row):
        return self._failure(table)

    def update(self, table, values, filters):
        return self._failure(table)

    def upsert(self, table, row, on_conflict):
        return self._failure(table)
