"""
Direct SQL store client

Implements the StoreClient contract with SQLAlchemy Core against the
security_* tables, shaping rows the same way the hosted REST API does
(UUIDs and timestamps as strings, enums as their values).
"""
from datetime import datetime
from typing import Any, Dict, List, Optional
import enum
import logging
import uuid

from sqlalchemy import DateTime, MetaData, Table, Uuid, insert, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

import app.models  # noqa: F401  (registers the security_* tables on Base.metadata)
from app.core.database import Base
from app.services.store_client import (
    NO_ROWS_CODE,
    Embed,
    Order,
    Privilege,
    StoreClient,
    StoreFailure,
    StoreResult,
)

logger = logging.getLogger(__name__)

UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class _Rejected(Exception):
    """Aborts the current transaction with a store-shaped failure"""

    def __init__(self, code: str, message: str, details: Optional[str] = None, status: int = 400):
        super().__init__(message)
        self.failure = StoreFailure(message=message, code=code, details=details, status=status)


def _jsonable(value: Any) -> Any:
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, enum.Enum):
        return value.value
    return value


def _no_rows(count: int) -> _Rejected:
    return _Rejected(
        NO_ROWS_CODE,
        "JSON object requested, multiple (or no) rows returned",
        details=f"The result contains {count} rows",
        status=406,
    )


class SqlStoreClient(StoreClient):
    """StoreClient backed by a SQLAlchemy engine"""

    def __init__(
        self,
        engine: Engine,
        metadata: Optional[MetaData] = None,
        privilege: Privilege = Privilege.FULL,
    ):
        self.engine = engine
        self.metadata = metadata if metadata is not None else Base.metadata
        self.privilege = privilege

    def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        order: Optional[List[Order]] = None,
        embed: Optional[List[Embed]] = None,
        single: bool = False,
    ) -> StoreResult:
        def run(conn):
            t = self._table(table)
            columns = list(t.c)
            source = t
            embedded = []
            for e in embed or []:
                related = self._table(e.table).alias(e.alias)
                source = source.outerjoin(related, self._column(t, e.foreign_key) == related.c.id)
                related_columns = list(related.c) if e.columns == ["*"] else [self._column(related, c) for c in e.columns]
                columns.extend(c.label(f"{e.alias}__{c.name}") for c in related_columns)
                embedded.append((e, [c.name for c in related_columns]))

            stmt = select(*columns).select_from(source)
            stmt = self._where(stmt, t, filters)
            for o in order or []:
                column = self._column(t, o.column)
                stmt = stmt.order_by(column.asc() if o.ascending else column.desc())

            records = []
            for row in conn.execute(stmt):
                mapping = row._mapping
                record = {c.name: _jsonable(mapping[c]) for c in t.c}
                for e, names in embedded:
                    if record.get(e.foreign_key) is None:
                        record[e.alias] = None
                    else:
                        record[e.alias] = {n: _jsonable(mapping[f"{e.alias}__{n}"]) for n in names}
                records.append(record)

            if single:
                if len(records) != 1:
                    raise _no_rows(len(records))
                return records[0]
            return records

        return self._run("select", table, run)

    def insert(self, table: str, row: Dict[str, Any]) -> StoreResult:
        def run(conn):
            t = self._table(table)
            stmt = insert(t).values(**self._coerce(t, row)).returning(*t.c)
            return self._shape(t, conn.execute(stmt).one())

        return self._run("insert", table, run)

    def update(self, table: str, values: Dict[str, Any], filters: Dict[str, Any]) -> StoreResult:
        def run(conn):
            t = self._table(table)
            stmt = self._where(update(t), t, filters).values(**self._coerce(t, values)).returning(*t.c)
            rows = conn.execute(stmt).fetchall()
            if len(rows) != 1:
                raise _no_rows(len(rows))
            return self._shape(t, rows[0])

        return self._run("update", table, run)

    def upsert(self, table: str, row: Dict[str, Any], on_conflict: str) -> StoreResult:
        def run(conn):
            dialect_insert = UPSERT_DIALECTS.get(self.engine.dialect.name)
            if dialect_insert is None:
                raise _Rejected("0A000", f"upsert is not supported on {self.engine.dialect.name}", status=501)

            t = self._table(table)
            self._column(t, on_conflict)
            values = self._coerce(t, row)
            stmt = dialect_insert(t).values(**values)
            changes = {k: stmt.excluded[k] for k in values if k != on_conflict}
            if not changes:
                changes = {on_conflict: stmt.excluded[on_conflict]}
            stmt = stmt.on_conflict_do_update(index_elements=[on_conflict], set_=changes).returning(*t.c)
            return self._shape(t, conn.execute(stmt).one())

        return self._run("upsert", table, run)

    def close(self) -> None:
        self.engine.dispose()

    def _run(self, action: str, table: str, fn) -> StoreResult:
        try:
            with self.engine.begin() as conn:
                return StoreResult(data=fn(conn))
        except _Rejected as e:
            return StoreResult(error=e.failure)
        except SQLAlchemyError as e:
            orig = getattr(e, "orig", None)
            code = getattr(orig, "pgcode", None) or type(orig or e).__name__
            logger.error("SQL %s on %s failed: %s", action, table, orig or e)
            return StoreResult(error=StoreFailure(message=str(orig or e), code=code, status=500))

    def _table(self, name: str) -> Table:
        t = self.metadata.tables.get(name)
        if t is None:
            raise _Rejected("42P01", f'relation "{name}" does not exist', status=404)
        return t

    @staticmethod
    def _column(t, name: str):
        column = t.c.get(name)
        if column is None:
            raise _Rejected("42703", f"column {t.name}.{name} does not exist")
        return column

    def _where(self, stmt, t, filters: Optional[Dict[str, Any]]):
        for name, value in (filters or {}).items():
            column = self._column(t, name)
            if value is None:
                stmt = stmt.where(column.is_(None))
            else:
                stmt = stmt.where(column == self._coerce_value(column, value))
        return stmt

    def _coerce(self, t, values: Dict[str, Any]) -> Dict[str, Any]:
        return {name: self._coerce_value(self._column(t, name), value) for name, value in values.items()}

    @staticmethod
    def _coerce_value(column, value: Any) -> Any:
        """Accept the JSON shapes the REST API accepts (string UUIDs and ISO timestamps)"""
        if value is None:
            return None
        if isinstance(column.type, Uuid) and not isinstance(value, uuid.UUID):
            try:
                return uuid.UUID(str(value))
            except ValueError:
                raise _Rejected("22P02", f'invalid input syntax for type uuid: "{value}"')
        if isinstance(column.type, DateTime) and isinstance(value, str):
            try:
                return datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError:
                raise _Rejected("22007", f'invalid input syntax for type timestamp: "{value}"')
        return value

    @staticmethod
    def _shape(t, row) -> Dict[str, Any]:
        mapping = row._mapping
        return {c.name: _jsonable(mapping[c]) for c in t.c}
