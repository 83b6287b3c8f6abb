"""
SQLAlchemy base and engine helpers for the direct SQL backend
"""
from datetime import datetime, timezone

from sqlalchemy import JSON, Enum as SQLEnum, Uuid, create_engine
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.engine import Engine
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool
from sqlalchemy.sql.functions import FunctionElement

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def make_engine(database_url: str) -> Engine:
    """
    Create an engine for DATABASE_URL

    In-memory SQLite gets a single shared connection so every session
    sees the same database.
    """
    in_memory = database_url == "sqlite://" or (
        database_url.startswith("sqlite") and ":memory:" in database_url
    )
    if in_memory:
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, pool_pre_ping=True)


JSONType = JSON().with_variant(JSONB(), "postgresql")


def enum_type(enum_cls, name: str) -> SQLEnum:
    """String enum stored as its values behind a CHECK constraint"""
    return SQLEnum(
        enum_cls,
        name=name,
        native_enum=False,
        create_constraint=True,
        length=32,
        values_callable=lambda members: [member.value for member in members],
    )


class gen_random_uuid(FunctionElement):
    """Server-side UUID default, so rows inserted through the REST API get an id"""
    type = Uuid()
    name = "gen_random_uuid"
    inherit_cache = True


@compiles(gen_random_uuid)
def _gen_random_uuid(element, compiler, **kw):
    return "gen_random_uuid()"


@compiles(gen_random_uuid, "sqlite")
def _gen_random_uuid_sqlite(element, compiler, **kw):
    # Uuid is stored as 32 hex characters on SQLite
    return "lower(hex(randomblob(16)))"
