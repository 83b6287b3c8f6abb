"""
Helpers shared by the entity services: result unwrapping, enum checks,
partial updates
"""
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Type
import enum
import logging

from pydantic import BaseModel

from app.core.errors import ConfigurationError, NotFoundError, PersistenceError, RecordValidationError
from app.services.store_client import StoreResult

logger = logging.getLogger(__name__)


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def unwrap(result: StoreResult, action: str) -> Any:
    """Return the result data or raise the typed failure it carries"""
    failure = result.error
    if failure is None:
        return result.data

    if failure.is_not_configured:
        logger.warning("Cannot %s: %s", action, failure.message)
        raise ConfigurationError(failure.message, code=failure.code)
    if failure.is_no_rows:
        logger.info("Cannot %s: no matching row", action)
        raise NotFoundError(failure.message, code=failure.code, details=failure.details)

    logger.error("Failed to %s: %s", action, failure.message)
    raise PersistenceError(failure.message, code=failure.code, details=failure.details)


def unwrap_row(result: StoreResult, action: str, label: str) -> Dict[str, Any]:
    """Like unwrap, for single-row reads; an empty read is a NotFoundError"""
    row = unwrap(result, action)
    if row is None:
        raise NotFoundError(f"{label} not found", code="not_found")
    return row


def coerce_enum(enum_cls: Type[enum.Enum], value: Any, field: str) -> Optional[enum.Enum]:
    """Map a raw value onto a closed enum set, or reject it"""
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise RecordValidationError(f"Invalid {field} '{value}' (expected one of: {allowed})", code="invalid_value")


def changes_from(partial: BaseModel) -> Dict[str, Any]:
    """Fields explicitly set on a partial update, stamped with updated_at"""
    values = partial.model_dump(mode="json", exclude_unset=True)
    if not values:
        raise RecordValidationError("No fields to update", code="empty_update")
    values["updated_at"] = now_iso()
    return values
