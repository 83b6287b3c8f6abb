"""
Call log storage (append-only)
"""
from typing import Any, Dict, List, Optional
import logging
import uuid

from app.models.call_log import CallType
from app.schemas import CallLogCreate
from app.services.records import coerce_enum, unwrap, unwrap_row
from app.services.store_client import Order, StoreClient

logger = logging.getLogger(__name__)

CALL_LOGS_TABLE = "security_call_logs"
NEWEST_FIRST = [Order("created_at", ascending=False), Order("id", ascending=False)]


def save_call_log(store: StoreClient, call_log: CallLogCreate) -> Dict[str, Any]:
    row = call_log.model_dump(mode="json", exclude_none=True)
    saved = unwrap(store.insert(CALL_LOGS_TABLE, row), "save call log")
    logger.info("Call log %s saved (provider call %s)", saved.get("id"), call_log.retell_call_id)
    return saved


def get_call_logs(store: StoreClient, call_type: Optional[str] = None) -> List[Dict[str, Any]]:
    filters = {}
    call_type = coerce_enum(CallType, call_type, "call type")
    if call_type:
        filters["call_type"] = call_type.value
    return unwrap(store.select(CALL_LOGS_TABLE, filters=filters, order=NEWEST_FIRST), "list call logs") or []


def get_call_log_by_id(store: StoreClient, call_log_id: uuid.UUID) -> Dict[str, Any]:
    result = store.select(CALL_LOGS_TABLE, filters={"id": str(call_log_id)}, single=True)
    return unwrap_row(result, "get call log", "Call log")
