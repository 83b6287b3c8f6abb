"""
Lead intake and pipeline service
"""
from typing import Any, Dict, List, Optional
import logging
import uuid

from app.models.lead import LeadStatus
from app.schemas import LeadCreate, LeadUpdate
from app.services.records import changes_from, coerce_enum, now_iso, unwrap, unwrap_row
from app.services.store_client import Order, StoreClient

logger = logging.getLogger(__name__)

LEADS_TABLE = "security_leads"
NEWEST_FIRST = [Order("created_at", ascending=False), Order("id", ascending=False)]


def create_lead(store: StoreClient, lead: LeadCreate) -> Dict[str, Any]:
    """Record a new lead from intake, always in status new"""
    record = lead.model_dump(mode="json")
    record["status"] = LeadStatus.NEW.value
    row = unwrap(store.insert(LEADS_TABLE, record), "create lead")
    logger.info("Lead %s created from %s", row.get("id"), lead.source)
    return row


def get_leads(store: StoreClient, status: Optional[str] = None) -> List[Dict[str, Any]]:
    """List leads newest first, optionally only those in one status"""
    filters = {}
    status = coerce_enum(LeadStatus, status, "lead status")
    if status:
        filters["status"] = status.value
    return unwrap(store.select(LEADS_TABLE, filters=filters, order=NEWEST_FIRST), "list leads") or []


def get_lead_by_id(store: StoreClient, lead_id: uuid.UUID) -> Dict[str, Any]:
    result = store.select(LEADS_TABLE, filters={"id": str(lead_id)}, single=True)
    return unwrap_row(result, "get lead", "Lead")


def update_lead(store: StoreClient, lead_id: uuid.UUID, changes: LeadUpdate) -> Dict[str, Any]:
    result = store.update(LEADS_TABLE, changes_from(changes), filters={"id": str(lead_id)})
    return unwrap(result, "update lead")


def update_lead_status(store: StoreClient, lead_id: uuid.UUID, status: str) -> Dict[str, Any]:
    """Move a lead through the pipeline (new -> contacted -> ... -> won/lost)"""
    status = coerce_enum(LeadStatus, status, "lead status")
    result = store.update(
        LEADS_TABLE,
        {"status": status.value, "updated_at": now_iso()},
        filters={"id": str(lead_id)},
    )
    row = unwrap(result, "update lead status")
    logger.info("Lead %s moved to %s", lead_id, status.value)
    return row
