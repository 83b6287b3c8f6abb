"""
Service ticket service

Ticket reads embed a summary of the owning customer (id, name, email, phone).
The summary is joined at read time and never stored on the ticket.
"""
from typing import Any, Dict, List, Optional
import logging
import uuid

from app.models.service_ticket import TicketStatus
from app.schemas import ServiceTicketCreate, ServiceTicketUpdate
from app.services.customer_service import CUSTOMERS_TABLE
from app.services.records import changes_from, coerce_enum, unwrap, unwrap_row
from app.services.store_client import Embed, Order, StoreClient

logger = logging.getLogger(__name__)

TICKETS_TABLE = "security_service_tickets"
CUSTOMER_SUMMARY = Embed(
    alias="customer",
    table=CUSTOMERS_TABLE,
    foreign_key="customer_id",
    columns=["id", "name", "email", "phone"],
)
NEWEST_FIRST = [Order("created_at", ascending=False), Order("id", ascending=False)]


def create_service_ticket(store: StoreClient, ticket: ServiceTicketCreate) -> Dict[str, Any]:
    """Open a ticket (priority defaults to "normal", status to "open")"""
    row = ticket.model_dump(mode="json", exclude_none=True)
    created = unwrap(store.insert(TICKETS_TABLE, row), "create service ticket")
    logger.info(
        "Ticket %s opened for customer %s (priority %s)",
        created.get("id"), ticket.customer_id, ticket.priority.value,
    )
    return created


def get_service_tickets(store: StoreClient, status: Optional[str] = None) -> List[Dict[str, Any]]:
    filters = {}
    status = coerce_enum(TicketStatus, status, "ticket status")
    if status:
        filters["status"] = status.value
    result = store.select(TICKETS_TABLE, filters=filters, order=NEWEST_FIRST, embed=[CUSTOMER_SUMMARY])
    return unwrap(result, "list service tickets") or []


def get_service_ticket_by_id(store: StoreClient, ticket_id: uuid.UUID) -> Dict[str, Any]:
    result = store.select(
        TICKETS_TABLE,
        filters={"id": str(ticket_id)},
        embed=[CUSTOMER_SUMMARY],
        single=True,
    )
    return unwrap_row(result, "get service ticket", "Service ticket")


def update_service_ticket(store: StoreClient, ticket_id: uuid.UUID, changes: ServiceTicketUpdate) -> Dict[str, Any]:
    """Assign, schedule, or close out a ticket"""
    result = store.update(TICKETS_TABLE, changes_from(changes), filters={"id": str(ticket_id)})
    return unwrap(result, "update service ticket")
