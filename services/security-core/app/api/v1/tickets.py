"""
Service ticket API endpoints
"""
from fastapi import APIRouter, Depends
from typing import Any, Dict, List, Optional
import uuid

from app.api.deps import get_store
from app.models.service_ticket import TicketStatus
from app.schemas import ServiceTicketCreate, ServiceTicketUpdate
from app.services.store_client import StoreClient
from app.services import ticket_service

router = APIRouter()


@router.post("", response_model=Dict[str, Any])
def create_ticket(request: ServiceTicketCreate, store: StoreClient = Depends(get_store)):
    """Open a service ticket for a customer"""
    return ticket_service.create_service_ticket(store, request)


@router.get("", response_model=List[Dict[str, Any]])
def list_tickets(status: Optional[TicketStatus] = None, store: StoreClient = Depends(get_store)):
    """
    List tickets newest first

    Each ticket carries a `customer` summary (id, name, email, phone).
    """
    return ticket_service.get_service_tickets(store, status)


@router.get("/{ticket_id}", response_model=Dict[str, Any])
def get_ticket(ticket_id: uuid.UUID, store: StoreClient = Depends(get_store)):
    return ticket_service.get_service_ticket_by_id(store, ticket_id)


@router.patch("/{ticket_id}", response_model=Dict[str, Any])
def update_ticket(ticket_id: uuid.UUID, request: ServiceTicketUpdate, store: StoreClient = Depends(get_store)):
    return ticket_service.update_service_ticket(store, ticket_id, request)
