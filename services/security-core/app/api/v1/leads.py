"""
Lead API endpoints
"""
from fastapi import APIRouter, Depends
from typing import Any, Dict, List, Optional
import uuid

from app.api.deps import get_store
from app.models.lead import LeadStatus
from app.schemas import LeadCreate, LeadUpdate, LeadStatusUpdate
from app.services.store_client import StoreClient
from app.services import lead_service

router = APIRouter()


@router.post("", response_model=Dict[str, Any])
def create_lead(request: LeadCreate, store: StoreClient = Depends(get_store)):
    """Capture a lead from the website contact form or chat"""
    return lead_service.create_lead(store, request)


@router.get("", response_model=List[Dict[str, Any]])
def list_leads(status: Optional[LeadStatus] = None, store: StoreClient = Depends(get_store)):
    return lead_service.get_leads(store, status)


@router.get("/{lead_id}", response_model=Dict[str, Any])
def get_lead(lead_id: uuid.UUID, store: StoreClient = Depends(get_store)):
    return lead_service.get_lead_by_id(store, lead_id)


@router.patch("/{lead_id}", response_model=Dict[str, Any])
def update_lead(lead_id: uuid.UUID, request: LeadUpdate, store: StoreClient = Depends(get_store)):
    return lead_service.update_lead(store, lead_id, request)


@router.patch("/{lead_id}/status", response_model=Dict[str, Any])
def update_lead_status(lead_id: uuid.UUID, request: LeadStatusUpdate, store: StoreClient = Depends(get_store)):
    return lead_service.update_lead_status(store, lead_id, request.status)
