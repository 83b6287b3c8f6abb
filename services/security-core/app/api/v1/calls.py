"""
Call log API endpoints (voice agent webhooks and staff review)
"""
from fastapi import APIRouter, Depends
from typing import Any, Dict, List, Optional
import uuid

from app.api.deps import get_store
from app.models.call_log import CallType
from app.schemas import CallLogCreate
from app.services.store_client import StoreClient
from app.services import call_log_service

router = APIRouter()


@router.post("", response_model=Dict[str, Any])
def save_call_log(request: CallLogCreate, store: StoreClient = Depends(get_store)):
    return call_log_service.save_call_log(store, request)


@router.get("", response_model=List[Dict[str, Any]])
def list_call_logs(call_type: Optional[CallType] = None, store: StoreClient = Depends(get_store)):
    return call_log_service.get_call_logs(store, call_type)


@router.get("/{call_log_id}", response_model=Dict[str, Any])
def get_call_log(call_log_id: uuid.UUID, store: StoreClient = Depends(get_store)):
    return call_log_service.get_call_log_by_id(store, call_log_id)
