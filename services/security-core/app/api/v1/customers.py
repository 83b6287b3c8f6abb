"""
Customer API endpoints
"""
from fastapi import APIRouter, Depends
from typing import Any, Dict, List, Optional
import uuid

from app.api.deps import get_store
from app.models.customer import CustomerStatus
from app.schemas import CustomerCreate, CustomerUpdate
from app.services.store_client import StoreClient
from app.services import customer_service

router = APIRouter()


@router.post("", response_model=Dict[str, Any])
def create_customer(request: CustomerCreate, store: StoreClient = Depends(get_store)):
    return customer_service.create_customer(store, request)


@router.get("", response_model=List[Dict[str, Any]])
def list_customers(status: Optional[CustomerStatus] = None, store: StoreClient = Depends(get_store)):
    """Customers in alphabetical order"""
    return customer_service.get_customers(store, status)


@router.get("/{customer_id}", response_model=Dict[str, Any])
def get_customer(customer_id: uuid.UUID, store: StoreClient = Depends(get_store)):
    return customer_service.get_customer_by_id(store, customer_id)


@router.patch("/{customer_id}", response_model=Dict[str, Any])
def update_customer(customer_id: uuid.UUID, request: CustomerUpdate, store: StoreClient = Depends(get_store)):
    return customer_service.update_customer(store, customer_id, request)
