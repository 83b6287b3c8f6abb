"""
Customer records service
"""
from typing import Any, Dict, List, Optional
import uuid

from app.models.customer import CustomerStatus
from app.schemas import CustomerCreate, CustomerUpdate
from app.services.records import changes_from, coerce_enum, unwrap, unwrap_row
from app.services.store_client import Order, StoreClient

CUSTOMERS_TABLE = "security_customers"

# Alphabetical; same-name customers keep creation order
BY_NAME = [Order("name"), Order("created_at"), Order("id")]


def create_customer(store: StoreClient, customer: CustomerCreate) -> Dict[str, Any]:
    row = customer.model_dump(mode="json", exclude_none=True)
    return unwrap(store.insert(CUSTOMERS_TABLE, row), "create customer")


def get_customers(store: StoreClient, status: Optional[str] = None) -> List[Dict[str, Any]]:
    filters = {}
    status = coerce_enum(CustomerStatus, status, "customer status")
    if status:
        filters["status"] = status.value
    return unwrap(store.select(CUSTOMERS_TABLE, filters=filters, order=BY_NAME), "list customers") or []


def get_customer_by_id(store: StoreClient, customer_id: uuid.UUID) -> Dict[str, Any]:
    result = store.select(CUSTOMERS_TABLE, filters={"id": str(customer_id)}, single=True)
    return unwrap_row(result, "get customer", "Customer")


def update_customer(store: StoreClient, customer_id: uuid.UUID, changes: CustomerUpdate) -> Dict[str, Any]:
    result = store.update(CUSTOMERS_TABLE, changes_from(changes), filters={"id": str(customer_id)})
    return unwrap(result, "update customer")
