"""
Tests for service tickets
"""
from datetime import datetime, timedelta, timezone
import uuid

import pytest

from app.core.errors import NotFoundError, PersistenceError
from app.schemas import CustomerCreate, ServiceTicketCreate, ServiceTicketUpdate
from app.services.customer_service import create_customer
from app.services.ticket_service import (
    TICKETS_TABLE,
    create_service_ticket,
    get_service_ticket_by_id,
    get_service_tickets,
    update_service_ticket,
)


@pytest.fixture
def customer(store):
    return create_customer(
        store,
        CustomerCreate(name="Harbor Storage", email="ops@example.com", phone="555-0100", company="Harbor LLC"),
    )


def test_create_ticket_defaults(store, customer):
    """Test priority defaults to normal and status to open"""
    ticket = create_service_ticket(store, ServiceTicketCreate(customer_id=customer["id"], title="Camera 3 offline"))

    assert ticket["priority"] == "normal"
    assert ticket["status"] == "open"
    assert ticket["customer_id"] == customer["id"]


def test_list_open_tickets_newest_first_with_customer_summary(store, customer):
    """Test status filter, ordering and the embedded customer summary"""
    base = datetime(2025, 3, 1, tzinfo=timezone.utc)
    seeded = [
        ("Door contact loose", "open", 0),
        ("Replace keypad", "completed", 1),
        ("Panel beeping", "open", 2),
        ("Annual inspection", "scheduled", 3),
    ]
    for title, status, day in seeded:
        store.insert(TICKETS_TABLE, {
            "customer_id": customer["id"],
            "title": title,
            "status": status,
            "created_at": (base + timedelta(days=day)).isoformat(),
        })

    tickets = get_service_tickets(store, "open")

    assert [t["title"] for t in tickets] == ["Panel beeping", "Door contact loose"]
    assert all(t["status"] == "open" for t in tickets)
    assert tickets[0]["customer"] == {
        "id": customer["id"],
        "name": "Harbor Storage",
        "email": "ops@example.com",
        "phone": "555-0100",
    }
    assert len(get_service_tickets(store)) == 4


def test_get_and_update_ticket(store, customer):
    """Test assignment and scheduling updates"""
    ticket = create_service_ticket(
        store,
        ServiceTicketCreate(customer_id=customer["id"], title="Motion sensor false alarms", priority="urgent"),
    )

    updated = update_service_ticket(
        store,
        ticket["id"],
        ServiceTicketUpdate(status="scheduled", assigned_to="tech-7", scheduled_date=datetime(2025, 3, 4, 9, 30)),
    )

    assert updated["status"] == "scheduled"
    assert updated["assigned_to"] == "tech-7"
    assert updated["scheduled_date"].startswith("2025-03-04T09:30")
    assert updated["priority"] == "urgent"

    fetched = get_service_ticket_by_id(store, ticket["id"])
    assert fetched["customer"]["name"] == "Harbor Storage"
    assert fetched["status"] == "scheduled"


def test_backend_failure_propagates(store):
    """Test backend constraint failures propagate as PersistenceError"""
    auth_user_id = uuid.uuid4()
    create_customer(store, CustomerCreate(name="First", email="first@example.com", auth_user_id=auth_user_id))

    with pytest.raises(PersistenceError) as excinfo:
        create_customer(store, CustomerCreate(name="Second", email="second@example.com", auth_user_id=auth_user_id))
    assert "UNIQUE" in excinfo.value.message


def test_missing_ticket(store):
    with pytest.raises(NotFoundError):
        get_service_ticket_by_id(store, uuid.uuid4())
