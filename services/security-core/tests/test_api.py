"""
Tests for the HTTP surface
"""
import uuid

from fastapi.testclient import TestClient

from app.main import create_app
from conftest import make_settings


def test_lead_lifecycle(api):
    """Test intake, listing and staff status change over HTTP"""
    created = api.post("/v1/leads", json={
        "name": "Dana Whitfield",
        "email": "dana@example.com",
        "message": "Need cameras for a warehouse",
    })
    assert created.status_code == 200
    lead = created.json()
    assert lead["status"] == "new"

    listed = api.get("/v1/leads", params={"status": "new"})
    assert [row["id"] for row in listed.json()] == [lead["id"]]

    moved = api.patch(f"/v1/leads/{lead['id']}/status", json={"status": "contacted"})
    assert moved.status_code == 200
    assert moved.json()["status"] == "contacted"

    assert api.get("/v1/leads", params={"status": "new"}).json() == []
    assert api.get(f"/v1/leads/{lead['id']}").json()["status"] == "contacted"


def test_invalid_requests_are_rejected(api):
    """Test closed enums and required fields at the boundary"""
    assert api.post("/v1/leads", json={"name": "No Email"}).status_code == 422
    assert api.get("/v1/leads", params={"status": "archived"}).status_code == 422
    assert api.post("/v1/calls", json={"sentiment": "furious"}).status_code == 422


def test_not_found_is_structured(api):
    response = api.get(f"/v1/customers/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "JSON object requested, multiple (or no) rows returned"}


def test_empty_update_is_422(api):
    customer = api.post("/v1/customers", json={"name": "Harbor Storage", "email": "ops@example.com"}).json()

    response = api.patch(f"/v1/customers/{customer['id']}", json={})

    assert response.status_code == 422
    assert response.json() == {"success": False, "error": "No fields to update"}


def test_tickets_embed_customer(api):
    """Test ticket endpoints return the customer summary"""
    customer = api.post("/v1/customers", json={
        "name": "Harbor Storage",
        "email": "ops@example.com",
        "phone": "555-0100",
    }).json()
    ticket = api.post("/v1/tickets", json={
        "customer_id": customer["id"],
        "title": "Gate camera offline",
        "priority": "emergency",
    }).json()

    assert ticket["status"] == "open"
    listed = api.get("/v1/tickets", params={"status": "open"}).json()
    assert listed[0]["customer"] == {
        "id": customer["id"],
        "name": "Harbor Storage",
        "email": "ops@example.com",
        "phone": "555-0100",
    }

    updated = api.patch(f"/v1/tickets/{ticket['id']}", json={"status": "assigned", "assigned_to": "tech-2"})
    assert updated.json()["status"] == "assigned"
    assert api.get(f"/v1/tickets/{ticket['id']}").json()["assigned_to"] == "tech-2"


def test_chat_and_calls(api):
    """Test transcript upsert and call log storage"""
    payload = {
        "session_id": "web-123",
        "messages": [{"sender": "user", "text": "Hi", "timestamp": "2025-03-01T10:00:00Z"}],
    }
    first = api.put("/v1/chat/conversations", json=payload).json()
    payload["messages"].append({"sender": "assistant", "text": "Hello!", "timestamp": "2025-03-01T10:00:05Z"})
    second = api.put("/v1/chat/conversations", json=payload).json()

    assert first["id"] == second["id"]
    stored = api.get("/v1/chat/conversations/web-123").json()
    assert [m["text"] for m in stored["messages"]] == ["Hi", "Hello!"]

    call = api.post("/v1/calls", json={"caller_name": "Sam", "call_type": "outbound", "duration_seconds": 42}).json()
    assert api.get(f"/v1/calls/{call['id']}").json()["duration_seconds"] == 42
    assert [c["id"] for c in api.get("/v1/calls", params={"call_type": "outbound"}).json()] == [call["id"]]


def test_unconfigured_service_still_boots():
    """Test degraded mode: reads are empty, writes are a 503 with a JSON error"""
    app = create_app(make_settings())

    with TestClient(app) as client:
        health = client.get("/health").json()
        assert health["status"] == "degraded"
        assert health["store"] == {"restricted": "none", "full": "none"}

        assert client.get("/v1/leads").json() == []

        response = client.post("/v1/leads", json={"name": "Dana", "email": "dana@example.com"})
        assert response.status_code == 503
        assert response.json() == {"success": False, "error": "Store not configured"}


def test_health_when_fully_configured():
    app = create_app(make_settings(
        SUPABASE_URL="https://proj.supabase.co",
        SUPABASE_ANON_KEY="anon-key",
        SUPABASE_SERVICE_ROLE_KEY="service-key",
    ))

    with TestClient(app) as client:
        health = client.get("/health").json()

    assert health["status"] == "healthy"
    assert health["store"] == {"restricted": "restricted", "full": "full"}


def test_null_on_required_field_is_422(api):
    """Test an explicit null on a NOT NULL column is a validation error, not a 500"""
    customer = api.post("/v1/customers", json={"name": "Harbor Storage", "email": "ops@example.com"}).json()

    assert api.patch(f"/v1/customers/{customer['id']}", json={"name": None}).status_code == 422
    assert api.patch(f"/v1/customers/{customer['id']}", json={"phone": None}).status_code == 200
    assert api.get(f"/v1/customers/{customer['id']}").json()["name"] == "Harbor Storage"


def test_intake_ignores_status(api):
    lead = api.post("/v1/leads", json={"name": "Dana", "email": "dana@example.com", "status": "won"}).json()

    assert lead["status"] == "new"
