"""
Tests for the direct SQL store client
"""
import uuid

from app.services.store_client import Embed, Order


def test_insert_returns_generated_fields(store):
    """Test the store assigns id and timestamps"""
    result = store.insert("security_leads", {"name": "Dana", "email": "dana@example.com", "status": "new"})

    assert result.ok
    row = result.data
    uuid.UUID(row["id"])
    assert row["created_at"]
    assert row["preferred_contact"] == "email"
    assert row["source"] == "website"


def test_single_select_without_rows_fails(store):
    """Test single-row reads report the no-rows code"""
    result = store.select("security_leads", filters={"id": str(uuid.uuid4())}, single=True)

    assert result.error.is_no_rows
    assert result.error.status == 406


def test_invalid_uuid_filter_is_rejected(store):
    result = store.select("security_leads", filters={"id": "not-a-uuid"})

    assert result.error.code == "22P02"


def test_unknown_table_and_column(store):
    assert store.select("security_unknown").error.code == "42P01"
    assert store.select("security_leads", filters={"nope": 1}).error.code == "42703"


def test_update_without_match_fails(store):
    result = store.update("security_leads", {"status": "won"}, filters={"id": str(uuid.uuid4())})

    assert result.error.is_no_rows


def test_constraint_violation_is_a_failure(store):
    """Test database errors come back as failures, not exceptions"""
    result = store.insert("security_leads", {"email": "no-name@example.com"})

    assert not result.ok
    assert result.error.code == "IntegrityError"


def test_upsert_keeps_row_identity(store):
    """Test upsert updates the existing row on conflict"""
    first = store.upsert("security_chat_conversations", {"session_id": "s-1", "messages": [{"text": "a"}]}, on_conflict="session_id").data
    second = store.upsert("security_chat_conversations", {"session_id": "s-1", "messages": [{"text": "b"}]}, on_conflict="session_id").data

    assert first["id"] == second["id"]
    assert second["messages"] == [{"text": "b"}]
    assert len(store.select("security_chat_conversations").data) == 1


def test_embed_joins_related_summary(store):
    """Test one-level embeds return only the requested related columns"""
    customer = store.insert("security_customers", {"name": "Acme Storage", "email": "ops@example.com", "phone": "555-0100"}).data
    store.insert("security_service_tickets", {"customer_id": customer["id"], "title": "Gate sensor fault"})

    rows = store.select(
        "security_service_tickets",
        embed=[Embed("customer", "security_customers", "customer_id", ["id", "name"])],
        order=[Order("created_at", ascending=False)],
    ).data

    assert rows[0]["customer"] == {"id": customer["id"], "name": "Acme Storage"}
    assert rows[0]["customer_id"] == customer["id"]
