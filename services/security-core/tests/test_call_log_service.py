"""
Tests for call log storage
"""
import uuid

import pytest
from pydantic import ValidationError

from app.core.errors import NotFoundError, RecordValidationError
from app.schemas import CallLogCreate
from app.services.call_log_service import get_call_log_by_id, get_call_logs, save_call_log


def test_save_call_log_keeps_structured_transcript(store):
    """Test transcript JSON and provider id are stored as given"""
    transcript = [
        {"role": "agent", "content": "Thanks for calling, how can I help?"},
        {"role": "user", "content": "My alarm keeps going off at night."},
    ]
    saved = save_call_log(store, CallLogCreate(
        caller_name="Sam Ortiz",
        caller_phone="+15550100",
        duration_seconds=184,
        call_type="inbound",
        sentiment="negative",
        summary="False alarms overnight, wants a technician",
        transcript=transcript,
        retell_call_id="call_8f2a",
    ))

    fetched = get_call_log_by_id(store, saved["id"])
    assert fetched["transcript"] == transcript
    assert fetched["retell_call_id"] == "call_8f2a"
    assert fetched["sentiment"] == "negative"
    assert fetched["duration_seconds"] == 184


def test_list_filters_by_call_type_newest_first(store):
    first = save_call_log(store, CallLogCreate(caller_name="A", call_type="inbound"))
    save_call_log(store, CallLogCreate(caller_name="B", call_type="outbound"))
    third = save_call_log(store, CallLogCreate(caller_name="C", call_type="inbound"))

    inbound = get_call_logs(store, "inbound")

    assert [c["id"] for c in inbound] == [third["id"], first["id"]]
    assert len(get_call_logs(store)) == 3


def test_invalid_values_rejected(store):
    with pytest.raises(ValidationError):
        CallLogCreate(duration_seconds=-5)
    with pytest.raises(ValidationError):
        CallLogCreate(sentiment="furious")
    with pytest.raises(RecordValidationError):
        get_call_logs(store, "sideways")


def test_missing_call_log(store):
    with pytest.raises(NotFoundError):
        get_call_log_by_id(store, uuid.uuid4())
