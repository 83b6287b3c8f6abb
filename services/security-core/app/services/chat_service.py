"""
Chat transcript persistence
"""
from typing import Any, Dict, List, Optional
import uuid

from app.schemas import ChatConversationSave
from app.services.records import now_iso, unwrap, unwrap_row
from app.services.store_client import Order, StoreClient

CONVERSATIONS_TABLE = "security_chat_conversations"


def save_conversation(store: StoreClient, conversation: ChatConversationSave) -> Dict[str, Any]:
    """
    Upsert a transcript by session_id

    The stored message list is replaced, never appended to. Lead/customer
    links left out of a later save keep their stored value.
    """
    row = conversation.model_dump(mode="json", exclude_none=True)
    row["updated_at"] = now_iso()
    result = store.upsert(CONVERSATIONS_TABLE, row, on_conflict="session_id")
    return unwrap(result, "save conversation")


def get_conversation(store: StoreClient, session_id: str) -> Dict[str, Any]:
    result = store.select(CONVERSATIONS_TABLE, filters={"session_id": session_id}, single=True)
    return unwrap_row(result, "get conversation", "Conversation")


def get_conversations(store: StoreClient, lead_id: Optional[uuid.UUID] = None) -> List[Dict[str, Any]]:
    filters = {"lead_id": str(lead_id)} if lead_id else {}
    result = store.select(
        CONVERSATIONS_TABLE,
        filters=filters,
        order=[Order("updated_at", ascending=False), Order("id", ascending=False)],
    )
    return unwrap(result, "list conversations") or []
