"""
Chat transcript API endpoints
"""
from fastapi import APIRouter, Depends
from typing import Any, Dict, List, Optional
import uuid

from app.api.deps import get_store
from app.schemas import ChatConversationSave
from app.services.store_client import StoreClient
from app.services import chat_service

router = APIRouter()


@router.put("/conversations", response_model=Dict[str, Any])
def save_conversation(request: ChatConversationSave, store: StoreClient = Depends(get_store)):
    """Save the full transcript for a chat session (replaces any earlier save)"""
    return chat_service.save_conversation(store, request)


@router.get("/conversations", response_model=List[Dict[str, Any]])
def list_conversations(lead_id: Optional[uuid.UUID] = None, store: StoreClient = Depends(get_store)):
    return chat_service.get_conversations(store, lead_id)


@router.get("/conversations/{session_id}", response_model=Dict[str, Any])
def get_conversation(session_id: str, store: StoreClient = Depends(get_store)):
    return chat_service.get_conversation(store, session_id)
