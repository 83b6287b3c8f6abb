"""
Chat conversation model
"""
from sqlalchemy import Column, String, DateTime, ForeignKey, Uuid, func
import uuid
import enum
from app.core.database import Base, JSONType, utcnow, gen_random_uuid


class ChatSender(str, enum.Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ChatConversation(Base):
    __tablename__ = "security_chat_conversations"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, server_default=gen_random_uuid())
    lead_id = Column(Uuid(as_uuid=True), ForeignKey("security_leads.id"), nullable=True, index=True)
    customer_id = Column(Uuid(as_uuid=True), ForeignKey("security_customers.id"), nullable=True, index=True)
    session_id = Column(String, nullable=False, unique=True)
    messages = Column(JSONType, nullable=False, default=list)  # Array of {sender, text, timestamp}
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now(), index=True)
