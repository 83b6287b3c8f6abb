"""
Call log model
"""
from sqlalchemy import Column, String, Text, Integer, DateTime, ForeignKey, Uuid, func
import uuid
import enum
from app.core.database import Base, JSONType, enum_type, utcnow, gen_random_uuid


class CallType(str, enum.Enum):
    INBOUND = "inbound"
    OUTBOUND = "outbound"


class CallSentiment(str, enum.Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class CallLog(Base):
    __tablename__ = "security_call_logs"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, server_default=gen_random_uuid())
    lead_id = Column(Uuid(as_uuid=True), ForeignKey("security_leads.id"), nullable=True, index=True)
    customer_id = Column(Uuid(as_uuid=True), ForeignKey("security_customers.id"), nullable=True, index=True)
    caller_name = Column(String, nullable=True)
    caller_phone = Column(String, nullable=True)
    duration_seconds = Column(Integer, nullable=True)
    call_type = Column(enum_type(CallType, "calltype"), nullable=True, index=True)
    sentiment = Column(enum_type(CallSentiment, "callsentiment"), nullable=True)
    summary = Column(Text, nullable=True)
    transcript = Column(JSONType, nullable=True)
    retell_call_id = Column(String, nullable=True, index=True)  # Voice agent provider call id
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now(), index=True)
