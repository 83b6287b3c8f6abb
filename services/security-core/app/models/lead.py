"""
Lead model
"""
from sqlalchemy import Column, String, Text, DateTime, Uuid, func
import uuid
import enum
from app.core.database import Base, enum_type, utcnow, gen_random_uuid


class LeadStatus(str, enum.Enum):
    NEW = "new"
    CONTACTED = "contacted"
    QUALIFIED = "qualified"
    PROPOSAL = "proposal"
    WON = "won"
    LOST = "lost"


class ContactPreference(str, enum.Enum):
    EMAIL = "email"
    PHONE = "phone"
    TEXT = "text"


class Lead(Base):
    __tablename__ = "security_leads"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, server_default=gen_random_uuid())
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=True)
    message = Column(Text, nullable=True)
    preferred_contact = Column(enum_type(ContactPreference, "contactpreference"), nullable=False, default=ContactPreference.EMAIL)
    source = Column(String, nullable=False, default="website")  # e.g., "website", "chat", "phone"
    status = Column(enum_type(LeadStatus, "leadstatus"), nullable=False, default=LeadStatus.NEW, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
