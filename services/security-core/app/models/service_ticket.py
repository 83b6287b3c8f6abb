"""
Service ticket model
"""
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Uuid, func
import uuid
import enum
from app.core.database import Base, enum_type, utcnow, gen_random_uuid


class TicketPriority(str, enum.Enum):
    EMERGENCY = "emergency"
    URGENT = "urgent"
    NORMAL = "normal"
    LOW = "low"


class TicketStatus(str, enum.Enum):
    OPEN = "open"
    ASSIGNED = "assigned"
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ServiceTicket(Base):
    __tablename__ = "security_service_tickets"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, server_default=gen_random_uuid())
    customer_id = Column(Uuid(as_uuid=True), ForeignKey("security_customers.id"), nullable=False, index=True)
    property_id = Column(Uuid(as_uuid=True), nullable=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    priority = Column(enum_type(TicketPriority, "ticketpriority"), nullable=False, default=TicketPriority.NORMAL, index=True)
    status = Column(enum_type(TicketStatus, "ticketstatus"), nullable=False, default=TicketStatus.OPEN, index=True)
    assigned_to = Column(String, nullable=True)  # Technician name or id
    scheduled_date = Column(DateTime(timezone=True), nullable=True)
    completed_date = Column(DateTime(timezone=True), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
