"""
Customer model
"""
from sqlalchemy import Column, String, Text, DateTime, Uuid, func
import uuid
import enum
from app.core.database import Base, enum_type, utcnow, gen_random_uuid


class CustomerStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PROSPECT = "prospect"


class Customer(Base):
    __tablename__ = "security_customers"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, server_default=gen_random_uuid())
    auth_user_id = Column(Uuid(as_uuid=True), nullable=True, unique=True)  # Portal login identity
    name = Column(String, nullable=False, index=True)
    email = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=True)
    company = Column(String, nullable=True)
    address = Column(String, nullable=True)
    city = Column(String, nullable=True)
    state = Column(String, nullable=True)
    zip = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(enum_type(CustomerStatus, "customerstatus"), nullable=False, default=CustomerStatus.ACTIVE, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
