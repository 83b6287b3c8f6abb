"""
Admin user model
"""
from sqlalchemy import Column, String, Boolean, DateTime, Uuid, func, true
import uuid
from app.core.database import Base, utcnow, gen_random_uuid


class AdminUser(Base):
    __tablename__ = "security_admin_users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, server_default=gen_random_uuid())
    email = Column(String, nullable=False, unique=True)
    password_hash = Column(String, nullable=False)
    name = Column(String, nullable=True)
    role = Column(String, nullable=False, default="admin", server_default="admin")
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
