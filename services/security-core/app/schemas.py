"""
Typed records accepted by the data access layer

Request bodies are validated here (required fields, closed enum sets,
defaults) before any query is issued. Update models only carry the fields
a caller sent; fields backed by NOT NULL columns refuse an explicit null.
"""
from datetime import datetime
from typing import Any, List, Optional
import uuid

from pydantic import BaseModel, EmailStr, Field

from app.models.lead import LeadStatus, ContactPreference
from app.models.customer import CustomerStatus
from app.models.service_ticket import TicketPriority, TicketStatus
from app.models.chat import ChatSender
from app.models.call_log import CallType, CallSentiment


# Leads

class LeadCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    message: Optional[str] = None
    preferred_contact: ContactPreference = ContactPreference.EMAIL
    source: str = "website"


class LeadUpdate(BaseModel):
    name: str = Field(None, min_length=1)
    email: EmailStr = None
    phone: Optional[str] = None
    message: Optional[str] = None
    preferred_contact: ContactPreference = None
    source: str = None
    status: LeadStatus = None


class LeadStatusUpdate(BaseModel):
    status: LeadStatus


# Customers

class CustomerCreate(BaseModel):
    auth_user_id: Optional[uuid.UUID] = None
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    company: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    notes: Optional[str] = None
    status: CustomerStatus = CustomerStatus.ACTIVE


class CustomerUpdate(BaseModel):
    auth_user_id: Optional[uuid.UUID] = None
    name: str = Field(None, min_length=1)
    email: EmailStr = None
    phone: Optional[str] = None
    company: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    notes: Optional[str] = None
    status: CustomerStatus = None


# Service tickets

class ServiceTicketCreate(BaseModel):
    customer_id: uuid.UUID
    property_id: Optional[uuid.UUID] = None
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    priority: TicketPriority = TicketPriority.NORMAL
    status: TicketStatus = TicketStatus.OPEN
    assigned_to: Optional[str] = None
    scheduled_date: Optional[datetime] = None
    completed_date: Optional[datetime] = None
    notes: Optional[str] = None


class ServiceTicketUpdate(BaseModel):
    property_id: Optional[uuid.UUID] = None
    title: str = Field(None, min_length=1)
    description: Optional[str] = None
    priority: TicketPriority = None
    status: TicketStatus = None
    assigned_to: Optional[str] = None
    scheduled_date: Optional[datetime] = None
    completed_date: Optional[datetime] = None
    notes: Optional[str] = None


# Chat conversations

class ChatMessage(BaseModel):
    sender: ChatSender
    text: str
    timestamp: str  # stored as sent by the client


class ChatConversationSave(BaseModel):
    session_id: str = Field(..., min_length=1)
    lead_id: Optional[uuid.UUID] = None
    customer_id: Optional[uuid.UUID] = None
    messages: List[ChatMessage] = Field(default_factory=list)


# Call logs

class CallLogCreate(BaseModel):
    lead_id: Optional[uuid.UUID] = None
    customer_id: Optional[uuid.UUID] = None
    caller_name: Optional[str] = None
    caller_phone: Optional[str] = None
    duration_seconds: Optional[int] = Field(None, ge=0)
    call_type: Optional[CallType] = None
    sentiment: Optional[CallSentiment] = None
    summary: Optional[str] = None
    transcript: Optional[Any] = None
    retell_call_id: Optional[str] = None
