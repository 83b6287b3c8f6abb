"""
SQLAlchemy models for the security_* tables
"""
from app.models.lead import Lead, LeadStatus, ContactPreference
from app.models.customer import Customer, CustomerStatus
from app.models.service_ticket import ServiceTicket, TicketPriority, TicketStatus
from app.models.chat import ChatConversation, ChatSender
from app.models.call_log import CallLog, CallType, CallSentiment
from app.models.admin_user import AdminUser

__all__ = [
    "Lead",
    "LeadStatus",
    "ContactPreference",
    "Customer",
    "CustomerStatus",
    "ServiceTicket",
    "TicketPriority",
    "TicketStatus",
    "ChatConversation",
    "ChatSender",
    "CallLog",
    "CallType",
    "CallSentiment",
    "AdminUser",
]
