"""Security schema

Revision ID: 001_security_schema
Revises:
Create Date: 2025-01-15 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from app.core.database import gen_random_uuid

# revision identifiers, used by Alembic.
revision = '001_security_schema'
down_revision = None
branch_labels = None
depends_on = None


JSON = sa.JSON().with_variant(postgresql.JSONB(), 'postgresql')


def checked_enum(name, values):
    """VARCHAR + CHECK constraint, so new values never need ALTER TYPE"""
    return sa.Enum(*values, name=name, native_enum=False, create_constraint=True, length=32)


def upgrade() -> None:
    # Leads
    op.create_table(
        'security_leads',
        sa.Column('id', sa.Uuid(), primary_key=True, server_default=gen_random_uuid()),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False, index=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('message', sa.Text(), nullable=True),
        sa.Column('preferred_contact', checked_enum('contactpreference', ['email', 'phone', 'text']), nullable=False),
        sa.Column('source', sa.String(), nullable=False),
        sa.Column('status', checked_enum('leadstatus', ['new', 'contacted', 'qualified', 'proposal', 'won', 'lost']), nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now(), index=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    # Customers
    op.create_table(
        'security_customers',
        sa.Column('id', sa.Uuid(), primary_key=True, server_default=gen_random_uuid()),
        sa.Column('auth_user_id', sa.Uuid(), nullable=True, unique=True),
        sa.Column('name', sa.String(), nullable=False, index=True),
        sa.Column('email', sa.String(), nullable=False, index=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('company', sa.String(), nullable=True),
        sa.Column('address', sa.String(), nullable=True),
        sa.Column('city', sa.String(), nullable=True),
        sa.Column('state', sa.String(), nullable=True),
        sa.Column('zip', sa.String(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('status', checked_enum('customerstatus', ['active', 'inactive', 'prospect']), nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    # Service tickets
    op.create_table(
        'security_service_tickets',
        sa.Column('id', sa.Uuid(), primary_key=True, server_default=gen_random_uuid()),
        sa.Column('customer_id', sa.Uuid(), sa.ForeignKey('security_customers.id'), nullable=False, index=True),
        sa.Column('property_id', sa.Uuid(), nullable=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('priority', checked_enum('ticketpriority', ['emergency', 'urgent', 'normal', 'low']), nullable=False, index=True),
        sa.Column('status', checked_enum('ticketstatus', ['open', 'assigned', 'scheduled', 'in_progress', 'completed', 'cancelled']), nullable=False, index=True),
        sa.Column('assigned_to', sa.String(), nullable=True),
        sa.Column('scheduled_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('completed_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now(), index=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    # Chat conversations
    op.create_table(
        'security_chat_conversations',
        sa.Column('id', sa.Uuid(), primary_key=True, server_default=gen_random_uuid()),
        sa.Column('lead_id', sa.Uuid(), sa.ForeignKey('security_leads.id'), nullable=True, index=True),
        sa.Column('customer_id', sa.Uuid(), sa.ForeignKey('security_customers.id'), nullable=True, index=True),
        sa.Column('session_id', sa.String(), nullable=False, unique=True),
        sa.Column('messages', JSON, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now(), index=True),
    )

    # Call logs
    op.create_table(
        'security_call_logs',
        sa.Column('id', sa.Uuid(), primary_key=True, server_default=gen_random_uuid()),
        sa.Column('lead_id', sa.Uuid(), sa.ForeignKey('security_leads.id'), nullable=True, index=True),
        sa.Column('customer_id', sa.Uuid(), sa.ForeignKey('security_customers.id'), nullable=True, index=True),
        sa.Column('caller_name', sa.String(), nullable=True),
        sa.Column('caller_phone', sa.String(), nullable=True),
        sa.Column('duration_seconds', sa.Integer(), nullable=True),
        sa.Column('call_type', checked_enum('calltype', ['inbound', 'outbound']), nullable=True, index=True),
        sa.Column('sentiment', checked_enum('callsentiment', ['positive', 'neutral', 'negative']), nullable=True),
        sa.Column('summary', sa.Text(), nullable=True),
        sa.Column('transcript', JSON, nullable=True),
        sa.Column('retell_call_id', sa.String(), nullable=True, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now(), index=True),
    )

    # Admin users
    op.create_table(
        'security_admin_users',
        sa.Column('id', sa.Uuid(), primary_key=True, server_default=gen_random_uuid()),
        sa.Column('email', sa.String(), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('role', sa.String(), nullable=False, server_default='admin'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table('security_admin_users')
    op.drop_table('security_call_logs')
    op.drop_table('security_chat_conversations')
    op.drop_table('security_service_tickets')
    op.drop_table('security_customers')
    op.drop_table('security_leads')
