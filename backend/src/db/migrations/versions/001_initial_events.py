"""Initial events schema

Revision ID: 001_initial_events
Revises:
Create Date: 2026-10-18

Creates the events aggregate:
- events: organizer-owned events keyed by an application-assigned integer id
- registrations: attendee registrations (events.event_id, CASCADE)
- volunteer_applications: volunteer applications with review status (CASCADE)
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001_initial_events'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create events, registrations and volunteer_applications tables."""

    op.create_table(
        'events',
        sa.Column('event_id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('venue', sa.String(length=255), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=False),
        sa.Column('deadline', sa.DateTime(), nullable=False),
        sa.Column('max_participants', sa.Integer(), nullable=False, server_default='100'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('now()')),
        sa.PrimaryKeyConstraint('event_id'),
    )
    op.create_index('ix_events_created_by', 'events', ['created_by'], unique=False)
    op.create_index('ix_events_created_by_date', 'events', ['created_by', 'date'], unique=False)

    op.create_table(
        'registrations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('registered_at', sa.DateTime(), nullable=False, server_default=sa.text('now()')),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['event_id'], ['events.event_id'], ondelete='CASCADE'),
        sa.UniqueConstraint('event_id', 'user_id', name='uq_registrations_event_user'),
    )
    op.create_index('ix_registrations_event_id', 'registrations', ['event_id'], unique=False)

    op.create_table(
        'volunteer_applications',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='pending'),
        sa.Column('applied_at', sa.DateTime(), nullable=False, server_default=sa.text('now()')),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['event_id'], ['events.event_id'], ondelete='CASCADE'),
        sa.UniqueConstraint('event_id', 'user_id', name='uq_volunteer_applications_event_user'),
    )
    op.create_index(
        'ix_volunteer_applications_event_id', 'volunteer_applications', ['event_id'], unique=False
    )


def downgrade() -> None:
    """
    Drop the events schema.

    Note: This drops all events, registrations and volunteer applications.
    """
    op.drop_index('ix_volunteer_applications_event_id', table_name='volunteer_applications')
    op.drop_table('volunteer_applications')
    op.drop_index('ix_registrations_event_id', table_name='registrations')
    op.drop_table('registrations')
    op.drop_index('ix_events_created_by_date', table_name='events')
    op.drop_index('ix_events_created_by', table_name='events')
    op.drop_table('events')
