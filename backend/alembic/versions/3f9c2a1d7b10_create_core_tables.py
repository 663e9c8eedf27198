"""create_core_tables

Revision ID: 3f9c2a1d7b10
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = '3f9c2a1d7b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password', sa.String(255), nullable=True),
        sa.Column('username', sa.String(255), nullable=False),
        sa.Column('role', sa.Enum('host', 'performer', name='userrole'), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'performers',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('stage_name', sa.String(255), nullable=True),
        sa.Column('full_name', sa.String(255), nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('profile_picture_url', sa.String(512), nullable=True),
        sa.Column('average_rating', sa.Numeric(3, 2), nullable=False, server_default='0'),
        sa.Column('total_reviews', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
    )
    op.create_index('ix_performers_id', 'performers', ['id'])

    op.create_table(
        'hosts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('company_organization', sa.String(255), nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('profile_picture_url', sa.String(512), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_hosts_id', 'hosts', ['id'])

    op.create_table(
        'gigs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('host_id', sa.Integer(), sa.ForeignKey('hosts.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('budget_min', sa.Numeric(10, 2), nullable=True),
        sa.Column('budget_max', sa.Numeric(10, 2), nullable=True),
        sa.Column('event_date', sa.Date(), nullable=True),
        sa.Column('event_time', sa.String(32), nullable=True),
        sa.Column('event_location', sa.String(255), nullable=True),
        sa.Column('event_type', sa.String(100), nullable=True),
        sa.Column('event_scope', sa.String(100), nullable=True),
        sa.Column('location_city', sa.String(100), nullable=True),
        sa.Column('location_district', sa.String(100), nullable=True),
        sa.Column('talents', sa.String(512), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_gigs_id', 'gigs', ['id'])
    op.create_index('ix_gigs_host_id', 'gigs', ['host_id'])

    op.create_table(
        'gig_requests',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('gig_id', sa.Integer(), sa.ForeignKey('gigs.id', ondelete='CASCADE'), nullable=False),
        sa.Column('performer_id', sa.Integer(), sa.ForeignKey('performers.id', ondelete='CASCADE'), nullable=False),
        sa.Column('status', sa.Enum('pending', 'accepted', 'rejected', name='gigrequeststatus'), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_gig_requests_id', 'gig_requests', ['id'])
    op.create_index('ix_gig_requests_gig_id', 'gig_requests', ['gig_id'])
    op.create_index('ix_gig_requests_performer_id', 'gig_requests', ['performer_id'])

    op.create_table(
        'bookings',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('artist_id', sa.Integer(), sa.ForeignKey('performers.id'), nullable=False),
        sa.Column('host_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('event_date', sa.Date(), nullable=False),
        sa.Column('event_time', sa.String(32), nullable=False),
        sa.Column('event_location', sa.String(255), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('payment_method', sa.String(64), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_bookings_id', 'bookings', ['id'])
    op.create_index('ix_bookings_artist_id', 'bookings', ['artist_id'])
    op.create_index('ix_bookings_host_id', 'bookings', ['host_id'])

    op.create_table(
        'artist_reviews',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('artist_id', sa.Integer(), sa.ForeignKey('performers.id', ondelete='CASCADE'), nullable=False),
        sa.Column('reviewer_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('reviewer_role', sa.String(20), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('review_text', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_artist_reviews_id', 'artist_reviews', ['id'])
    op.create_index('ix_artist_reviews_artist_id', 'artist_reviews', ['artist_id'])
    op.create_index('ix_artist_reviews_reviewer_id', 'artist_reviews', ['reviewer_id'])

    op.create_table(
        'notifications',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('type', sa.String(32), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('is_read', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('request_id', sa.Integer(), sa.ForeignKey('gig_requests.id', ondelete='SET NULL'), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_notifications_id', 'notifications', ['id'])
    op.create_index('ix_notifications_user_id', 'notifications', ['user_id'])

    op.create_table(
        'messages',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('sender_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('receiver_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('message_text', sa.Text(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_messages_id', 'messages', ['id'])
    op.create_index('ix_messages_sender_id', 'messages', ['sender_id'])
    op.create_index('ix_messages_receiver_id', 'messages', ['receiver_id'])


def downgrade() -> None:
    for table in (
        'messages',
        'notifications',
        'artist_reviews',
        'bookings',
        'gig_requests',
        'gigs',
        'hosts',
        'performers',
        'users',
    ):
        op.drop_table(table)
    op.execute("DROP TYPE IF EXISTS gigrequeststatus")
    op.execute("DROP TYPE IF EXISTS userrole")
