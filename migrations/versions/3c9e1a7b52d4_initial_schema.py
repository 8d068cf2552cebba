"""initial_schema

Revision ID: 3c9e1a7b52d4
Revises:
Create Date: 2026-09-02 10:41:12.118204

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c9e1a7b52d4'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(120)),
        sa.Column('email', sa.String(120), nullable=False),
        sa.Column('role', sa.String(20), nullable=False),
        sa.Column('number', sa.String(20)),
        sa.Column('is_active', sa.Boolean()),
        sa.Column('created_at', sa.DateTime()),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_role', 'users', ['role'])

    op.create_table(
        'water_tests',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('waterbody_name', sa.String(200), nullable=False),
        sa.Column('waterbody_id', sa.String(64)),
        sa.Column('location', sa.String(255), nullable=False),
        sa.Column('latitude', sa.Float()),
        sa.Column('longitude', sa.Float()),
        sa.Column('date_time', sa.DateTime(), nullable=False),
        sa.Column('photo_url', sa.String(500), nullable=False),
        sa.Column('notes', sa.Text(), nullable=False),
        sa.Column('quality', sa.String(10), nullable=False),
        sa.Column('asha_id', sa.String(36), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('created_at', sa.DateTime()),
        sa.Column('updated_at', sa.DateTime()),
        sa.CheckConstraint("quality IN ('good', 'medium', 'high')", name='ck_water_tests_quality'),
    )
    op.create_index('ix_water_tests_waterbody_name', 'water_tests', ['waterbody_name'])
    op.create_index('ix_water_tests_waterbody_id', 'water_tests', ['waterbody_id'])
    op.create_index('ix_water_tests_quality', 'water_tests', ['quality'])
    op.create_index('ix_water_tests_asha_id', 'water_tests', ['asha_id'])
    op.create_index('ix_water_tests_created_at', 'water_tests', ['created_at'])

    op.create_table(
        'leader_alerts',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('leader_id', sa.String(36), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('water_test_id', sa.String(36),
                  sa.ForeignKey('water_tests.id', ondelete='SET NULL')),
        sa.Column('is_read', sa.Boolean()),
        sa.Column('created_at', sa.DateTime()),
    )
    op.create_index('ix_leader_alerts_leader_id', 'leader_alerts', ['leader_id'])
    op.create_index('ix_leader_alerts_water_test_id', 'leader_alerts', ['water_test_id'])
    op.create_index('ix_leader_alerts_created_at', 'leader_alerts', ['created_at'])

    op.create_table(
        'global_alerts',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('water_test_id', sa.String(36),
                  sa.ForeignKey('water_tests.id', ondelete='SET NULL')),
        sa.Column('created_at', sa.DateTime()),
    )
    op.create_index('ix_global_alerts_water_test_id', 'global_alerts', ['water_test_id'])
    op.create_index('ix_global_alerts_created_at', 'global_alerts', ['created_at'])

    op.create_table(
        'health_cards',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('waterbody_name', sa.String(200), nullable=False),
        sa.Column('waterbody_id', sa.String(64)),
        sa.Column('location', sa.String(255)),
        sa.Column('latitude', sa.Float()),
        sa.Column('longitude', sa.Float()),
        sa.Column('total_tests', sa.Integer()),
        sa.Column('good_count', sa.Integer()),
        sa.Column('medium_count', sa.Integer()),
        sa.Column('high_count', sa.Integer()),
        sa.Column('latest_quality', sa.String(10)),
        sa.Column('last_tested_at', sa.DateTime()),
        sa.Column('status', sa.String(20)),
        sa.Column('updated_by_id', sa.String(36), sa.ForeignKey('users.id')),
        sa.Column('created_at', sa.DateTime()),
        sa.Column('updated_at', sa.DateTime()),
    )
    op.create_index('ix_health_cards_waterbody_name', 'health_cards', ['waterbody_name'])
    op.create_index('ix_health_cards_waterbody_id', 'health_cards', ['waterbody_id'], unique=True)
    op.create_index('ix_health_cards_updated_at', 'health_cards', ['updated_at'])

    op.create_table(
        'notification_log',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('notification_type', sa.String(20), nullable=False),
        sa.Column('recipient_phone', sa.String(40)),
        sa.Column('message_content', sa.Text()),
        sa.Column('status', sa.String(20)),
        sa.Column('twilio_message_sid', sa.String(100)),
        sa.Column('twilio_error_code', sa.String(10)),
        sa.Column('error_message', sa.Text()),
        sa.Column('created_at', sa.DateTime()),
        sa.Column('sent_at', sa.DateTime()),
        sa.Column('failed_at', sa.DateTime()),
        sa.Column('water_test_id', sa.String(36),
                  sa.ForeignKey('water_tests.id', ondelete='SET NULL')),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id')),
    )
    op.create_index('ix_notification_log_notification_type', 'notification_log', ['notification_type'])
    op.create_index('ix_notification_log_status', 'notification_log', ['status'])
    op.create_index('ix_notification_log_twilio_message_sid', 'notification_log', ['twilio_message_sid'], unique=True)
    op.create_index('ix_notification_log_created_at', 'notification_log', ['created_at'])
    op.create_index('ix_notification_log_water_test_id', 'notification_log', ['water_test_id'])


def downgrade():
    op.drop_table('notification_log')
    op.drop_table('health_cards')
    op.drop_table('global_alerts')
    op.drop_table('leader_alerts')
    op.drop_table('water_tests')
    op.drop_table('users')
