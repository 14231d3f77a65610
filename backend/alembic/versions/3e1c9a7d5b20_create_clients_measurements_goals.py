"""create clients, measurements and client_goals tables

Revision ID: 3e1c9a7d5b20
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3e1c9a7d5b20'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()

    if 'clients' not in tables:
        op.create_table(
            'clients',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('coach_id', sa.Integer(), nullable=False),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('email', sa.String(), nullable=True),
            sa.Column('current_weight', sa.Numeric(5, 2), nullable=True),
            sa.Column('target_weight', sa.Numeric(5, 2), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        )
        op.create_index('ix_clients_id', 'clients', ['id'])
        op.create_index('ix_clients_coach_id', 'clients', ['coach_id'])

    if 'measurements' not in tables:
        op.create_table(
            'measurements',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('client_id', sa.Integer(), sa.ForeignKey('clients.id', ondelete='CASCADE'), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('weight', sa.Numeric(5, 2), nullable=False),
            sa.Column('body_fat', sa.Numeric(4, 1), nullable=True),
            sa.Column('muscle_mass', sa.Numeric(5, 2), nullable=True),
            sa.Column('notes', sa.String(), nullable=True),
            sa.UniqueConstraint('client_id', 'date', name='uq_measurements_client_date'),
        )
        op.create_index('ix_measurements_id', 'measurements', ['id'])
        op.create_index('ix_measurements_client_id', 'measurements', ['client_id'])

    if 'client_goals' not in tables:
        op.create_table(
            'client_goals',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('client_id', sa.Integer(), sa.ForeignKey('clients.id', ondelete='CASCADE'), nullable=False),
            sa.Column('coach_id', sa.Integer(), nullable=False),
            sa.Column('title', sa.String(), nullable=False),
            sa.Column('target_value', sa.Numeric(7, 2), nullable=True),
            sa.Column('unit', sa.String(length=20), nullable=True),
            sa.Column('goal_type', sa.String(length=20), nullable=True),
            sa.Column('deadline', sa.Date(), nullable=True),
            sa.Column('status', sa.String(length=20), server_default='active', nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        )
        op.create_index('ix_client_goals_id', 'client_goals', ['id'])
        op.create_index('ix_client_goals_client_id', 'client_goals', ['client_id'])


def downgrade() -> None:
    # Safe drop if exists
    op.execute('DROP TABLE IF EXISTS client_goals')
    op.execute('DROP TABLE IF EXISTS measurements')
    op.execute('DROP TABLE IF EXISTS clients')
