"""Add workout plan, session log and profile tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create workout_plans, session_logs and profile tables."""
    op.create_table('workout_plans', sa.Column('id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column('author', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('segments', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_workout_plans_position'), 'workout_plans', ['position'], unique=False)

    op.create_table('session_logs', sa.Column('seq', sa.Integer(), nullable=False),
        sa.Column('id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('user_id', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column('plan_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('effort_rating', sa.Integer(), nullable=False),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('metric_entries', sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint('seq'))
    op.create_index(op.f('ix_session_logs_id'), 'session_logs', ['id'], unique=True)
    op.create_index(op.f('ix_session_logs_plan_id'), 'session_logs', ['plan_id'], unique=False)

    op.create_table('profile', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('display_name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.PrimaryKeyConstraint('id'))


def downgrade() -> None:
    """Drop workout tables."""
    op.drop_table('profile')
    op.drop_index(op.f('ix_session_logs_plan_id'), table_name='session_logs')
    op.drop_index(op.f('ix_session_logs_id'), table_name='session_logs')
    op.drop_table('session_logs')
    op.drop_index(op.f('ix_workout_plans_position'), table_name='workout_plans')
    op.drop_table('workout_plans')
