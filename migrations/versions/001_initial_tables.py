"""Create plant care tables

Revision ID: 001
Revises:
Create Date: 2025-01-23 10:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create plants, tasks and activities tables"""

    # 1. Create plants table
    op.create_table('plants',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('species', sa.String(150), nullable=True),
        sa.Column('location', sa.String(150), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('watering_frequency', sa.Integer(), nullable=False),
        sa.Column('light_needs', sa.String(50), nullable=False),
        sa.Column('last_watered', sa.DateTime(timezone=True), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),

        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('watering_frequency >= 1', name='ck_plants_watering_frequency_positive'),
    )

    op.create_index('ix_plants_name', 'plants', ['name'])

    # 2. Create tasks table
    op.create_table('tasks',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('plant_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('type', sa.String(20), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),

        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['plant_id'], ['plants.id'], ondelete='CASCADE'),
    )

    op.create_index('ix_tasks_plant_id', 'tasks', ['plant_id'])
    op.create_index('ix_tasks_type', 'tasks', ['type'])
    op.create_index('ix_tasks_date', 'tasks', ['date'])

    # 3. Create activities table
    op.create_table('activities',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('plant_id', sa.Integer(), nullable=True),
        sa.Column('type', sa.String(50), nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('date', sa.String(10), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('metadata', sa.JSON(), nullable=True),

        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['plant_id'], ['plants.id'], ondelete='SET NULL'),
    )

    op.create_index('ix_activities_plant_id', 'activities', ['plant_id'])
    op.create_index('ix_activities_timestamp', 'activities', ['timestamp'])


def downgrade() -> None:
    """Drop plant care tables"""
    op.drop_table('activities')
    op.drop_table('tasks')
    op.drop_table('plants')
