"""create hikes table

Revision ID: 0001_create_hikes_table
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_create_hikes_table'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema.

    Databases created by create_all() already have the table, so only
    create it when missing.
    """
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    if 'hikes' in inspector.get_table_names():
        return

    op.create_table(
        'hikes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('location', sa.String(), nullable=False),
        sa.Column('date', sa.String(), nullable=False),
        sa.Column('parking', sa.String(), nullable=False),
        sa.Column('length', sa.Float(), nullable=False),
        sa.Column('route_type', sa.String(), nullable=True),
        sa.Column('difficulty', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('weather', sa.Text(), nullable=True),
        sa.Column('photos', sa.Text(), nullable=True),
        sa.Column('locationCoords', sa.Text(), nullable=True),
        sa.Column('is_completed', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('completed_date', sa.String(), nullable=True),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )


def downgrade() -> None:
    # Safe drop if exists
    op.execute('DROP TABLE IF EXISTS hikes')
