"""Initial migration - users and activities

Revision ID: 001_initial
Revises:
Create Date: 2025-01-06

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create users table
    op.create_table(
        'users',
        sa.Column('athlete_id', sa.String(64), primary_key=True),
        sa.Column('firstname', sa.String(100), nullable=True),
        sa.Column('lastname', sa.String(100), nullable=True),
        sa.Column('profile_json', sa.Text(), nullable=True),
        sa.Column('access_token', sa.Text(), nullable=True),
        sa.Column('refresh_token', sa.Text(), nullable=True),
        sa.Column('expires_at', sa.Integer(), nullable=True),
        sa.Column('is_admin', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('is_og_admin', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('last_fetch_time', sa.BigInteger(), nullable=True),
    )

    # Create activities table
    op.create_table(
        'activities',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column(
            'athlete_id',
            sa.String(64),
            sa.ForeignKey('users.athlete_id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('athlete_name', sa.String(255), nullable=True),
        sa.Column('activity_name', sa.Text(), nullable=True),
        sa.Column('type', sa.String(50), nullable=False),
        sa.Column('distance_miles', sa.Float(), nullable=False, server_default='0'),
        sa.Column('start_date', sa.String(40), nullable=False),
        sa.Column('week_commencing', sa.String(10), nullable=False),
        sa.Column('strava_link', sa.String(255), nullable=True),
        sa.Column('manual_entry', sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index('ix_activities_athlete_id', 'activities', ['athlete_id'])
    op.create_index('ix_activities_start_date', 'activities', ['start_date'])


def downgrade() -> None:
    op.drop_index('ix_activities_start_date', table_name='activities')
    op.drop_index('ix_activities_athlete_id', table_name='activities')
    op.drop_table('activities')
    op.drop_table('users')
