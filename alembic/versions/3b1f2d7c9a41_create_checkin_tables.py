"""create_checkin_tables

Revision ID: 3b1f2d7c9a41
Revises:
Create Date: 2026-10-18 09:12:31.402118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3b1f2d7c9a41'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('user_profiles',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('cognito_sub', sa.String(length=255), nullable=False),
        sa.Column('display_name', sa.String(length=255), nullable=True),
        sa.Column('icon_url', sa.String(length=512), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_user_profiles_id'), 'user_profiles', ['id'], unique=False)
    op.create_index(op.f('ix_user_profiles_cognito_sub'), 'user_profiles', ['cognito_sub'], unique=True)

    op.create_table('breweries',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('address', sa.String(length=512), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=False),
        sa.Column('longitude', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_breweries_id'), 'breweries', ['id'], unique=False)

    op.create_table('visits',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_profile_id', sa.Integer(), nullable=False),
        sa.Column('brewery_id', sa.Integer(), nullable=False),
        sa.Column('brewery_name', sa.String(length=255), nullable=True),
        sa.Column('brewery_latitude', sa.Float(), nullable=True),
        sa.Column('brewery_longitude', sa.Float(), nullable=True),
        sa.Column('visited_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['brewery_id'], ['breweries.id'], ),
        sa.ForeignKeyConstraint(['user_profile_id'], ['user_profiles.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_visits_id'), 'visits', ['id'], unique=False)
    op.create_index(op.f('ix_visits_user_profile_id'), 'visits', ['user_profile_id'], unique=False)
    op.create_index(op.f('ix_visits_brewery_id'), 'visits', ['brewery_id'], unique=False)
    op.create_index('ix_visits_user_brewery_visited_at', 'visits', ['user_profile_id', 'brewery_id', 'visited_at'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_visits_user_brewery_visited_at', table_name='visits')
    op.drop_index(op.f('ix_visits_brewery_id'), table_name='visits')
    op.drop_index(op.f('ix_visits_user_profile_id'), table_name='visits')
    op.drop_index(op.f('ix_visits_id'), table_name='visits')
    op.drop_table('visits')

    op.drop_index(op.f('ix_breweries_id'), table_name='breweries')
    op.drop_table('breweries')

    op.drop_index(op.f('ix_user_profiles_cognito_sub'), table_name='user_profiles')
    op.drop_index(op.f('ix_user_profiles_id'), table_name='user_profiles')
    op.drop_table('user_profiles')
