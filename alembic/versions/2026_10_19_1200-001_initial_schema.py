"""initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19 12:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create movies table
    op.create_table(
        'movies',
        sa.Column('id', sa.String(length=100), nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('overview', sa.Text(), nullable=True),
        sa.Column('poster_path', sa.String(length=200), nullable=True),
        sa.Column('backdrop_path', sa.String(length=200), nullable=True),
        sa.Column('genres', sa.JSON(), nullable=False),
        sa.Column('casts', sa.JSON(), nullable=False),
        sa.Column('release_date', sa.String(length=20), nullable=True),
        sa.Column('original_language', sa.String(length=10), nullable=True),
        sa.Column('tagline', sa.Text(), nullable=False, server_default=''),
        sa.Column('vote_average', sa.Float(), nullable=True),
        sa.Column('runtime', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_movies_title'), 'movies', ['title'], unique=False)

    # Create shows table
    op.create_table(
        'shows',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('movie_id', sa.String(length=100), nullable=False),
        sa.Column('show_date_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('show_price', sa.Float(), nullable=False),
        sa.Column('occupied_seats', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['movie_id'], ['movies.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_shows_movie_id'), 'shows', ['movie_id'], unique=False)
    op.create_index(op.f('ix_shows_show_date_time'), 'shows', ['show_date_time'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_shows_show_date_time'), table_name='shows')
    op.drop_index(op.f('ix_shows_movie_id'), table_name='shows')
    op.drop_table('shows')
    op.drop_index(op.f('ix_movies_title'), table_name='movies')
    op.drop_table('movies')
