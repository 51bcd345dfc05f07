"""create user table with gamification state

Revision ID: 5c2a9e71d0b3
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5c2a9e71d0b3'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if 'user' in set(insp.get_table_names()):
        return

    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=64), nullable=False),
        sa.Column('password_hash', sa.String(length=256), nullable=False),
        sa.Column('points', sa.BigInteger(), nullable=False, server_default='0'),
        sa.Column('current_theme', sa.String(length=64), nullable=False, server_default='space'),
        # JSON-encoded collections
        sa.Column('themes_owned', sa.Text(), nullable=True),
        sa.Column('powerups', sa.Text(), nullable=True),
        sa.Column('imported_sets', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_username'), 'user', ['username'], unique=True)


def downgrade():
    op.drop_index(op.f('ix_user_username'), table_name='user')
    op.drop_table('user')
