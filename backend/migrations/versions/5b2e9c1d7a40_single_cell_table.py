"""user, phrase and a single cell table keyed by user and position

Revision ID: 5b2e9c1d7a40
Revises:
Create Date: 2025-02-09 18:30:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5b2e9c1d7a40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    existing_tables = set(insp.get_table_names())

    if 'user' not in existing_tables:
        op.create_table(
            'user',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('username', sa.String(length=50), nullable=False),
            sa.Column('password_hash', sa.String(length=100), nullable=False),
        )
        op.create_index('ix_user_username', 'user', ['username'], unique=True)

    if 'phrase' not in existing_tables:
        op.create_table(
            'phrase',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('value', sa.String(length=50), nullable=False),
        )

    if 'cell' not in existing_tables:
        op.create_table(
            'cell',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('user.id'), nullable=False),
            sa.Column('phrase', sa.String(length=50), nullable=False),
            sa.Column('checked', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('position', sa.Integer(), nullable=True),
            sa.UniqueConstraint('user_id', 'position', name='uq_cell_user_position'),
            sqlite_autoincrement=True,
        )
        op.create_index('ix_cell_user_id', 'cell', ['user_id'])


def downgrade():
    op.drop_index('ix_cell_user_id', table_name='cell')
    op.drop_table('cell')
    op.drop_table('phrase')
    op.drop_index('ix_user_username', table_name='user')
    op.drop_table('user')
