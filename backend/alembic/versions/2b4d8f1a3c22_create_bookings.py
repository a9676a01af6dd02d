"""create bookings

Revision ID: 2b4d8f1a3c22
Revises: 1a0c5e7d2b11
Create Date: 2026-09-25

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = '2b4d8f1a3c22'
down_revision: Union[str, Sequence[str], None] = '1a0c5e7d2b11'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'bookings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('keterangan', sa.String(length=255), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('field_id', sa.Integer(), nullable=False),
        sa.Column('play_date_start', sa.DateTime(timezone=True), nullable=False),
        sa.Column('play_date_end', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['field_id'], ['fields.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_bookings_user_id'), 'bookings', ['user_id'], unique=False)
    op.create_index(op.f('ix_bookings_field_id'), 'bookings', ['field_id'], unique=False)
    op.create_index('ix_bookings_field_start', 'bookings', ['field_id', 'play_date_start'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_bookings_field_start', table_name='bookings')
    op.drop_index(op.f('ix_bookings_field_id'), table_name='bookings')
    op.drop_index(op.f('ix_bookings_user_id'), table_name='bookings')
    op.drop_table('bookings')
