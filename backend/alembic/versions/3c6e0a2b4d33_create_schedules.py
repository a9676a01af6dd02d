"""create schedules (booking players)

Revision ID: 3c6e0a2b4d33
Revises: 2b4d8f1a3c22
Create Date: 2026-09-25

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = '3c6e0a2b4d33'
down_revision: Union[str, Sequence[str], None] = '2b4d8f1a3c22'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'schedules',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('field_id', sa.Integer(), nullable=True),
        sa.Column('booking_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['field_id'], ['fields.id'], name='fk_schedules_field_id'),
        sa.ForeignKeyConstraint(['booking_id'], ['bookings.id'], name='fk_schedules_booking_id'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_schedules_user_id'), 'schedules', ['user_id'], unique=False)
    op.create_index(op.f('ix_schedules_booking_id'), 'schedules', ['booking_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_schedules_booking_id'), table_name='schedules')
    op.drop_index(op.f('ix_schedules_user_id'), table_name='schedules')
    op.drop_table('schedules')
