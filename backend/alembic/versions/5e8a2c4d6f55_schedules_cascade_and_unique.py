"""schedules: cascade on booking delete, one row per (booking, user)

Revision ID: 5e8a2c4d6f55
Revises: 4d7f1b3c5e44
Create Date: 2026-09-26

"""

from typing import Sequence, Union

from alembic import op


revision: str = '5e8a2c4d6f55'
down_revision: Union[str, Sequence[str], None] = '4d7f1b3c5e44'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table('schedules') as batch:
        batch.drop_constraint('fk_schedules_booking_id', type_='foreignkey')
        batch.create_foreign_key(
            'fk_schedules_booking_id', 'bookings', ['booking_id'], ['id'], ondelete='CASCADE'
        )
        batch.create_unique_constraint('uq_schedules_booking_user', ['booking_id', 'user_id'])


def downgrade() -> None:
    with op.batch_alter_table('schedules') as batch:
        batch.drop_constraint('uq_schedules_booking_user', type_='unique')
        batch.drop_constraint('fk_schedules_booking_id', type_='foreignkey')
        batch.create_foreign_key('fk_schedules_booking_id', 'bookings', ['booking_id'], ['id'])
