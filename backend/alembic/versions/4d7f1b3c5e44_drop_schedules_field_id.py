"""drop redundant schedules.field_id

The field is reachable through the booking; a player row is identified by
(booking_id, user_id) only.

Revision ID: 4d7f1b3c5e44
Revises: 3c6e0a2b4d33
Create Date: 2026-09-26

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = '4d7f1b3c5e44'
down_revision: Union[str, Sequence[str], None] = '3c6e0a2b4d33'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table('schedules') as batch:
        batch.drop_constraint('fk_schedules_field_id', type_='foreignkey')
        batch.drop_column('field_id')


def downgrade() -> None:
    with op.batch_alter_table('schedules') as batch:
        batch.add_column(sa.Column('field_id', sa.Integer(), nullable=True))
        batch.create_foreign_key('fk_schedules_field_id', 'fields', ['field_id'], ['id'])
