"""Create students table

Revision ID: 0001_create_students_table
Revises: None
Create Date: 2026-10-17

- students: name, course, email, phone plus created_at / updated_at stamps
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = '0001_create_students_table'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'students',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=191), nullable=False),
        sa.Column('course', sa.String(length=191), nullable=False),
        sa.Column('email', sa.String(length=191), nullable=False),
        sa.Column('phone', sa.String(length=10), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_students_id', 'students', ['id'])


def downgrade() -> None:
    op.drop_index('ix_students_id', table_name='students')
    op.drop_table('students')
