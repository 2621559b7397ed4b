"""Create students table

Revision ID: 3a1f6c2d9e10
Revises:
Create Date: 2026-10-18 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3a1f6c2d9e10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'students',
        sa.Column('id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('age', sa.Integer(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.CheckConstraint('age >= 0', name='check_student_age_non_negative'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_students_position', 'students', ['position'])


def downgrade() -> None:
    op.drop_index('ix_students_position', table_name='students')
    op.drop_table('students')
