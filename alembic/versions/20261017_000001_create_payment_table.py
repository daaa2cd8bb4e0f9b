"""Create payment table

Revision ID: 20261017_000001
Revises: None
Create Date: 2026-10-17

Append-only subscription ledger: one row per charge or reversal.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261017_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the payment table."""
    op.create_table(
        'payment',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('transaction_key', sa.String(255), nullable=False),
        sa.Column('amount', sa.Integer(), nullable=False),
        sa.Column(
            'status',
            sa.Enum('Paid', 'Cancel', name='payment_status', create_constraint=True),
            nullable=False,
        ),
        sa.Column('start_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_grace_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('next_schedule_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('next_schedule_id', sa.String(36), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_payment'),
    )
    op.create_index('ix_payment_transaction_key', 'payment', ['transaction_key'])
    op.create_index('ix_payment_next_schedule_id', 'payment', ['next_schedule_id'])


def downgrade() -> None:
    """Drop the payment table."""
    op.drop_index('ix_payment_next_schedule_id', table_name='payment')
    op.drop_index('ix_payment_transaction_key', table_name='payment')
    op.drop_table('payment')
