# models/payment.py
"""
PaymentRecord model - append-only subscription ledger.

One row per ledger event: a charge ("Paid") when the gateway reports a
successful payment, and a reversal ("Cancel") with the negated amount when
that payment is cancelled. Rows are never updated or deleted.
"""
import enum
from sqlalchemy import Column, Integer, String, DateTime, Enum, func
from .base import Base


class PaymentStatus(str, enum.Enum):
     """Ledger event kind."""
     PAID = "Paid"
     CANCEL = "Cancel"


class PaymentRecord(Base):
     """
     Subscription ledger row. Maps to the 'payment' table.

     next_schedule_id is the id the next recurring charge was registered under
     at the gateway; a cancellation row carries it forward unchanged.
     """
     __tablename__ = "payment"

     id = Column(Integer, primary_key=True, autoincrement=True)
     transaction_key = Column(String(255), nullable=False, index=True)  # gateway payment id
     amount = Column(Integer, nullable=False)  # negative for a reversal
     status = Column(
          Enum(
               PaymentStatus,
               name="payment_status",
               create_constraint=True,
               values_callable=lambda e: [m.value for m in e],
          ),
          nullable=False,
     )

     # Billing period
     start_at = Column(DateTime(timezone=True), nullable=False)
     end_at = Column(DateTime(timezone=True), nullable=False)
     end_grace_at = Column(DateTime(timezone=True), nullable=False)

     # Next recurring charge
     next_schedule_at = Column(DateTime(timezone=True), nullable=False)
     next_schedule_id = Column(String(36), nullable=False, index=True)

     created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

     def __repr__(self):
          return (
               f"<PaymentRecord(id={self.id}, transaction_key='{self.transaction_key}', "
               f"amount={self.amount}, status='{self.status.value}')>"
          )
