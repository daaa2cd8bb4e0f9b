# services/ledger_service.py
"""
Payment Ledger Service - append-only subscription payment records.

When the gateway reports a subscription payment:
1. A "Paid" row is written with the billing period and the id of the next scheduled charge
2. On cancellation a "Cancel" row is appended with the negated amount;
   period and schedule fields are copied unchanged from the charge row
3. Rows are never updated or deleted

Each insert is committed on its own so a later failure in the same request
does not undo it.
"""
import logging
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from errors import NotFoundError, StoreError
from models import PaymentRecord, PaymentStatus
from services.date_calculator import BillingPeriod

logger = logging.getLogger(__name__)


class PaymentLedgerStore:
     """Insert/query wrapper over the 'payment' table."""

     def __init__(self, db: Session):
          self.db = db

     def _append(self, entry: PaymentRecord) -> PaymentRecord:
          try:
               self.db.add(entry)
               self.db.commit()
               self.db.refresh(entry)
          except SQLAlchemyError as e:
               self.db.rollback()
               raise StoreError(f"Ledger write failed: {e}")
          logger.info(
               "Ledger row %s appended (transaction_key=%s, amount=%s, status=%s)",
               entry.id, entry.transaction_key, entry.amount, entry.status.value,
          )
          return entry

     def insert_charge(
          self,
          transaction_key: str,
          amount: int,
          period: BillingPeriod,
          next_schedule_id: str,
     ) -> PaymentRecord:
          """Append a Paid row for a successful gateway payment."""
          return self._append(PaymentRecord(
               transaction_key=transaction_key,
               amount=amount,
               status=PaymentStatus.PAID,
               start_at=period.start_at,
               end_at=period.end_at,
               end_grace_at=period.end_grace_at,
               next_schedule_at=period.next_schedule_at,
               next_schedule_id=next_schedule_id,
          ))

     def insert_cancellation(self, reversal_of: PaymentRecord) -> PaymentRecord:
          """Append a Cancel row reversing `reversal_of` (amount negated, everything else carried forward)."""
          return self._append(PaymentRecord(
               transaction_key=reversal_of.transaction_key,
               amount=-reversal_of.amount,
               status=PaymentStatus.CANCEL,
               start_at=reversal_of.start_at,
               end_at=reversal_of.end_at,
               end_grace_at=reversal_of.end_grace_at,
               next_schedule_at=reversal_of.next_schedule_at,
               next_schedule_id=reversal_of.next_schedule_id,
          ))

     def get_by_transaction_key(self, key: str, status: Optional[PaymentStatus] = None) -> PaymentRecord:
          """
          Most recent row for `key`, optionally restricted to one status.

          Raises:
               NotFoundError: no matching row exists.
               StoreError: the query failed.
          """
          try:
               query = self.db.query(PaymentRecord).filter(PaymentRecord.transaction_key == key)
               if status is not None:
                    query = query.filter(PaymentRecord.status == status)
               entry = query.order_by(desc(PaymentRecord.id)).first()
          except SQLAlchemyError as e:
               raise StoreError(f"Ledger lookup failed: {e}")

          if entry is None:
               raise NotFoundError(f"No payment record found for transaction_key={key}")
          return entry

     def list_by_transaction_key(self, key: str) -> List[PaymentRecord]:
          """All rows for `key` in insertion order."""
          try:
               return (
                    self.db.query(PaymentRecord)
                    .filter(PaymentRecord.transaction_key == key)
                    .order_by(PaymentRecord.id)
                    .all()
               )
          except SQLAlchemyError as e:
               raise StoreError(f"Ledger lookup failed: {e}")
