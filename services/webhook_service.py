# services/webhook_service.py
"""
PortOne subscription webhook processing.

    Paid      -> fetch payment, compute period, insert charge row, schedule next charge
    Cancelled -> insert reversal row, then locate and cancel the scheduled next charge

Steps run strictly in order and stop at the first failure. Earlier side
effects are left in place; nothing is retried or compensated.
"""
import logging
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, List, Optional

from errors import AppError, NotFoundError, ValidationError
from models import PaymentStatus
from services.date_calculator import calculate_dates
from services.ledger_service import PaymentLedgerStore
from services.portone_client import PortOneClient

logger = logging.getLogger(__name__)

STATUS_PAID = "Paid"
STATUS_CANCELLED = "Cancelled"


@dataclass
class WebhookResult:
     message: str
     checklist: List[str] = field(default_factory=list)
     outcome: str = "processed"


def _utcnow() -> datetime:
     return datetime.now(timezone.utc)


class SubscriptionWebhookService:
     """Sequences gateway and ledger calls for one webhook notification."""

     def __init__(
          self,
          gateway: PortOneClient,
          ledger: PaymentLedgerStore,
          clock: Callable[[], datetime] = _utcnow,
          id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
     ):
          self.gateway = gateway
          self.ledger = ledger
          self.clock = clock
          self.id_factory = id_factory

     @contextmanager
     def _step(self, name: str):
          try:
               yield
          except AppError as e:
               if e.step is None:
                    e.step = name
               logger.error("Webhook step '%s' failed: %s", name, e.message)
               raise
          except Exception:
               logger.exception("Webhook step '%s' failed unexpectedly", name)
               raise

     def handle(self, payment_id: Optional[str], status: Optional[str]) -> WebhookResult:
          if not payment_id or not status:
               raise ValidationError("Missing required parameters: payment_id and status", step="validate")
          if status not in (STATUS_PAID, STATUS_CANCELLED):
               raise ValidationError(f"Unknown payment status: {status}", step="validate")

          # Before any ledger or gateway call
          with self._step("check_configuration"):
               self.gateway.ensure_configured()

          checklist = ["✓ Request validated"]
          logger.info("Processing PortOne webhook payment_id=%s status=%s", payment_id, status)

          if status == STATUS_PAID:
               return self._handle_paid(payment_id, checklist)
          return self._handle_cancelled(payment_id, checklist)

     def _handle_paid(self, payment_id: str, checklist: List[str]) -> WebhookResult:
          with self._step("fetch_payment"):
               payment = self.gateway.fetch_payment_info(payment_id)
          checklist.append(f"✓ Payment info fetched (payment id: {payment.id})")

          period = calculate_dates(self.clock())
          checklist.append(
               f"✓ Billing period calculated (start: {period.start_at.isoformat()}, end: {period.end_at.isoformat()})"
          )

          next_schedule_id = self.id_factory()
          checklist.append(f"✓ Next schedule id generated ({next_schedule_id})")

          with self._step("insert_charge"):
               self.ledger.insert_charge(
                    transaction_key=payment.id,
                    amount=payment.total_amount,
                    period=period,
                    next_schedule_id=next_schedule_id,
               )
          checklist.append(f"✓ Payment record saved (amount: {payment.total_amount})")

          with self._step("schedule_next_payment"):
               self.gateway.schedule_next_payment(next_schedule_id, payment, period.next_schedule_at)
          checklist.append(f"✓ Next payment scheduled (at: {period.next_schedule_at.isoformat()})")

          logger.info("Subscription payment %s processed, next charge %s", payment.id, next_schedule_id)
          return WebhookResult(message="Subscription payment processed", checklist=checklist)

     def _handle_cancelled(self, payment_id: str, checklist: List[str]) -> WebhookResult:
          with self._step("find_payment_record"):
               original = self.ledger.get_by_transaction_key(payment_id, status=PaymentStatus.PAID)
          checklist.append(f"✓ Original payment record found (id: {original.id})")

          with self._step("insert_cancellation"):
               self.ledger.insert_cancellation(original)
          checklist.append(f"✓ Cancellation record saved (amount: {-original.amount})")

          with self._step("fetch_payment"):
               payment = self.gateway.fetch_payment_info(payment_id)
               if not payment.billing_key:
                    raise NotFoundError(f"Payment {payment_id} has no billing key")
          checklist.append("✓ Billing key fetched")

          with self._step("list_scheduled_payments"):
               schedules = self.gateway.list_scheduled_payments(payment.billing_key, original.next_schedule_at)
          checklist.append(f"✓ Scheduled payments listed ({len(schedules)} found)")

          with self._step("match_scheduled_payment"):
               target = next((s for s in schedules if s.payment_id == original.next_schedule_id), None)
               if target is None:
                    raise NotFoundError(f"No scheduled payment found for next_schedule_id={original.next_schedule_id}")
          checklist.append(f"✓ Scheduled payment matched (schedule id: {target.schedule_id})")

          with self._step("cancel_scheduled_payment"):
               self.gateway.cancel_scheduled_payment(target.schedule_id)
          checklist.append("✓ Scheduled payment cancelled")

          logger.info("Subscription payment %s cancelled, schedule %s removed", payment_id, target.schedule_id)
          return WebhookResult(message="Subscription cancellation processed", checklist=checklist)
