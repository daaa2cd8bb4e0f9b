# services/__init__.py
from .date_calculator import BillingPeriod, calculate_dates
from .portone_client import PaymentInfo, PortOneClient, ScheduledPayment
from .ledger_service import PaymentLedgerStore
from .webhook_service import SubscriptionWebhookService, WebhookResult
from .magazine_service import MagazineService, build_image_path

__all__ = [
     "BillingPeriod",
     "calculate_dates",
     "PaymentInfo",
     "PortOneClient",
     "ScheduledPayment",
     "PaymentLedgerStore",
     "SubscriptionWebhookService",
     "WebhookResult",
     "MagazineService",
     "build_image_path",
]
