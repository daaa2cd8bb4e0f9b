# schemas/__init__.py
from .payment import (
     PortOneWebhookRequest,
     PortOneWebhookResponse,
     PaymentChargeRequest,
     PaymentChargeResponse,
     PaymentCancelRequest,
     PaymentCancelResponse,
)
from .magazine import (
     MagazineCreate,
     MagazineSummary,
     MagazineDetail,
     MagazineCreateResponse,
)

__all__ = [
     "PortOneWebhookRequest",
     "PortOneWebhookResponse",
     "PaymentChargeRequest",
     "PaymentChargeResponse",
     "PaymentCancelRequest",
     "PaymentCancelResponse",
     "MagazineCreate",
     "MagazineSummary",
     "MagazineDetail",
     "MagazineCreateResponse",
]
