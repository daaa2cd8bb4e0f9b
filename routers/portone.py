# routers/portone.py
"""
PortOne subscription webhook.

POST /api/portone: {"payment_id": ..., "status": "Paid" | "Cancelled"}
- Paid: records the charge in the payment ledger and schedules next month's charge.
- Cancelled: records a reversal and cancels the scheduled charge at PortOne.
Failures are mapped to {"success": false, "error": ...} by the app's error handlers.
"""
from fastapi import APIRouter, Depends

from dependencies import get_webhook_service
from schemas.payment import PortOneWebhookRequest, PortOneWebhookResponse
from services.webhook_service import SubscriptionWebhookService

router = APIRouter(prefix="/api/portone", tags=["portone"])


@router.post(
     "",
     response_model=PortOneWebhookResponse,
     summary="Handle PortOne subscription webhook",
)
def portone_webhook(
     body: PortOneWebhookRequest,
     service: SubscriptionWebhookService = Depends(get_webhook_service),
):
     result = service.handle(body.payment_id, body.status)
     return PortOneWebhookResponse(message=result.message, checklist=result.checklist)
