# routers/payments.py
"""
Direct payment API.

POST /api/payments: charge a billing key immediately.
POST /api/payments/cancel: cancel a payment at PortOne.
Neither endpoint writes to the payment ledger; ledger rows are created by the
PortOne webhook once the gateway reports the outcome.
"""
import logging
import time
import uuid

from fastapi import APIRouter, Depends

from dependencies import get_portone_client
from schemas.payment import (
     PaymentChargeRequest,
     PaymentChargeResponse,
     PaymentCancelRequest,
     PaymentCancelResponse,
)
from services.portone_client import DEFAULT_CANCEL_REASON, PortOneClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/payments", tags=["payments"])


def generate_payment_id() -> str:
     """payment_<epoch ms>_<7 random chars>"""
     return f"payment_{int(time.time() * 1000)}_{uuid.uuid4().hex[:7]}"


@router.post(
     "",
     response_model=PaymentChargeResponse,
     summary="Charge a billing key",
)
def create_payment(
     body: PaymentChargeRequest,
     gateway: PortOneClient = Depends(get_portone_client),
):
     """
     Charge the customer's billing key once.

     - **billingKey**: billing key issued by PortOne
     - **orderName**: order name
     - **amount**: amount to charge
     - **customer.id**: PortOne customer ID
     """
     payment_id = generate_payment_id()
     logger.info(
          "PortOne payment request: payment_id=%s order=%s amount=%s customer=%s",
          payment_id, body.orderName, body.amount, body.customer.id,
     )
     data = gateway.charge_billing_key(
          payment_id=payment_id,
          billing_key=body.billingKey,
          order_name=body.orderName,
          amount=body.amount,
          customer_id=body.customer.id,
     )
     logger.info("PortOne payment succeeded: payment_id=%s", payment_id)
     return PaymentChargeResponse(paymentId=payment_id, data=data)


@router.post(
     "/cancel",
     response_model=PaymentCancelResponse,
     summary="Cancel a payment",
)
def cancel_payment(
     body: PaymentCancelRequest,
     gateway: PortOneClient = Depends(get_portone_client),
):
     reason = body.reason or DEFAULT_CANCEL_REASON
     logger.info("PortOne cancel request: transaction_key=%s reason=%s", body.transactionKey, reason)
     data = gateway.cancel_payment(body.transactionKey, reason=reason)
     logger.info("PortOne cancel succeeded: transaction_key=%s", body.transactionKey)
     return PaymentCancelResponse(data=data)
