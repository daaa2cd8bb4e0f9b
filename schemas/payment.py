# schemas/payment.py
"""
Pydantic schemas for the PortOne webhook and the direct payment API.
"""
from typing import Any, List, Optional
from pydantic import BaseModel, Field, ConfigDict


class PortOneWebhookRequest(BaseModel):
     """
     Request body for POST /api/portone.

     Both fields are optional here; presence and the allowed status values
     are checked by the webhook service so every rejection uses the same envelope.
     """
     payment_id: Optional[str] = Field(None, description="PortOne payment ID")
     status: Optional[str] = Field(None, description='Payment status: "Paid" or "Cancelled"')

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "payment_id": "payment_1767225600000_k3j9x2a",
                    "status": "Paid",
               }
          }
     )


class PortOneWebhookResponse(BaseModel):
     """Response for POST /api/portone."""
     success: bool = True
     message: str
     checklist: List[str] = Field(default_factory=list, description="Completed steps in order")


class CustomerRef(BaseModel):
     id: str = Field(..., min_length=1, description="Gateway customer ID")


class PaymentChargeRequest(BaseModel):
     """Request body for POST /api/payments."""
     billingKey: str = Field(..., min_length=1, description="Billing key issued by PortOne")
     orderName: str = Field(..., min_length=1, description="Order name shown to the customer")
     amount: int = Field(..., gt=0, description="Amount to charge")
     customer: CustomerRef

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "billingKey": "billing-key-0192a5c6",
                    "orderName": "IT Magazine monthly subscription",
                    "amount": 9900,
                    "customer": {"id": "customer_1767225600000_ab12cd3"},
               }
          }
     )


class PaymentChargeResponse(BaseModel):
     """Response for POST /api/payments."""
     success: bool = True
     paymentId: str
     data: Any = None


class PaymentCancelRequest(BaseModel):
     """Request body for POST /api/payments/cancel."""
     transactionKey: str = Field(..., min_length=1, description="PortOne payment ID to cancel")
     reason: Optional[str] = Field(None, max_length=200, description="Cancellation reason")


class PaymentCancelResponse(BaseModel):
     """Response for POST /api/payments/cancel."""
     success: bool = True
     data: Any = None
