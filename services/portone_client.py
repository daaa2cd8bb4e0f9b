# services/portone_client.py
"""
PortOne v2 REST client.

Every call goes through one requests.Session and one request helper, so the
Authorization header, timeout and error mapping are identical for all
operations. Non-2xx responses and transport failures raise GatewayError.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Optional
from urllib.parse import quote

import requests

import config
from errors import GatewayError

logger = logging.getLogger(__name__)

DEFAULT_CANCEL_REASON = "No reason provided"
SCHEDULE_WINDOW = timedelta(days=1)


@dataclass(frozen=True)
class PaymentInfo:
     """Subset of a PortOne payment used by the subscription flows."""
     id: str
     order_name: str
     total_amount: int
     customer_id: str
     billing_key: Optional[str] = None

     @classmethod
     def from_api(cls, data: dict) -> "PaymentInfo":
          return cls(
               id=data["id"],
               billing_key=data.get("billingKey"),
               order_name=data.get("orderName", ""),
               total_amount=int((data.get("amount") or {}).get("total", 0)),
               customer_id=(data.get("customer") or {}).get("id", ""),
          )


@dataclass(frozen=True)
class ScheduledPayment:
     """A future charge registered at the gateway."""
     schedule_id: str
     payment_id: str


def to_iso(value: datetime) -> str:
     """ISO-8601 UTC with millisecond precision and a Z suffix. Naive values are taken as UTC."""
     if value.tzinfo is None:
          value = value.replace(tzinfo=timezone.utc)
     return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _response_body(response):
     try:
          return response.json()
     except ValueError:
          return response.text


class PortOneClient:
     """Thin wrapper over the PortOne payment and payment-schedule endpoints."""

     def __init__(
          self,
          api_secret: str,
          base_url: str = config.PORTONE_API_BASE_URL,
          currency: str = config.PORTONE_CURRENCY,
          timeout: float = config.PORTONE_TIMEOUT,
          session: Optional[requests.Session] = None,
     ):
          self.api_secret = api_secret
          self.base_url = base_url.rstrip("/")
          self.currency = currency
          self.timeout = timeout
          self.session = session or requests.Session()

     def _headers(self) -> dict:
          return {
               "Authorization": f"PortOne {self.api_secret}",
               "Content-Type": "application/json",
          }

     def ensure_configured(self) -> None:
          """Raise ConfigurationError if no API secret is set."""
          config.require_portone_secret(self.api_secret)

     def _request(self, method: str, path: str, action: str, json: Optional[dict] = None):
          self.ensure_configured()
          url = f"{self.base_url}{path}"
          logger.debug("PortOne %s %s", method, path)
          try:
               response = self.session.request(
                    method,
                    url,
                    headers=self._headers(),
                    json=json,
                    timeout=self.timeout,
               )
          except requests.RequestException as e:
               logger.warning("PortOne %s %s transport error: %s", method, path, e)
               raise GatewayError(f"PortOne {action} failed: {e}")

          if not 200 <= response.status_code < 300:
               body = _response_body(response)
               logger.warning("PortOne %s %s returned %s: %s", method, path, response.status_code, body)
               raise GatewayError(
                    f"PortOne {action} failed: {response.status_code}",
                    upstream_status=response.status_code,
                    upstream_body=body,
               )

          if not response.content:
               return {}
          return _response_body(response)

     # ------------------------------------------------------------------
     # Payments
     # ------------------------------------------------------------------

     def fetch_payment_info(self, payment_id: str) -> PaymentInfo:
          data = self._request("GET", f"/payments/{quote(payment_id, safe='')}", "payment lookup")
          return PaymentInfo.from_api(data)

     def charge_billing_key(self, payment_id: str, billing_key: str, order_name: str, amount: int, customer_id: str) -> dict:
          """Charge a stored billing key immediately under the given payment id."""
          body = {
               "billingKey": billing_key,
               "orderName": order_name,
               "amount": {"total": amount},
               "customer": {"id": customer_id},
               "currency": self.currency,
          }
          return self._request("POST", f"/payments/{quote(payment_id, safe='')}/billing-key", "billing key payment", json=body)

     def cancel_payment(self, payment_id: str, reason: str = DEFAULT_CANCEL_REASON) -> dict:
          return self._request(
               "POST", f"/payments/{quote(payment_id, safe='')}/cancel", "payment cancellation", json={"reason": reason}
          )

     # ------------------------------------------------------------------
     # Payment schedules (future charges)
     # ------------------------------------------------------------------

     def schedule_next_payment(self, schedule_id: str, payment: PaymentInfo, when: datetime) -> dict:
          """Register a future charge, keyed by `schedule_id`, to fire at `when`."""
          body = {
               "payment": {
                    "billingKey": payment.billing_key,
                    "orderName": payment.order_name,
                    "customer": {"id": payment.customer_id},
                    "amount": {"total": payment.total_amount},
                    "currency": self.currency,
               },
               "timeToPay": to_iso(when),
          }
          return self._request("POST", f"/payments/{quote(schedule_id, safe='')}/schedule", "payment scheduling", json=body)

     def list_scheduled_payments(self, billing_key: str, around: datetime) -> List[ScheduledPayment]:
          """Future charges for `billing_key` due within one day either side of `around`."""
          body = {
               "filter": {
                    "billingKey": billing_key,
                    "from": to_iso(around - SCHEDULE_WINDOW),
                    "until": to_iso(around + SCHEDULE_WINDOW),
               }
          }
          data = self._request("GET", "/payment-schedules", "payment schedule lookup", json=body)
          items = (data.get("items") if isinstance(data, dict) else None) or []
          return [ScheduledPayment(schedule_id=item["id"], payment_id=item.get("paymentId")) for item in items]

     def cancel_scheduled_payment(self, schedule_id: str) -> dict:
          return self._request(
               "DELETE", "/payment-schedules", "payment schedule cancellation", json={"scheduleIds": [schedule_id]}
          )
