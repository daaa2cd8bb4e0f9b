"""Mock utilities for testing external dependencies."""

import json as jsonlib
from dataclasses import replace
from typing import Any

from errors import ConfigurationError, GatewayError
from services.portone_client import PaymentInfo, ScheduledPayment


class FakeResponse:
    """Mock requests.Response for PortOne client tests."""

    def __init__(self, status_code: int = 200, json_data: Any = None, text: str | None = None):
        self.status_code = status_code
        self._json_data = json_data
        if text is not None:
            self.text = text
        elif json_data is not None:
            self.text = jsonlib.dumps(json_data)
        else:
            self.text = ""
        self.content = self.text.encode("utf-8")

    def json(self) -> Any:
        if self._json_data is None:
            raise ValueError("No JSON body")
        return self._json_data


class FakeRequestsSession:
    """Mock requests.Session that records every call and replays canned responses."""

    def __init__(self, responses: dict[tuple[str, str], FakeResponse] | None = None, error: Exception | None = None):
        self.responses = responses or {}
        self.error = error
        self.calls: list[dict] = []

    def request(self, method: str, url: str, headers=None, json=None, timeout=None, **kwargs) -> FakeResponse:
        self.calls.append({"method": method, "url": url, "headers": headers, "json": json, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.responses.get((method, url), FakeResponse(200, {}))


def make_payment_info(**overrides) -> PaymentInfo:
    values = {
        "id": "payment_1",
        "order_name": "IT Magazine monthly subscription",
        "total_amount": 9900,
        "customer_id": "c1",
        "billing_key": "billing-key-1",
    }
    values.update(overrides)
    return PaymentInfo(**values)


class FakePortOneGateway:
    """Recording stand-in for PortOneClient used by webhook and router tests."""

    def __init__(self, payment: PaymentInfo | None = None, schedules: list[ScheduledPayment] | None = None, fail_on=()):
        self.payment = payment or make_payment_info()
        self.schedules = list(schedules or [])
        self.fail_on = set(fail_on)
        self.calls: list[tuple] = []
        self.configured = True

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, *args))
        if name in self.fail_on:
            raise GatewayError(
                f"PortOne {name} failed: 500",
                upstream_status=500,
                upstream_body={"message": "upstream failure"},
            )

    def ensure_configured(self) -> None:
        if not self.configured:
            raise ConfigurationError("PortOne API secret is not configured. Check the PORTONE_API_SECRET environment variable.")

    @property
    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]

    def fetch_payment_info(self, payment_id):
        self._record("fetch_payment_info", payment_id)
        return replace(self.payment, id=payment_id)

    def schedule_next_payment(self, schedule_id, payment, when):
        self._record("schedule_next_payment", schedule_id, payment, when)
        return {"schedule": {"id": f"schedule-{schedule_id}"}}

    def list_scheduled_payments(self, billing_key, around):
        self._record("list_scheduled_payments", billing_key, around)
        return list(self.schedules)

    def cancel_scheduled_payment(self, schedule_id):
        self._record("cancel_scheduled_payment", schedule_id)
        return {"revokedScheduleIds": [schedule_id]}

    def charge_billing_key(self, payment_id, billing_key, order_name, amount, customer_id):
        self._record("charge_billing_key", payment_id, billing_key, order_name, amount, customer_id)
        return {"payment": {"paidAt": "2026-10-17T01:00:00.000Z", "pgTxId": "pg-1"}}

    def cancel_payment(self, payment_id, reason="No reason provided"):
        self._record("cancel_payment", payment_id, reason)
        return {"cancellation": {"status": "SUCCEEDED"}}
