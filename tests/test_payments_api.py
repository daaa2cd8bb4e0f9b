import pytest

from dependencies import get_portone_client
from services.portone_client import PortOneClient
from tests.mocks import FakeRequestsSession, FakeResponse

BASE_URL = "https://api.portone.test"


@pytest.fixture()
def http(app):
    session = FakeRequestsSession()
    app.dependency_overrides[get_portone_client] = lambda: PortOneClient(
        api_secret="test-secret", base_url=BASE_URL, session=session
    )
    return session


def _charge_body(**overrides):
    body = {
        "billingKey": "billing-key-1",
        "orderName": "IT Magazine monthly subscription",
        "amount": 9900,
        "customer": {"id": "c1"},
    }
    body.update(overrides)
    return body


def test_create_payment_charges_billing_key(client, http):
    resp = client.post("/api/payments", json=_charge_body())

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["paymentId"].startswith("payment_")
    assert len(http.calls) == 1
    assert http.calls[0]["url"] == f"{BASE_URL}/payments/{body['paymentId']}/billing-key"
    assert http.calls[0]["json"]["amount"] == {"total": 9900}


def test_create_payment_missing_fields_returns_400(client, http):
    resp = client.post("/api/payments", json={"orderName": "x", "amount": 9900})

    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert "billingKey" in body["details"]
    assert "customer" in body["details"]
    assert http.calls == []


def test_create_payment_gateway_rejection_returns_500(app, client):
    session = FakeRequestsSession(error=None)
    session.request = lambda method, url, **kwargs: FakeResponse(409, {"type": "ALREADY_PAID"})
    app.dependency_overrides[get_portone_client] = lambda: PortOneClient(
        api_secret="test-secret", base_url=BASE_URL, session=session
    )

    resp = client.post("/api/payments", json=_charge_body())

    assert resp.status_code == 500
    assert resp.json()["details"] == {"upstream_status": 409, "upstream_body": {"type": "ALREADY_PAID"}}


def test_create_payment_without_secret_returns_500(app, client):
    session = FakeRequestsSession()
    app.dependency_overrides[get_portone_client] = lambda: PortOneClient(api_secret="", session=session)

    resp = client.post("/api/payments", json=_charge_body())

    assert resp.status_code == 500
    assert "PORTONE_API_SECRET" in resp.json()["error"]
    assert session.calls == []


def test_cancel_payment(client, http):
    resp = client.post("/api/payments/cancel", json={"transactionKey": "payment_1"})

    assert resp.status_code == 200
    assert resp.json()["success"] is True
    assert http.calls[0]["url"] == f"{BASE_URL}/payments/payment_1/cancel"
    assert http.calls[0]["json"] == {"reason": "No reason provided"}


def test_cancel_payment_missing_transaction_key_returns_400(client, http):
    resp = client.post("/api/payments/cancel", json={})

    assert resp.status_code == 400
    assert "transactionKey" in resp.json()["details"]
    assert http.calls == []


def test_cancel_payment_without_secret_returns_500(app, client):
    session = FakeRequestsSession()
    app.dependency_overrides[get_portone_client] = lambda: PortOneClient(api_secret="", session=session)

    resp = client.post("/api/payments/cancel", json={"transactionKey": "payment_1"})

    assert resp.status_code == 500
    assert resp.json()["success"] is False
    assert "PORTONE_API_SECRET" in resp.json()["error"]
    assert session.calls == []
