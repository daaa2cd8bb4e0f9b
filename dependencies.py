# dependencies.py
"""
FastAPI dependencies shared by the routers.

Override any of these through app.dependency_overrides to substitute test doubles.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

import config
from database import get_session
from services.ledger_service import PaymentLedgerStore
from services.portone_client import PortOneClient
from services.webhook_service import SubscriptionWebhookService


def get_portone_client() -> PortOneClient:
     # One requests.Session per client; sessions are not shared across request threads
     return PortOneClient(api_secret=config.PORTONE_API_SECRET)


def get_ledger_store(db: Session = Depends(get_session)) -> PaymentLedgerStore:
     return PaymentLedgerStore(db)


def get_webhook_service(
     gateway: PortOneClient = Depends(get_portone_client),
     ledger: PaymentLedgerStore = Depends(get_ledger_store),
) -> SubscriptionWebhookService:
     return SubscriptionWebhookService(gateway=gateway, ledger=ledger)
