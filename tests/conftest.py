import os

# Must be set before config/database are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["PORTONE_API_SECRET"] = "test-secret"
os.environ["PORTONE_API_BASE_URL"] = "https://api.portone.test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import get_session
from dependencies import get_portone_client
from models import Base
from services.ledger_service import PaymentLedgerStore
from tests.mocks import FakePortOneGateway


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db_session(engine):
    SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def ledger(db_session):
    return PaymentLedgerStore(db_session)


@pytest.fixture()
def fake_gateway():
    return FakePortOneGateway()


@pytest.fixture()
def app(db_session, fake_gateway):
    from main import app as fastapi_app

    fastapi_app.dependency_overrides[get_session] = lambda: db_session
    fastapi_app.dependency_overrides[get_portone_client] = lambda: fake_gateway
    try:
        yield fastapi_app
    finally:
        fastapi_app.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    return TestClient(app, raise_server_exceptions=False)
