import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-overseas")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
import httpx
import stripe
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

import main
from overseas.core.cache import cache, MemoryCacheBackend
from overseas.core.constants import PaymentGatewayEnum, RoleEnum
from overseas.core.database import Base, get_db
from overseas.services.payments.razorpay import RazorpayGateway
from overseas.services.payments.registry import GatewayRegistry, get_gateway_registry
from overseas.utils import deps as deps_utils
from tests.helpers.factories import make_user, auth_headers
from tests.helpers.gateways import (
    RAZORPAY_KEY_ID,
    RAZORPAY_KEY_SECRET,
    RAZORPAY_WEBHOOK_SECRET,
    RazorpayOrders,
    StripeIntents,
)


@pytest.fixture(scope="session")
def database_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(database_engine):
    Base.metadata.create_all(bind=database_engine)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=database_engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()
        Base.metadata.drop_all(bind=database_engine)


@pytest.fixture(autouse=True)
def fresh_cache():
    cache.backend = MemoryCacheBackend()
    yield cache


@pytest.fixture
def razorpay_orders():
    return RazorpayOrders()


@pytest.fixture
def stripe_intents(monkeypatch):
    intents = StripeIntents()
    monkeypatch.setattr(stripe.PaymentIntent, "create", intents.create)
    monkeypatch.setattr(stripe.PaymentIntent, "retrieve", intents.retrieve)
    return intents


@pytest.fixture
def razorpay_gateway(razorpay_orders):
    return RazorpayGateway(
        key_id=RAZORPAY_KEY_ID,
        key_secret=RAZORPAY_KEY_SECRET,
        webhook_secret=RAZORPAY_WEBHOOK_SECRET,
        base_url="https://api.razorpay.test/v1",
        transport=httpx.MockTransport(razorpay_orders),
    )


@pytest.fixture
def gateway_registry(razorpay_gateway):
    return GatewayRegistry({PaymentGatewayEnum.RAZORPAY: razorpay_gateway})


@pytest.fixture(scope="function")
def client(db_session, gateway_registry):
    main.app.dependency_overrides[get_db] = lambda: db_session
    main.app.dependency_overrides[deps_utils.get_db] = lambda: db_session
    main.app.dependency_overrides[deps_utils.get_transactional_db] = lambda: db_session
    main.app.dependency_overrides[get_gateway_registry] = lambda: gateway_registry
    with TestClient(main.app) as test_client:
        yield test_client
    main.app.dependency_overrides.clear()


@pytest.fixture
def student(db_session):
    return make_user(db_session, email="asha@learners.io", first_name="Asha", last_name="Verma", phone="9876543210")


@pytest.fixture
def other_student(db_session):
    return make_user(db_session, email="rohan@learners.io", first_name="Rohan")


@pytest.fixture
def admin(db_session):
    return make_user(db_session, email="admin@bnoverseas.com", first_name="Admin", role=RoleEnum.ADMIN)


@pytest.fixture
def student_headers(student):
    return auth_headers(student)


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)
