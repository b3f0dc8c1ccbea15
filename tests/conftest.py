"""
Shared fixtures: an in-memory SQLite database per test, a TestClient wired to
it through the ``get_db`` override, and a small seeded world.
"""
from datetime import timedelta
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.session import Base, get_db
from main import app
from models.auth_token_model import AuthToken
from models.common import utcnow
from models.menu_item_model import MenuItem
from models.payment_method_model import PaymentMethod
from models.restaurant_model import Restaurant
from models.user_model import User
from services.auth_service import hash_password

PASSWORD = "Password123!"


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    import models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def seed(db_session):
    """
    Users (one token each), restaurants in both countries and payment methods.

    Everything is returned as plain ids so tests never hold expired ORM state.
    """
    db = db_session
    password_hash = hash_password(PASSWORD)

    users = {
        "admin": ("nick@example.com", "ADMIN", "IN"),
        "manager_in": ("captain.marvel@example.com", "MANAGER", "IN"),
        "manager_us": ("captain.america@example.com", "MANAGER", "US"),
        "member_in": ("thanos@example.com", "MEMBER", "IN"),
        "member_us": ("travis@example.com", "MEMBER", "US"),
    }
    user_ids, tokens = {}, {}
    for key, (email, role, country) in users.items():
        u = User(email=email, password_hash=password_hash, role=role, country=country)
        db.add(u)
        db.flush()
        token = f"token-{key}"
        db.add(AuthToken(token=token, user_id=u.id, expires_at=utcnow() + timedelta(hours=1)))
        user_ids[key] = u.id
        tokens[key] = token

    spice = Restaurant(name="Spice Paradise", country="IN")
    butter_chicken = MenuItem(name="Butter Chicken", price_cents=35000, currency="INR")
    naan = MenuItem(name="Naan Bread", price_cents=5000, currency="INR")
    sold_out = MenuItem(name="Mango Lassi", price_cents=12000, currency="INR", available=False)
    spice.menu_items.extend([butter_chicken, naan, sold_out])

    diner = Restaurant(name="American Diner", country="US")
    burger = MenuItem(name="Classic Burger", price_cents=1299, currency="USD")
    diner.menu_items.append(burger)

    closed = Restaurant(name="Closed Kitchen", country="IN", status="INACTIVE")
    db.add_all([spice, diner, closed])

    visa = PaymentMethod(label="Mock Visa Card", brand="MOCK", last4="4242", is_default=True,
                         created_by_user_id=user_ids["admin"])
    us_card = PaymentMethod(label="US Card", brand="MOCK", last4="1111", country="US",
                            created_by_user_id=user_ids["admin"])
    expired = PaymentMethod(label="Old Card", brand="MOCK", last4="0000", active=False,
                            created_by_user_id=user_ids["admin"])
    db.add_all([visa, us_card, expired])
    db.commit()

    return SimpleNamespace(
        users=user_ids,
        tokens=tokens,
        spice=spice.id,
        diner=diner.id,
        closed=closed.id,
        butter_chicken=butter_chicken.id,
        naan=naan.id,
        sold_out=sold_out.id,
        burger=burger.id,
        visa=visa.id,
        us_card=us_card.id,
        expired=expired.id,
    )


@pytest.fixture
def auth(seed):
    """auth("admin") -> Authorization header for that seeded user."""
    def _headers(key):
        return {"Authorization": f"Bearer {seed.tokens[key]}"}
    return _headers
