"""Configuration et fixtures pytest"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ADMIN_PASSWORD", "grocerydeals2026")

import pytest
from datetime import date, timedelta
from fastapi.testclient import TestClient

from app.core.database import Base, engine, SessionLocal, get_db
from app.core.security import create_access_token, create_admin_token
from app.main import app
from app.models.user import User
from app.models.user_profile import UserProfile
from app.models.deal import Deal
from app.core.security import get_password_hash
from app.utils.date_helpers import today_in_timezone
from app.core.config import settings


@pytest.fixture(scope="function")
def db():
    """Fixture de base de données pour les tests"""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """Fixture du client de test FastAPI"""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def test_user(db):
    """Fixture d'un utilisateur de test"""
    user = User(
        email="test@example.com",
        password_hash=get_password_hash("testpass123"),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def test_user2(db):
    """Fixture d'un second utilisateur, sans profil"""
    user = User(
        email="test2@example.com",
        password_hash=get_password_hash("testpass123"),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def test_profile(db, test_user):
    """Fixture d'un profil complété"""
    profile = UserProfile(
        user_id=test_user.id,
        name="Sam",
        household_size="2",
        dietary_style=["Balanced", "Halal"],
        allergies=["Nuts"],
        spice="Medium 🌶️",
        dislikes="no cilantro",
        cuisines=["South Asian", "Italian"],
        cook_time="Under 20 minutes",
        comfort_level="Comfortable",
        want_to_grow="Yes, I'd love to learn new things",
    )
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


@pytest.fixture
def today():
    return today_in_timezone(settings.FEED_TIMEZONE)


@pytest.fixture
def make_deal(db, today):
    """Fabrique de promotions valides aujourd'hui par défaut"""

    def _make_deal(**overrides):
        values = {
            "store": "No Frills",
            "product_name": "Chicken Thighs Boneless",
            "category": "Meat & Poultry",
            "sale_price": 3.99,
            "regular_price": 6.99,
            "unit": "per lb",
            "valid_from": today - timedelta(days=1),
            "valid_to": today + timedelta(days=5),
        }
        values.update(overrides)
        deal = Deal(**values)
        db.add(deal)
        db.commit()
        db.refresh(deal)
        return deal

    return _make_deal


@pytest.fixture
def auth_headers(test_user):
    """Fixture des headers d'authentification"""
    token = create_access_token({"sub": str(test_user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers_user2(test_user2):
    """Fixture des headers d'authentification pour user2"""
    token = create_access_token({"sub": str(test_user2.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers():
    """Fixture des headers admin"""
    return {"Authorization": f"Bearer {create_admin_token()}"}


@pytest.fixture
def deal_payload(today):
    return {
        "store": "FreshCo",
        "product_name": "Basmati Rice 8lb",
        "category": "Pantry",
        "sale_price": "9.99",
        "regular_price": "14.99",
        "unit": "each",
        "valid_from": today.isoformat(),
        "valid_to": (today + timedelta(days=6)).isoformat(),
    }
