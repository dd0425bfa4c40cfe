import os

# Settings are read at import time; tests never touch a real database or key
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-jwt-signing")
os.environ.setdefault("ENCRYPTION_KEY", "00112233445566778899aabbccddeeff00112233445566778899aabbccddeeff")

import pytest
from datetime import datetime, timedelta, UTC
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from jose import jwt

from emlak_crm.database import enable_sqlite_foreign_keys, get_db
from emlak_crm.models.base import Base
from emlak_crm.config import settings
# Import all model classes to ensure they're registered with SQLAlchemy
from emlak_crm.models import User, PropertyOwner, Property, Tenant, Contract, Meeting  # noqa: F401
# Import FastAPI app AFTER model imports
from emlak_crm.main import app

# Test database (SQLite in-memory for speed)
# Use StaticPool to ensure all connections share the same in-memory database
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create fresh database for each test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session, tmp_path, monkeypatch):
    """FastAPI test client with test database; stored PDFs go to a temp dir"""
    monkeypatch.setattr(settings, "PDF_STORAGE_DIR", str(tmp_path))

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def create_test_token(user_id: str = "test-user-123", expired: bool = False) -> str:
    """
    Generate valid JWT token for testing.

    Args:
        user_id: User ID to embed in 'sub' claim
        expired: If True, create expired token

    Returns:
        Encoded JWT token
    """
    if expired:
        exp = datetime.now(UTC) - timedelta(minutes=5)
    else:
        exp = datetime.now(UTC) + timedelta(minutes=15)

    payload = {"sub": user_id, "exp": exp, "iat": datetime.now(UTC)}

    token = jwt.encode(payload, settings.SECRET_KEY, algorithm="HS256")
    return token


@pytest.fixture
def mock_jwt_token():
    """Generate valid JWT token"""
    return create_test_token()


@pytest.fixture
def auth_headers(mock_jwt_token):
    """Authorization headers for authenticated requests"""
    return {"Authorization": f"Bearer {mock_jwt_token}"}


@pytest.fixture
def user_a_headers():
    """Authorization headers for user A"""
    token = create_test_token(user_id="user-a")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_b_headers():
    """Authorization headers for user B"""
    token = create_test_token(user_id="user-b")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def test_user(db_session):
    """User row for service-level tests"""
    user = User(auth_user_id="service-user")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


# Payload builders shared by the API tests

VALID_OWNER_TC = "12345678901"
VALID_TENANT_TC = "10987654321"
VALID_IBAN = "TR330006100519786457841326"


def owner_payload(**overrides) -> dict:
    data = {
        "name": "Ahmet Yilmaz",
        "tc": VALID_OWNER_TC,
        "iban": VALID_IBAN,
        "phone": "0539 217 47 82",
        "email": "ahmet@example.com",
    }
    data.update(overrides)
    return data


def property_payload(owner_id: int, **overrides) -> dict:
    data = {
        "owner_id": owner_id,
        "mahalle": "Moda Mahallesi",
        "cadde_sokak": "Bahariye Caddesi",
        "bina_no": "12",
        "daire_no": "4",
        "district": "Kadikoy",
        "city": "Istanbul",
        "rent_amount": 15000,
    }
    data.update(overrides)
    return data


def contract_form_payload(**overrides) -> dict:
    data = {
        "owner_name": "Ahmet Yilmaz",
        "owner_tc": VALID_OWNER_TC,
        "owner_iban": VALID_IBAN,
        "owner_phone": "05392174782",
        "owner_email": "ahmet@example.com",
        "tenant_name": "Mehmet Demir",
        "tenant_tc": VALID_TENANT_TC,
        "tenant_phone": "05551234567",
        "tenant_email": "mehmet@example.com",
        "tenant_address": "Caferaga Mah. Moda Cad. No:5, Kadikoy/Istanbul",
        "mahalle": "Moda Mahallesi",
        "cadde_sokak": "Bahariye Caddesi",
        "bina_no": "12",
        "daire_no": "4",
        "ilce": "Kadikoy",
        "il": "Istanbul",
        "start_date": "2025-01-01",
        "end_date": "2026-01-01",
        "rent_amount": 15000,
        "deposit": 30000,
        "payment_day_of_month": 5,
    }
    data.update(overrides)
    return data


@pytest.fixture
def create_owner(client, auth_headers):
    def _create(headers=None, **overrides) -> dict:
        response = client.post("/api/owners", headers=headers or auth_headers, json=owner_payload(**overrides))
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_property(client, auth_headers):
    def _create(owner_id: int, headers=None, **overrides) -> dict:
        response = client.post(
            "/api/properties", headers=headers or auth_headers, json=property_payload(owner_id, **overrides)
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_tenant(client, auth_headers):
    def _create(headers=None, **overrides) -> dict:
        data = {"name": "Mehmet Demir", "tc": VALID_TENANT_TC, "phone": "05551234567"}
        data.update(overrides)
        response = client.post("/api/tenants", headers=headers or auth_headers, json=data)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
