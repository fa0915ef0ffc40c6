"""Pytest configuration and fixtures."""
import os
import uuid
from datetime import datetime, timedelta, timezone

# Required settings must exist before foodshare modules are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from foodshare.database import Base, get_db
from foodshare.main import app
from foodshare.models import Profile, FoodListing, DonationRequest, WasteAnalytic
from foodshare.services import session as session_service

TEST_SECRET = "test-secret"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    session_service._revoked_tokens.clear()
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def make_token(user_id, email=None, expires_in=timedelta(hours=1), audience="authenticated"):
    payload = {
        "sub": str(user_id),
        "email": email,
        "aud": audience,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(payload, TEST_SECRET, algorithm="HS256")


def auth_headers(profile: Profile) -> dict:
    return {"Authorization": f"Bearer {make_token(profile.id, profile.email)}"}


@pytest.fixture
def make_profile(db):
    def _make(role: str, name: str | None = None, **kw) -> Profile:
        name = name or f"{role}-{uuid.uuid4().hex[:6]}"
        profile = Profile(
            id=uuid.uuid4(),
            email=f"{name}@example.org",
            full_name=name.title(),
            role=role,
            **kw,
        )
        db.add(profile)
        db.commit()
        db.refresh(profile)
        return profile

    return _make


@pytest.fixture
def make_listing(db):
    def _make(donor: Profile, **kw) -> FoodListing:
        values = {
            "title": "Fresh vegetables",
            "description": "Carrots and leeks from the market",
            "category": "Produce",
            "quantity": "10 kg",
            "pickup_location": "12 Market Street",
            "status": "available",
        }
        values.update(kw)
        listing = FoodListing(donor_id=donor.id, **values)
        db.add(listing)
        db.commit()
        db.refresh(listing)
        return listing

    return _make


@pytest.fixture
def make_request(db):
    def _make(recipient: Profile, **kw) -> DonationRequest:
        values = {
            "title": "Vegetables for community kitchen",
            "description": "Weekly soup service",
            "category": "Produce",
            "quantity_needed": "20 kg",
            "urgency": "medium",
            "status": "open",
        }
        values.update(kw)
        request = DonationRequest(recipient_id=recipient.id, **values)
        db.add(request)
        db.commit()
        db.refresh(request)
        return request

    return _make


@pytest.fixture
def make_analytic(db):
    def _make(**kw) -> WasteAnalytic:
        values = {"food_saved_kg": 0, "meals_provided": 0, "co2_saved_kg": 0, "category": "Produce"}
        values.update(kw)
        analytic = WasteAnalytic(**values)
        db.add(analytic)
        db.commit()
        return analytic

    return _make


@pytest.fixture
def token_for():
    return make_token


@pytest.fixture
def headers_for():
    return auth_headers
