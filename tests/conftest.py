"""Shared test fixtures.

Uses a SQLite file database so tests run without PostgreSQL, and an
in-memory stand-in for the Redis client used by rate limiting.
"""
import os

# Set testing environment before the application reads its settings
os.environ["TESTING"] = "1"
os.environ["TEST_DATABASE_URL"] = "sqlite:///./test.db"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from clinic_booking.main import app
from clinic_booking.core.database import Base, get_db, get_redis
from clinic_booking.models.appointment import Appointment  # noqa: F401
from clinic_booking.models.doctor import Doctor
from clinic_booking.models.employee import Employee  # noqa: F401

SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False, "timeout": 30}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakeRedis:
    """Just enough of the Redis client for the rate limiter."""

    def __init__(self):
        self.data = {}

    def setex(self, key, seconds, value):
        self.data[key] = str(value)
        return True

    def get(self, key):
        return self.data.get(key)

    def incr(self, key):
        self.data[key] = str(int(self.data.get(key, 0)) + 1)
        return int(self.data[key])


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def fake_redis():
    redis_client = FakeRedis()
    app.dependency_overrides[get_redis] = lambda: redis_client
    yield redis_client
    app.dependency_overrides.pop(get_redis, None)


@pytest.fixture(scope="function")
def test_db():
    # Create tables
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session(test_db):
    """Direct database session for service tests and assertions."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(test_db, fake_redis):
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client


@pytest.fixture
def doctors(db_session):
    """Two doctors in the directory."""
    records = [
        Doctor(doctor_code="D1", name="Dr. Asha Menon", specialization="General Medicine"),
        Doctor(doctor_code="D2", name="Dr. Ravi Kumar", specialization="Pediatrics"),
    ]
    db_session.add_all(records)
    db_session.commit()
    return records
