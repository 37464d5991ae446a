import os

os.environ["JWT_SECRET"] = "test-secret-key-with-enough-length-for-hs256"
os.environ["DATABASE_URL"] = "sqlite://"
# Nothing listens here, so enqueues exercise the broker-down path
os.environ["REDIS_URL"] = "redis://127.0.0.1:6399/0"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime, timedelta
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.orm.session import Session

from event_booking.core.security import create_access_token, hash_password
from event_booking.database.db import Base, get_db
from event_booking.main import app
from event_booking.models.events import Event
from event_booking.models.users import User

# Use an in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"
engine: Engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(autouse=True)
def setup_database():
    """Give every test a fresh schema."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


# Override the database dependency
def override_get_db():
    db: Session = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def session_factory():
    return TestingSessionLocal


@pytest.fixture
def db_session():
    db: Session = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def receipt_queue(monkeypatch: pytest.MonkeyPatch) -> Mock:
    """Capture receipt enqueues instead of talking to the broker."""
    enqueue = Mock()
    monkeypatch.setattr("event_booking.routes.bookings.enqueue_receipt", enqueue)
    return enqueue


@pytest.fixture
def client(receipt_queue):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user(db_session: Session) -> User:
    user = User(username="alice", email="alice@example.com", password=hash_password("secret123"))
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_user(db_session: Session) -> User:
    user = User(username="bob", email="bob@example.com", password=hash_password("hunter22"))
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def admin_user(db_session: Session) -> User:
    user = User(username="root", email="admin@example.com", password=hash_password("adminpass"), is_admin=True)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture
def admin_headers(admin_user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(admin_user.id)}"}


@pytest.fixture
def make_event(db_session: Session):
    """Factory creating events directly in the database."""

    def _make_event(title: str = "Concert", capacity: int = 100, date: datetime | None = None, price: float = 0):
        event = Event(
            title=title,
            description=f"{title} description",
            venue="Main Hall",
            date=date or datetime.now() + timedelta(days=7),
            start_time="19:00",
            end_time="22:00",
            price=price,
            capacity=capacity,
        )
        db_session.add(event)
        db_session.commit()
        db_session.refresh(event)
        return event

    return _make_event
