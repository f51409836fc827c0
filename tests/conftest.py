"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from report_api.api.deps import get_db
from report_api.db.init_db import init_db
from report_api.main import create_application
from report_api.models.login_audit import LoginAudit
from report_api.models.profile import Profile
from report_api.models.referral import Referral
from report_api.models.role import Role, UserRole
from report_api.models.user import User

BASE_TIME = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)


def at(hours: int) -> datetime:
    return BASE_TIME + timedelta(hours=hours)


def _memory_engine():
    # One shared in-memory connection so every session sees the same data
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def engine():
    engine = _memory_engine()
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Session:
    """Empty schema, fresh for each test."""
    session = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def broken_session() -> Session:
    """Session on a database where none of the reporting tables exist."""
    engine = _memory_engine()
    session = sessionmaker(bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def seeded_session(db_session) -> Session:
    """
    Dataset covering each report's edge cases:

    - dave (4) has no role, profile or login
    - auditor (4) is held by nobody
    - user_roles rows pointing at user 99 and role 99 (dangling)
    - bob (2) has two profiles; profile 4 has no user, profile 5 points at
      a missing user
    - referrals 4 and 5 have a missing end; 2 and 3 share a timestamp
    - alice (1) logs in at t0, t3, t2; carol (3) has two logins tied at t4
    """
    db_session.add_all(
        [
            User(id=1, email="alice@example.com"),
            User(id=2, email="bob@example.com"),
            User(id=3, email="carol@example.com"),
            User(id=4, email="dave@example.com"),
            Role(id=1, role_name="admin"),
            Role(id=2, role_name="editor"),
            Role(id=3, role_name="viewer"),
            Role(id=4, role_name="auditor"),
            UserRole(user_id=1, role_id=1),
            UserRole(user_id=1, role_id=2),
            UserRole(user_id=2, role_id=3),
            UserRole(user_id=3, role_id=3),
            UserRole(user_id=99, role_id=1),
            UserRole(user_id=2, role_id=99),
            Profile(id=1, user_id=1, phone="555-0100", city="Austin", country="US"),
            Profile(id=2, user_id=2, phone="555-0200", city="London", country="UK"),
            Profile(id=3, user_id=2, phone="555-0201", city="Leeds", country="UK"),
            Profile(id=4, user_id=None, phone="555-0400", city="Berlin", country="DE"),
            Profile(id=5, user_id=77, phone=None, city="Oslo", country="NO"),
            Referral(id=1, referrer_user_id=1, referred_user_id=2, referred_at=at(1)),
            Referral(id=2, referrer_user_id=1, referred_user_id=3, referred_at=at(5)),
            Referral(id=3, referrer_user_id=2, referred_user_id=4, referred_at=at(5)),
            Referral(id=4, referrer_user_id=1, referred_user_id=99, referred_at=at(6)),
            Referral(id=5, referrer_user_id=98, referred_user_id=1, referred_at=at(7)),
            LoginAudit(id=1, user_id=1, ip_address="10.0.0.1", occurred_at=at(0)),
            LoginAudit(id=2, user_id=1, ip_address="10.0.0.2", occurred_at=at(3)),
            LoginAudit(id=3, user_id=1, ip_address="10.0.0.3", occurred_at=at(2)),
            LoginAudit(id=4, user_id=2, ip_address="10.0.0.4", occurred_at=at(2)),
            LoginAudit(id=5, user_id=3, ip_address="10.0.0.5", occurred_at=at(4)),
            LoginAudit(id=6, user_id=3, ip_address="10.0.0.6", occurred_at=at(4)),
            LoginAudit(id=7, user_id=99, ip_address="10.0.0.7", occurred_at=at(9)),
        ]
    )
    db_session.commit()
    return db_session


def _client_for(session: Session) -> TestClient:
    app = create_application()

    def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def client(seeded_session) -> TestClient:
    """Test client for the reports API backed by the seeded dataset."""
    return _client_for(seeded_session)


@pytest.fixture
def broken_client(broken_session) -> TestClient:
    return _client_for(broken_session)
