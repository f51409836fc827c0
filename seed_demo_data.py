"""
Create the reporting tables and fill them with a small demo dataset.

Run this from the project root:

    (.venv) python seed_demo_data.py

It uses DATABASE_URL (default: sqlite:///./reports.db). Nothing is inserted
if the users table already has rows. The API creates the tables itself on
startup, so this script is only needed for demo data.
"""

from datetime import datetime, timedelta, timezone

from sqlalchemy import func, select

from report_api.core.config import settings
from report_api.db.init_db import init_db
from report_api.db.session import build_engine, build_sessionmaker
from report_api.models.login_audit import LoginAudit
from report_api.models.profile import Profile
from report_api.models.referral import Referral
from report_api.models.role import Role, UserRole
from report_api.models.user import User

BASE_TIME = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)


def at(hours: int) -> datetime:
    return BASE_TIME + timedelta(hours=hours)


def demo_rows() -> list:
    """
    Every kind of row the reports care about: users with and without roles,
    profiles and logins, an unassigned role, an orphan profile, and a tie
    on the latest login timestamp.
    """
    return [
        User(id=1, email="alice@example.com"),
        User(id=2, email="bob@example.com"),
        User(id=3, email="carol@example.com"),
        User(id=4, email="dave@example.com"),
        Role(id=1, role_name="admin"),
        Role(id=2, role_name="editor"),
        Role(id=3, role_name="viewer"),
        Role(id=4, role_name="auditor"),  # nobody holds this one
        UserRole(user_id=1, role_id=1),
        UserRole(user_id=1, role_id=2),
        UserRole(user_id=2, role_id=3),
        UserRole(user_id=3, role_id=3),
        Profile(id=1, user_id=1, phone="+1-555-0100", city="Austin", country="US"),
        Profile(id=2, user_id=2, phone="+44-20-7946-0000", city="London", country="UK"),
        Profile(id=3, user_id=None, phone="+49-30-000000", city="Berlin", country="DE"),
        Referral(id=1, referrer_user_id=1, referred_user_id=2, referred_at=at(1)),
        Referral(id=2, referrer_user_id=1, referred_user_id=3, referred_at=at(5)),
        Referral(id=3, referrer_user_id=2, referred_user_id=4, referred_at=at(5)),
        LoginAudit(id=1, user_id=1, ip_address="10.0.0.1", occurred_at=at(0)),
        LoginAudit(id=2, user_id=1, ip_address="10.0.0.2", occurred_at=at(3)),
        LoginAudit(id=3, user_id=2, ip_address="10.0.0.3", occurred_at=at(2)),
        LoginAudit(id=4, user_id=3, ip_address="10.0.0.4", occurred_at=at(4)),
        LoginAudit(id=5, user_id=3, ip_address="10.0.0.5", occurred_at=at(4)),
    ]


def main() -> None:
    engine = build_engine(settings.database_url)
    init_db(engine)

    db = build_sessionmaker(engine)()
    try:
        existing = db.scalar(select(func.count()).select_from(User))
        if existing:
            print(f"[INFO] users already has {existing} rows, skipping seed")
            return

        rows = demo_rows()
        db.add_all(rows)
        db.commit()
        print(f"[INFO] Inserted {len(rows)} demo rows into {engine.url.render_as_string(hide_password=True)}")
        print("[INFO] Done.")
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    main()
