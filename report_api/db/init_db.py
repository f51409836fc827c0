"""
Database initialization helpers.

We only wire up the metadata here. Models are imported so their tables get
registered on Base.metadata before create_all runs.
"""

from sqlalchemy.engine import Engine

from report_api.models.base import Base
from report_api.models import login_audit, profile, referral, role, user  # noqa: F401


def init_db(engine: Engine) -> None:
    """
    Create all reporting tables that don't exist yet.
    """
    Base.metadata.create_all(bind=engine)
