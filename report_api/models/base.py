# File: report_api/models/base.py

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Every reporting table (users, roles, user_roles, profiles, referrals,
    login_audit) registers itself on Base.metadata.
    """
    pass
