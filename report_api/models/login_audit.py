# File: report_api/models/login_audit.py

"""
LoginAudit model.

Append-only log of login events; many rows per user over time.
"""

from datetime import datetime

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from report_api.models.base import Base
from report_api.models.types import UTCDateTime


class LoginAudit(Base):
    __tablename__ = "login_audit"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)

    # Long enough for IPv6 textual form
    ip_address: Mapped[str] = mapped_column(String(45), nullable=False)
    occurred_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)

    __table_args__ = (Index("idx_login_audit_user_occurred", "user_id", "occurred_at"),)
