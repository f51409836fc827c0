# File: report_api/models/referral.py

"""
Referral model.

A directed "referrer -> referred" edge between two users, stamped with the
time of the referral.
"""

from datetime import datetime

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from report_api.models.base import Base
from report_api.models.types import UTCDateTime


class Referral(Base):
    __tablename__ = "referrals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    referrer_user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
    referred_user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
    referred_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
