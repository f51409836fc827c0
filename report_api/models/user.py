# File: report_api/models/user.py

"""
User model.

Root entity of the reporting schema; every other table points back here.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from report_api.models.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
