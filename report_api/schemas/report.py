# File: report_api/schemas/report.py

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


# -----------------------------
# Report row shapes
# -----------------------------
# Optional fields are the ones an outer join may leave empty; they are
# serialized as null rather than dropped.

class ReportRow(BaseModel):
    class Config:
        from_attributes = True


class UserRoleRow(ReportRow):
    """Row of the inner-join and cross-join reports."""
    user_id: int
    email: str
    role_name: str


class UserProfileRow(ReportRow):
    user_id: int
    email: str
    phone: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None


class RoleAssignmentRow(ReportRow):
    role_name: str
    user_id: Optional[int] = None
    email: Optional[str] = None


class ProfileFullOuterRow(ReportRow):
    user_id: Optional[int] = None
    email: Optional[str] = None
    profile_id: Optional[int] = None
    phone: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None


class ReferralRow(ReportRow):
    referrer_user_id: int
    referrer_email: str
    referred_user_id: int
    referred_email: str
    referred_at: datetime


class LatestLoginRow(ReportRow):
    user_id: int
    email: str
    ip_address: Optional[str] = None
    occurred_at: Optional[datetime] = None


# -----------------------------
# Error / health bodies
# -----------------------------

class ReportErrorResponse(BaseModel):
    error: str
    report: str


class HealthResponse(BaseModel):
    status: str
    db: str
    time: datetime
