# File: report_api/services/report_service.py

"""
Report query layer.

Seven fixed, parameterless reports over the users / roles / profiles /
referrals / login_audit schema. Each report is a SQLAlchemy Core statement
built from explicit join, group and union operators, plus a small function
that runs it against a session and returns typed rows.

Every report executes as a single statement, so all of its sub-steps (the
group-then-join-back in ``latest_login`` for instance) see one consistent
snapshot of the store. Nothing here writes, caches or keeps state between
calls.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Type

from sqlalchemy import Select, and_, func, select, true, union
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, aliased

from report_api.core.errors import StoreQueryFailed
from report_api.models.login_audit import LoginAudit
from report_api.models.profile import Profile
from report_api.models.referral import Referral
from report_api.models.role import Role, UserRole
from report_api.models.user import User
from report_api.schemas.report import (
    LatestLoginRow,
    ProfileFullOuterRow,
    ReferralRow,
    ReportRow,
    RoleAssignmentRow,
    UserProfileRow,
    UserRoleRow,
)

logger = logging.getLogger(__name__)


# -----------------------------
# Statements
# -----------------------------

def users_with_roles_query() -> Select:
    """Inner join: one row per (user, role) assignment where both exist."""
    return (
        select(User.id.label("user_id"), User.email, Role.role_name)
        .select_from(User)
        .join(UserRole, UserRole.user_id == User.id)
        .join(Role, Role.id == UserRole.role_id)
        .order_by(User.id, Role.role_name)
    )


def users_with_profiles_query() -> Select:
    """Left join: every user, profile columns null when there is none."""
    return (
        select(
            User.id.label("user_id"),
            User.email,
            Profile.phone,
            Profile.city,
            Profile.country,
        )
        .select_from(User)
        .outerjoin(Profile, Profile.user_id == User.id)
        .order_by(User.id, Profile.id.asc().nulls_first())
    )


def roles_with_assignment_query() -> Select:
    """
    Right join from user_roles to roles, then left join to users.

    SQLAlchemy has no RIGHT JOIN, so the preserved side (roles) goes first
    and both hops are LEFT OUTER. A role with no assignments, or whose
    assignments only point at missing users, still yields a row with
    user_id/email null.
    """
    return (
        select(Role.role_name, User.id.label("user_id"), User.email)
        .select_from(Role)
        .outerjoin(UserRole, UserRole.role_id == Role.id)
        .outerjoin(User, User.id == UserRole.user_id)
        .order_by(Role.role_name, User.id.asc().nulls_first())
    )


def _user_profile_columns():
    return (
        User.id.label("user_id"),
        User.email,
        Profile.id.label("profile_id"),
        Profile.phone,
        Profile.city,
        Profile.country,
    )


def profiles_full_outer_query() -> Select:
    """
    Full outer join between users and profiles.

    Built as users LEFT JOIN profiles, UNION profiles LEFT JOIN users. UNION
    compares whole rows, so a matched (user, profile) pair produced by both
    halves comes out once. Orphan profiles (user_id null) sort last.
    """
    users_side = (
        select(*_user_profile_columns())
        .select_from(User)
        .outerjoin(Profile, Profile.user_id == User.id)
    )
    profiles_side = (
        select(*_user_profile_columns())
        .select_from(Profile)
        .outerjoin(User, User.id == Profile.user_id)
    )
    full_outer = union(users_side, profiles_side).subquery("full_outer")

    return select(full_outer).order_by(
        full_outer.c.user_id.asc().nulls_last(),
        full_outer.c.profile_id.asc().nulls_first(),
    )


def user_role_combinations_query() -> Select:
    """Cross join: every user paired with every role, no predicate."""
    return (
        select(User.id.label("user_id"), User.email, Role.role_name)
        .select_from(User)
        .join(Role, true())
        .order_by(User.id, Role.role_name)
    )


def referrals_query() -> Select:
    """
    Self join: users joined twice through the two ends of a referral.

    Both joins are inner, so an edge with a missing end is dropped.
    Most recent first; equal timestamps keep insertion (id) order.
    """
    referrer = aliased(User, name="referrer")
    referred = aliased(User, name="referred")

    return (
        select(
            Referral.referrer_user_id,
            referrer.email.label("referrer_email"),
            Referral.referred_user_id,
            referred.email.label("referred_email"),
            Referral.referred_at,
        )
        .select_from(Referral)
        .join(referrer, referrer.id == Referral.referrer_user_id)
        .join(referred, referred.id == Referral.referred_user_id)
        .order_by(Referral.referred_at.desc(), Referral.id.asc())
    )


def latest_login_query() -> Select:
    """
    Most recent login per user, left joined onto every user.

    1. max(occurred_at) per user_id
    2. join back to login_audit on (user_id, occurred_at = max)
    3. if several events share that maximum, keep the highest audit id
    4. left join the picked row onto users
    """
    latest = (
        select(
            LoginAudit.user_id,
            func.max(LoginAudit.occurred_at).label("max_occurred"),
        )
        .group_by(LoginAudit.user_id)
        .subquery("latest")
    )

    picked = (
        select(func.max(LoginAudit.id).label("audit_id"))
        .select_from(LoginAudit)
        .join(
            latest,
            and_(
                LoginAudit.user_id == latest.c.user_id,
                LoginAudit.occurred_at == latest.c.max_occurred,
            ),
        )
        .group_by(LoginAudit.user_id)
        .subquery("picked")
    )

    audit = aliased(LoginAudit, name="la_row")
    latest_rows = (
        select(audit.user_id, audit.ip_address, audit.occurred_at)
        .join(picked, picked.c.audit_id == audit.id)
        .subquery("la")
    )

    return (
        select(
            User.id.label("user_id"),
            User.email,
            latest_rows.c.ip_address,
            latest_rows.c.occurred_at,
        )
        .select_from(User)
        .outerjoin(latest_rows, latest_rows.c.user_id == User.id)
        .order_by(User.id)
    )


# -----------------------------
# Registry
# -----------------------------

@dataclass(frozen=True)
class ReportDefinition:
    name: str
    path: str
    summary: str
    build_query: Callable[[], Select]
    row_model: Type[ReportRow]


REPORTS: dict[str, ReportDefinition] = {
    report.name: report
    for report in (
        ReportDefinition(
            "users_with_roles",
            "/users-with-roles",
            "Users with at least one role (inner join)",
            users_with_roles_query,
            UserRoleRow,
        ),
        ReportDefinition(
            "users_with_profiles",
            "/users-with-profiles",
            "All users with profile info if present (left join)",
            users_with_profiles_query,
            UserProfileRow,
        ),
        ReportDefinition(
            "roles_with_assignment",
            "/roles-right-join",
            "All roles, assigned or not (right join)",
            roles_with_assignment_query,
            RoleAssignmentRow,
        ),
        ReportDefinition(
            "profiles_full_outer",
            "/profiles-full-outer",
            "Users and profiles, matched or not (full outer join emulation)",
            profiles_full_outer_query,
            ProfileFullOuterRow,
        ),
        ReportDefinition(
            "user_role_combinations",
            "/user-role-combos",
            "Every user paired with every role (cross join)",
            user_role_combinations_query,
            UserRoleRow,
        ),
        ReportDefinition(
            "referrals",
            "/referrals",
            "Who referred whom (self join)",
            referrals_query,
            ReferralRow,
        ),
        ReportDefinition(
            "latest_login",
            "/latest-login",
            "Latest login per user (argmax + left join)",
            latest_login_query,
            LatestLoginRow,
        ),
    )
}


# -----------------------------
# Execution
# -----------------------------

def run_report(db: Session, name: str) -> list[ReportRow]:
    """
    Execute one report and return all of its rows.

    Rows are fully materialized before returning. Any SQLAlchemy error,
    including one raised while fetching, becomes StoreQueryFailed and no
    rows are returned. Nothing is retried here.

    Raises:
        KeyError: unknown report name
        StoreQueryFailed: the store could not answer the query
    """
    report = REPORTS[name]
    try:
        result = db.execute(report.build_query())
        rows = [report.row_model.model_validate(dict(row)) for row in result.mappings()]
    except SQLAlchemyError as exc:
        logger.exception("Report %s failed", name)
        raise StoreQueryFailed(name, exc) from exc

    logger.debug("Report %s returned %d rows", name, len(rows), extra={"report": name})
    return rows


def users_with_roles(db: Session) -> list[UserRoleRow]:
    return run_report(db, "users_with_roles")


def users_with_profiles(db: Session) -> list[UserProfileRow]:
    return run_report(db, "users_with_profiles")


def roles_with_assignment(db: Session) -> list[RoleAssignmentRow]:
    return run_report(db, "roles_with_assignment")


def profiles_full_outer(db: Session) -> list[ProfileFullOuterRow]:
    return run_report(db, "profiles_full_outer")


def user_role_combinations(db: Session) -> list[UserRoleRow]:
    return run_report(db, "user_role_combinations")


def referrals(db: Session) -> list[ReferralRow]:
    return run_report(db, "referrals")


def latest_login(db: Session) -> list[LatestLoginRow]:
    return run_report(db, "latest_login")
