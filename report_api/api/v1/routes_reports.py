# File: report_api/api/v1/routes_reports.py

"""
Read-only report endpoints.

Each route runs one fixed report; none of them read a body or query
parameters. Store failures are raised as StoreQueryFailed and turned into
the uniform 500 body by the handler registered in main.py.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from report_api.api.deps import get_db
from report_api.schemas.report import (
    LatestLoginRow,
    ProfileFullOuterRow,
    ReferralRow,
    ReportErrorResponse,
    RoleAssignmentRow,
    UserProfileRow,
    UserRoleRow,
)
from report_api.services import report_service
from report_api.services.report_service import REPORTS

router = APIRouter()

_ERROR_RESPONSES = {500: {"model": ReportErrorResponse, "description": "Report query failed"}}


@router.get(
    REPORTS["users_with_roles"].path,
    response_model=list[UserRoleRow],
    summary=REPORTS["users_with_roles"].summary,
    responses=_ERROR_RESPONSES,
)
def users_with_roles(db: Session = Depends(get_db)):
    return report_service.users_with_roles(db)


@router.get(
    REPORTS["users_with_profiles"].path,
    response_model=list[UserProfileRow],
    summary=REPORTS["users_with_profiles"].summary,
    responses=_ERROR_RESPONSES,
)
def users_with_profiles(db: Session = Depends(get_db)):
    return report_service.users_with_profiles(db)


@router.get(
    REPORTS["roles_with_assignment"].path,
    response_model=list[RoleAssignmentRow],
    summary=REPORTS["roles_with_assignment"].summary,
    responses=_ERROR_RESPONSES,
)
def roles_right_join(db: Session = Depends(get_db)):
    return report_service.roles_with_assignment(db)


@router.get(
    REPORTS["profiles_full_outer"].path,
    response_model=list[ProfileFullOuterRow],
    summary=REPORTS["profiles_full_outer"].summary,
    responses=_ERROR_RESPONSES,
)
def profiles_full_outer(db: Session = Depends(get_db)):
    return report_service.profiles_full_outer(db)


@router.get(
    REPORTS["user_role_combinations"].path,
    response_model=list[UserRoleRow],
    summary=REPORTS["user_role_combinations"].summary,
    responses=_ERROR_RESPONSES,
)
def user_role_combos(db: Session = Depends(get_db)):
    return report_service.user_role_combinations(db)


@router.get(
    REPORTS["referrals"].path,
    response_model=list[ReferralRow],
    summary=REPORTS["referrals"].summary,
    responses=_ERROR_RESPONSES,
)
def referrals(db: Session = Depends(get_db)):
    return report_service.referrals(db)


@router.get(
    REPORTS["latest_login"].path,
    response_model=list[LatestLoginRow],
    summary=REPORTS["latest_login"].summary,
    responses=_ERROR_RESPONSES,
)
def latest_login(db: Session = Depends(get_db)):
    return report_service.latest_login(db)
