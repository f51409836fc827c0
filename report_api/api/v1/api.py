from fastapi import APIRouter

from report_api.api.v1.routes_health import router as health_router
from report_api.api.v1.routes_reports import router as reports_router


api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(reports_router, prefix="/reports", tags=["reports"])
